"""Options controlling a comparison run."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class CompareMode(str, Enum):
    MUTUAL = "mutual"
    TARGET = "target"


@dataclass(frozen=True, slots=True)
class CompareOptions:
    mode: CompareMode = CompareMode.MUTUAL
    collect_media: bool = True
    diff_timeout: float = 1.0
    diff_edit_cost: int = 4
    # Column count assumed when guessing row/col for table cells in the report.
    table_columns: int = 3
    preview_chars: int = 20
    include_report: bool = True

    def __post_init__(self) -> None:
        # Accept plain strings from the CLI or callers.
        object.__setattr__(self, "mode", CompareMode(self.mode))
        if self.table_columns < 1:
            raise ValueError(f"table_columns must be positive, got {self.table_columns}")
        if self.preview_chars < 1:
            raise ValueError(f"preview_chars must be positive, got {self.preview_chars}")
        if self.diff_timeout < 0:
            raise ValueError(f"diff_timeout must not be negative, got {self.diff_timeout}")
