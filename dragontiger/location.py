"""Source locations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Location:
    """A span in a source file.

    The end column is exclusive; when no end is given, the location is
    a single point equal to its beginning.
    """

    filename: str | None = None
    line: int = 1
    column: int = 1
    end_line: int | None = None
    end_column: int | None = None

    def __post_init__(self) -> None:
        if self.end_line is None:
            object.__setattr__(self, "end_line", self.line)
        if self.end_column is None:
            object.__setattr__(self, "end_column", self.column)

    def __str__(self) -> str:
        text = f"{self.line}.{self.column}"
        if self.filename is not None:
            text = f"{self.filename}:{text}"
        end_col = self.end_column - 1 if self.end_column > 0 else 0
        if self.line < self.end_line:
            text += f"-{self.end_line}.{end_col}"
        elif self.column < end_col:
            text += f"-{end_col}"
        return text


NO_LOCATION = Location("<none>", 0, 0)
"""Stands for the absence of a location, e.g. for primitive declarations."""