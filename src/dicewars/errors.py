from __future__ import annotations


class DicewarsError(Exception):
    """Base class for errors raised by the board core."""


class InvalidConfigurationError(DicewarsError, ValueError):
    """The board cannot be set up with the requested parameters."""


class OutOfBoundsError(DicewarsError, IndexError):
    def __init__(self, row: int, col: int, rows: int, columns: int) -> None:
        super().__init__(
            f"Cell ({row}, {col}) is outside the {rows}x{columns} board."
        )
        self.row = row
        self.col = col
