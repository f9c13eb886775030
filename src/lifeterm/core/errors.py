"""Errors raised by the board engine."""

from enum import Enum


class OutOfBoundsKind(Enum):
    """Which coordinate was rejected and in which direction."""

    NEGATIVE_ROW = "negative_row"
    NEGATIVE_COLUMN = "negative_column"
    ROW_TOO_LARGE = "row_too_large"
    COLUMN_TOO_LARGE = "column_too_large"


_MESSAGES = {
    OutOfBoundsKind.NEGATIVE_ROW: "Row {row} must not be negative",
    OutOfBoundsKind.NEGATIVE_COLUMN: "Column {column} must not be negative",
    OutOfBoundsKind.ROW_TOO_LARGE: "Row {row} exceeds dimension ({rows} rows)",
    OutOfBoundsKind.COLUMN_TOO_LARGE: "Column {column} exceeds dimension ({columns} columns)",
}


class OutOfBounds(IndexError):
    """Raised when a cell is addressed outside the board.

    Subclasses IndexError so callers that only care about bounded access
    can keep catching the builtin.
    """

    def __init__(self, kind: OutOfBoundsKind, row: int, column: int, rows: int, columns: int) -> None:
        self.kind = kind
        self.row = row
        self.column = column
        self.rows = rows
        self.columns = columns
        super().__init__(_MESSAGES[kind].format(row=row, column=column, rows=rows, columns=columns))

    @classmethod
    def check(cls, row: int, column: int, rows: int, columns: int) -> None:
        """Raise for the first invalid coordinate, rows before columns.

        Args:
            row: Row coordinate
            column: Column coordinate
            rows: Number of rows on the board
            columns: Number of columns on the board

        Raises:
            OutOfBounds: If either coordinate is outside the board
        """
        if row < 0:
            raise cls(OutOfBoundsKind.NEGATIVE_ROW, row, column, rows, columns)
        if row >= rows:
            raise cls(OutOfBoundsKind.ROW_TOO_LARGE, row, column, rows, columns)
        if column < 0:
            raise cls(OutOfBoundsKind.NEGATIVE_COLUMN, row, column, rows, columns)
        if column >= columns:
            raise cls(OutOfBoundsKind.COLUMN_TOO_LARGE, row, column, rows, columns)
