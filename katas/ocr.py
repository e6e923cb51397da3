"""Read digits drawn with pipes and underscores in a 3x4 grid."""

from __future__ import annotations

_DIGITS = {
    (" _ ", "| |", "|_|", "   "): "0",
    ("   ", "  |", "  |", "   "): "1",
    (" _ ", " _|", "|_ ", "   "): "2",
    (" _ ", " _|", " _|", "   "): "3",
    ("   ", "|_|", "  |", "   "): "4",
    (" _ ", "|_ ", " _|", "   "): "5",
    (" _ ", "|_ ", "|_|", "   "): "6",
    (" _ ", "  |", "  |", "   "): "7",
    (" _ ", "|_|", "|_|", "   "): "8",
    (" _ ", "|_|", " _|", "   "): "9",
}

_ROWS = 4
_COLUMNS = 3


class OcrError(ValueError):
    """Base class for errors in OCR input."""


class InvalidRowCountError(OcrError):
    """Raised when the number of lines is not a multiple of four."""

    def __init__(self, count: int) -> None:
        super().__init__(f"invalid row count: {count}")
        self.count = count


class InvalidColumnCountError(OcrError):
    """Raised when a line's length is not a multiple of three."""

    def __init__(self, count: int) -> None:
        super().__init__(f"invalid column count: {count}")
        self.count = count


def _lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _validate(text: str) -> list[str]:
    lines = _lines(text)
    if len(lines) % _ROWS:
        raise InvalidRowCountError(len(lines))
    for line in lines:
        if len(line) % _COLUMNS:
            raise InvalidColumnCountError(len(line))
    return lines


def convert(text: str) -> str:
    """Return the digits drawn in ``text``, rows joined by commas, '?' for garbled ones."""
    lines = _validate(text)
    numbers = []
    for start in range(0, len(lines), _ROWS):
        block = lines[start:start + _ROWS]
        numbers.append(
            "".join(
                _DIGITS.get(
                    tuple(row[col:col + _COLUMNS] for row in block), "?"
                )
                for col in range(0, len(block[0]), _COLUMNS)
            )
        )
    return ",".join(numbers)