"""Which plants each kindergarten child looks after."""

from __future__ import annotations

KIDS = (
    "Alice", "Bob", "Charlie", "David", "Eve", "Fred",
    "Ginny", "Harriet", "Ileana", "Joseph", "Kincaid", "Larry",
)

_PLANTS = {
    "G": "grass",
    "C": "clover",
    "R": "radishes",
    "V": "violets",
}


def plants(diagram: str, student: str) -> list[str]:
    """Return the plants of ``student``, row by row, two cups per row."""
    try:
        place = 2 * KIDS.index(student)
    except ValueError:
        raise ValueError(f"unknown student: {student!r}") from None
    result: list[str] = []
    for line in diagram.splitlines():
        cups = line[place:place + 2]
        if len(cups) != 2:
            raise ValueError(f"row {line!r} has no cups for {student}")
        result.extend(_PLANTS.get(code, "unknown") for code in cups)
    return result