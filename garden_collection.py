"""
garden_collection.py — Ordered, append-only list of gardens.

Insertion order is display order. Gardens are never removed or reordered.
"""

from typing import Iterator, List

from grid_editor import GridEditor
from models import Garden, DEFAULT_GARDEN_NAME


DEFAULT_ROWS = 3
DEFAULT_COLUMNS = 3

# Bounds of the size picker; the core accepts any positive size
MIN_DIMENSION = 1
MAX_DIMENSION = 9


class GardenCollection:
    """All gardens of one planning session."""

    def __init__(self):
        self._gardens: List[Garden] = []

    def __len__(self) -> int:
        return len(self._gardens)

    def __iter__(self) -> Iterator[Garden]:
        return iter(self._gardens)

    def add_garden(self, name: str = DEFAULT_GARDEN_NAME, rows: int = DEFAULT_ROWS,
                   columns: int = DEFAULT_COLUMNS) -> int:
        """
        Append an all-empty rows x columns garden and return its index.

        Raises ValueError for non-positive dimensions.
        """
        garden = Garden(name=name, rows=rows, columns=columns)
        self._gardens.append(garden)
        return len(self._gardens) - 1

    def get(self, index: int) -> Garden:
        if not 0 <= index < len(self._gardens):
            raise IndexError(f"Garden index {index} out of range")
        return self._gardens[index]

    def editor(self, index: int) -> GridEditor:
        return GridEditor(self.get(index))

    def clear_selections(self) -> None:
        """Drop the moving selection of every garden."""
        for garden in self._gardens:
            GridEditor(garden).clear_selection()

    def to_list(self) -> list:
        return [g.to_dict() for g in self._gardens]
