"""
models.py — Python dataclasses for the garden planner.

Plants, reference records and gardens. Cells of a garden hold either a
Plant or the EMPTY sentinel; always compare with `is EMPTY`.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional, List, Tuple, Dict, Any


# Marker for an empty cell
EMPTY = None

DEFAULT_GARDEN_NAME = "New Garden"


def derive_info_id(name: str) -> str:
    """
    Derive the reference-data identifier from a plant name.

    Examples:
        "Olive" -> "olive"
        "Date Palm" -> "datepalm"
    """
    if not name:
        return ""
    return name.lower().replace(" ", "")


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Plant:
    """A placed plant. Every instance gets its own id, even for the same species."""
    name: str
    id: str = field(default_factory=_new_id)

    @property
    def info_id(self) -> str:
        """Join key into the PlantInfoIndex."""
        return derive_info_id(self.name)

    def to_dict(self) -> Dict[str, Any]:
        return {'id': self.id, 'name': self.name, 'info_id': self.info_id}


@dataclass
class PlantInfoRecord:
    """One row of the reference dataset. Numeric-looking fields stay raw strings."""
    id: str = ""
    name: str = ""
    scientific_name: str = ""
    origin_area: str = ""
    family: str = ""
    light_requirement: str = ""
    temperature_requirement: str = ""
    water_requirement: str = ""
    lifecycle_kind: str = ""
    seed_to_seedling_days: str = ""
    seedling_to_growth_days: str = ""
    growth_to_flower_days: str = ""
    flower_to_dormant_or_death_days: str = ""
    dormant_to_growth_days: str = ""
    # Legacy two-column datasets only carry a free-text description
    description: str = ""

    @property
    def is_perennial(self) -> bool:
        return self.lifecycle_kind == 'Perennial'

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'scientific_name': self.scientific_name,
            'origin_area': self.origin_area,
            'family': self.family,
            'light_requirement': self.light_requirement,
            'temperature_requirement': self.temperature_requirement,
            'water_requirement': self.water_requirement,
            'lifecycle_kind': self.lifecycle_kind,
            'seed_to_seedling_days': self.seed_to_seedling_days,
            'seedling_to_growth_days': self.seedling_to_growth_days,
            'growth_to_flower_days': self.growth_to_flower_days,
            'flower_to_dormant_or_death_days': self.flower_to_dormant_or_death_days,
            'dormant_to_growth_days': self.dormant_to_growth_days,
            'description': self.description,
        }


def _check_dimension(label: str, value: int) -> int:
    # bool is an int subclass; a grid of True rows is a caller bug
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Garden {label} must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"Garden {label} must be positive, got {value}")
    return value


@dataclass
class Garden:
    """One rectangular grid of cells, stored row-major."""
    name: str = DEFAULT_GARDEN_NAME
    rows: int = 3
    columns: int = 3
    id: str = field(default_factory=_new_id)
    cells: List[Optional[Plant]] = field(default_factory=list)
    moving_index: Optional[int] = None

    def __post_init__(self):
        _check_dimension('rows', self.rows)
        _check_dimension('columns', self.columns)
        if not self.name:
            self.name = DEFAULT_GARDEN_NAME
        if not self.cells:
            self.cells = [EMPTY] * (self.rows * self.columns)
        elif len(self.cells) != self.rows * self.columns:
            raise ValueError(
                f"Garden needs {self.rows * self.columns} cells, got {len(self.cells)}"
            )

    @property
    def size(self) -> int:
        return self.rows * self.columns

    @property
    def occupied_count(self) -> int:
        return sum(1 for c in self.cells if c is not EMPTY)

    def check_index(self, index: int) -> int:
        """Reject indices outside the grid, negatives included."""
        if not 0 <= index < self.size:
            raise IndexError(f"Cell index {index} out of range for {self.size} cells")
        return index

    def cell(self, index: int) -> Optional[Plant]:
        return self.cells[self.check_index(index)]

    def is_empty(self, index: int) -> bool:
        return self.cell(index) is EMPTY

    def row_col(self, index: int) -> Tuple[int, int]:
        """Zero-based (row, column) of a cell index."""
        return divmod(self.check_index(index), self.columns)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'rows': self.rows,
            'columns': self.columns,
            'moving_index': self.moving_index,
            'cells': [c.to_dict() if c is not EMPTY else None for c in self.cells],
        }
