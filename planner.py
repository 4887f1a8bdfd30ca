"""
planner.py — Facade used by the presentation layer.

GardenPlanner bundles the plant catalog, the reference index, the garden
collection and the editing session. Every method is synchronous; callers
re-render from state() after each call.
"""

import logging
from typing import Optional, List, Dict, Any, Iterable, Union

from editing_session import EditingSession
from garden_collection import GardenCollection, DEFAULT_ROWS, DEFAULT_COLUMNS
from models import Plant, PlantInfoRecord, DEFAULT_GARDEN_NAME
from plant_catalog import list_catalog, create_plant
from plant_info import PlantInfoIndex, build_info_card, SCHEMA_FULL


logger = logging.getLogger(__name__)

FIRST_GARDEN_NAME = "My Garden"


class GardenPlanner:
    """One user's planning workspace."""

    def __init__(self, info_index: Optional[PlantInfoIndex] = None, first_garden: bool = True):
        # An index that has not been loaded yet answers "not found" for everything
        self.info_index = info_index if info_index is not None else PlantInfoIndex()
        self.gardens = GardenCollection()
        self.session = EditingSession(self.gardens)
        if first_garden:
            self.gardens.add_garden(FIRST_GARDEN_NAME, DEFAULT_ROWS, DEFAULT_COLUMNS)

    # ========================================
    # Catalog and Reference Data
    # ========================================

    def list_catalog(self, filter_text: str = "") -> List[str]:
        return list_catalog(filter_text)

    def load_info_index(self, raw_rows: Iterable, schema: str = SCHEMA_FULL) -> int:
        """Replace the reference index from raw rows; returns the record count."""
        self.info_index = PlantInfoIndex.load(raw_rows, schema=schema)
        logger.info("Plant info index loaded with %d records", len(self.info_index))
        return len(self.info_index)

    def lookup_info(self, info_id: str) -> Optional[PlantInfoRecord]:
        return self.info_index.lookup(info_id)

    def info_card(self, plant: Plant) -> Dict[str, Any]:
        return build_info_card(plant.name, plant.info_id, self.lookup_info(plant.info_id))

    # ========================================
    # Gardens
    # ========================================

    def create_garden(self, name: str = DEFAULT_GARDEN_NAME, rows: int = DEFAULT_ROWS,
                      columns: int = DEFAULT_COLUMNS) -> int:
        return self.gardens.add_garden(name, rows, columns)

    def rename_garden(self, garden_index: int, name: str) -> None:
        self.gardens.editor(garden_index).rename(name)

    # ========================================
    # Editing
    # ========================================

    def tap_cell(self, garden_index: int, cell_index: int) -> str:
        return self.session.tap_cell(garden_index, cell_index)

    def delete_selected(self, garden_index: int) -> Plant:
        return self.session.delete_selected(garden_index)

    def toggle_editing(self) -> bool:
        return self.session.toggle_editing()

    def choose_pending(self, plant: Union[Plant, str]) -> Plant:
        """Queue a plant, given as a Plant or a catalog name."""
        if isinstance(plant, str):
            plant = create_plant(plant)
        self.session.choose_pending(plant)
        return plant

    def cancel_pending(self) -> None:
        self.session.cancel_pending()

    def state(self) -> Dict[str, Any]:
        return {
            'session': self.session.to_dict(),
            'gardens': self.gardens.to_list(),
            'info_records': len(self.info_index),
        }
