"""
editing_session.py — Editing mode and pending plant shared by all gardens.
"""

from typing import Optional

from garden_collection import GardenCollection
from models import Plant


class EditingSession:
    """Process-local editing state for one GardenCollection."""

    def __init__(self, collection: GardenCollection):
        self.collection = collection
        self.is_editing = False
        self.pending_plant: Optional[Plant] = None

    def toggle_editing(self) -> bool:
        """
        Flip editing mode and return the new value.

        Leaving editing mode drops the pending plant and every garden's
        selection. Cells are left as they are.
        """
        self.is_editing = not self.is_editing
        if not self.is_editing:
            self.pending_plant = None
            self.collection.clear_selections()
        return self.is_editing

    def choose_pending(self, plant: Plant) -> None:
        """Queue a plant for placement; always enters editing mode."""
        self.pending_plant = plant
        self.is_editing = True

    def cancel_pending(self) -> None:
        self.pending_plant = None

    def tap_cell(self, garden_index: int, cell_index: int) -> str:
        return self.collection.editor(garden_index).tap_cell(cell_index, self)

    def delete_selected(self, garden_index: int) -> Plant:
        return self.collection.editor(garden_index).delete_plant()

    def to_dict(self) -> dict:
        return {
            'is_editing': self.is_editing,
            'pending_plant': self.pending_plant.to_dict() if self.pending_plant is not None else None,
        }
