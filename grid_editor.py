"""
grid_editor.py — Cell tap handling for a single garden.

A garden is either idle (moving_index is None) or has one occupied cell
selected for relocation. tap_cell resolves a tap in this order:

1. tapping the selected cell deselects it
2. with a selection, an empty target receives the plant; an occupied
   target absorbs the tap and the selection stays
3. a pending plant from the catalog fills an empty cell
4. an occupied cell becomes the selection (cancelling any pending plant)
5. anything else is ignored

Taps outside editing mode are ignored.
"""

import logging
from typing import Optional

from models import EMPTY, Garden, Plant


logger = logging.getLogger(__name__)

DESELECTED = 'deselected'
MOVED = 'moved'
ABSORBED = 'absorbed'
PLACED = 'placed'
SELECTED = 'selected'
IGNORED = 'ignored'


class GridEditor:
    """Editing operations on one Garden's cells and selection."""

    def __init__(self, garden: Garden):
        self.garden = garden

    @property
    def moving_index(self) -> Optional[int]:
        return self.garden.moving_index

    @property
    def has_selection(self) -> bool:
        return self.garden.moving_index is not None

    def tap_cell(self, index: int, session) -> str:
        """Apply a tap on cell `index` and return the action taken."""
        garden = self.garden
        cells = garden.cells
        garden.check_index(index)

        if not session.is_editing:
            return IGNORED

        selected = garden.moving_index
        if selected == index:
            garden.moving_index = None
            return DESELECTED

        if selected is not None:
            if cells[index] is not EMPTY:
                return ABSORBED
            cells[index] = cells[selected]
            cells[selected] = EMPTY
            garden.moving_index = None
            logger.debug("Moved %s from cell %d to %d in %r", cells[index].name, selected, index, garden.name)
            return MOVED

        if session.pending_plant is not None and cells[index] is EMPTY:
            cells[index] = session.pending_plant
            session.pending_plant = None
            return PLACED

        if cells[index] is not EMPTY:
            garden.moving_index = index
            session.pending_plant = None
            return SELECTED

        return IGNORED

    def delete_plant(self) -> Plant:
        """Remove the selected plant. Requires a selection."""
        garden = self.garden
        if not self.has_selection:
            raise RuntimeError(f"No plant selected in garden {garden.name!r}")
        index = garden.moving_index
        removed = garden.cells[index]
        garden.cells[index] = EMPTY
        garden.moving_index = None
        return removed

    def rename(self, new_name: str) -> None:
        # Taken as typed; empty names are only normalized when a garden is built
        self.garden.name = new_name

    def clear_selection(self) -> None:
        self.garden.moving_index = None
