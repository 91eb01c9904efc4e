"""
Slot Selection State Machine
Tracks the cells picked in the availability grid while a faculty record is edited.
"""

from enum import Enum
from typing import Iterable, List, Optional, Set

from utils.availability import deserialize_availability, serialize_selection
from utils.conflicts import BlockedMap, ConflictDescriptor, RosterEntry, build_conflict_index
from utils.errors import ValidationError
from utils.grid import Cell, GridConfig


class CellState(Enum):
    FREE_UNSELECTED = 'free_unselected'
    FREE_SELECTED = 'free_selected'
    BLOCKED = 'blocked'


class SlotSelection:
    """
    Per-cell selection with a blocked overlay.

    The overlay is rebuilt in full by `recompute`, which runs only when the
    target sections, the editing target or the roster change. Selected cells
    that become blocked are dropped from the selection, so no cell is ever
    both selected and blocked.
    """

    def __init__(self, grid: GridConfig, roster: Iterable[RosterEntry] = ()):
        self.grid = grid
        self.roster: List[RosterEntry] = list(roster)
        self.section_ids: List[int] = []
        self.editing_id: Optional[int] = None
        self.selected: Set[Cell] = set()
        self.blocked: BlockedMap = {}

    def _check_cell(self, day, period):
        if not self.grid.contains(day, period):
            raise ValidationError(f'Slot {day}-{period} is outside the timetable grid')

    def state(self, day: str, period: int) -> CellState:
        self._check_cell(day, period)
        if (day, period) in self.blocked:
            return CellState.BLOCKED
        if (day, period) in self.selected:
            return CellState.FREE_SELECTED
        return CellState.FREE_UNSELECTED

    def toggle(self, day: str, period: int) -> List[ConflictDescriptor]:
        """
        Click a cell.

        Returns the conflict descriptors of a blocked cell (selection untouched),
        otherwise flips the cell and returns an empty list.
        """
        self._check_cell(day, period)
        cell = (day, period)
        if cell in self.blocked:
            return list(self.blocked[cell])

        if cell in self.selected:
            self.selected.discard(cell)
        else:
            self.selected.add(cell)
        return []

    def recompute(self, section_ids: Iterable[int], editing_id: Optional[int] = None) -> Set[Cell]:
        """Rebuild the blocked overlay and return the selected cells it cleared."""
        self.section_ids = list(dict.fromkeys(section_ids))
        self.editing_id = editing_id
        self.blocked = build_conflict_index(self.section_ids, self.roster, editing_id, self.grid)

        # Silent removal; a warn-and-keep variant would return these without discarding
        cleared = {cell for cell in self.selected if cell in self.blocked}
        self.selected -= cleared
        return cleared

    # Recompute triggers

    def set_sections(self, section_ids: Iterable[int]) -> Set[Cell]:
        return self.recompute(section_ids, self.editing_id)

    def add_section(self, section_id: int) -> Set[Cell]:
        return self.recompute(self.section_ids + [section_id], self.editing_id)

    def remove_section(self, section_id: int) -> Set[Cell]:
        return self.recompute([s for s in self.section_ids if s != section_id], self.editing_id)

    def refresh_roster(self, roster: Iterable[RosterEntry]) -> Set[Cell]:
        self.roster = list(roster)
        return self.recompute(self.section_ids, self.editing_id)

    def start_editing(self, faculty: RosterEntry) -> Set[Cell]:
        """Load an existing record: its sections, its availability, and self-exclusion."""
        self.selected = deserialize_availability(list(faculty.availability), self.grid)
        return self.recompute([section_id for section_id, _ in faculty.sections], faculty.id)

    def stop_editing(self) -> Set[Cell]:
        self.selected = set()
        return self.recompute([], None)

    # Serializer bridge

    def load_availability(self, entries) -> Set[Cell]:
        self.selected = deserialize_availability(entries, self.grid)
        cleared = {cell for cell in self.selected if cell in self.blocked}
        self.selected -= cleared
        return cleared

    def to_availability(self):
        return serialize_selection(self.selected, self.grid)
