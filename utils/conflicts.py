"""
Conflict Index Builder
Computes which grid cells are already claimed by other faculty teaching a shared section.

The same function backs the interactive blocked-slot hints and the server-side
validation gate, so both always agree on what counts as a conflict.
"""

from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

from utils.grid import Cell, GridConfig, slot_key


@dataclass
class RosterEntry:
    """Read-only snapshot of one faculty record."""
    id: int
    name: str
    subject_code: str
    sections: List[Tuple[int, str]] = field(default_factory=list)  # (section_id, section_code)
    availability: List[Dict] = field(default_factory=list)         # [{'day': ..., 'periods': [...]}]

    def cells(self):
        for entry in self.availability:
            for period in entry.get('periods') or []:
                yield entry.get('day'), period


@dataclass(frozen=True)
class ConflictDescriptor:
    """Who holds a blocked cell, and for which shared section."""
    faculty_id: int
    faculty_name: str
    subject_code: str
    section_id: int
    section_code: str

    def to_dict(self):
        return {
            'faculty_id': self.faculty_id,
            'faculty_name': self.faculty_name,
            'subject_code': self.subject_code,
            'section_id': self.section_id,
            'section_code': self.section_code
        }


BlockedMap = Dict[Cell, List[ConflictDescriptor]]


def build_conflict_index(section_ids: Iterable[int],
                         roster: Iterable[RosterEntry],
                         editing_id: Optional[int] = None,
                         grid: Optional[GridConfig] = None) -> BlockedMap:
    """
    Map every cell held by another faculty for one of `section_ids` to its descriptors.

    Args:
        section_ids: Sections the edited record will teach
        roster: Existing faculty, in display order
        editing_id: Record being edited; its own availability never blocks itself
        grid: When given, cells outside the grid are ignored

    Returns:
        Ordered dict of (day, period) -> descriptors. Descriptors are not
        deduplicated: a faculty sharing two target sections in one cell
        contributes two descriptors. Within a cell, roster order is kept.
    """
    targets = set(section_ids)
    blocked: BlockedMap = OrderedDict()
    if not targets:
        return blocked

    for faculty in roster:
        if editing_id is not None and faculty.id == editing_id:
            continue

        for section_id, section_code in faculty.sections:
            if section_id not in targets:
                continue

            descriptor = ConflictDescriptor(
                faculty_id=faculty.id,
                faculty_name=faculty.name,
                subject_code=faculty.subject_code,
                section_id=section_id,
                section_code=section_code
            )
            for day, period in faculty.cells():
                if grid is not None and not grid.contains(day, period):
                    continue
                blocked.setdefault((day, period), []).append(descriptor)

    return blocked


def find_collisions(blocked: BlockedMap, cells: Iterable[Cell]) -> List[Dict]:
    """List every descriptor standing on one of `cells`, tagged with the cell."""
    collisions = []
    for day, period in cells:
        for descriptor in blocked.get((day, period), []):
            item = descriptor.to_dict()
            item.update({'day': day, 'period': period})
            collisions.append(item)
    return collisions


def blocked_map_to_dict(blocked: BlockedMap) -> Dict[str, List[Dict]]:
    """JSON form with 'Monday-1' style keys."""
    return {
        slot_key(day, period): [d.to_dict() for d in descriptors]
        for (day, period), descriptors in blocked.items()
    }
