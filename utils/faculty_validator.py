"""
Faculty Record Validator
Server-side gate run on every create and update before anything is written.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from models import Section, Subject
from utils.availability import deserialize_availability, serialize_selection
from utils.conflicts import RosterEntry, build_conflict_index, find_collisions
from utils.errors import ConflictError, NotFoundError, ValidationError
from utils.grid import Cell, GridConfig


@dataclass
class ValidatedFaculty:
    """A payload that passed every check, resolved against the store."""
    name: str
    subject: Subject
    sections: List[Section]
    availability: List[Dict]
    cells: List[Cell] = field(default_factory=list)


def _validate_name(payload) -> str:
    name = payload.get('name')
    if not isinstance(name, str) or not name.strip():
        raise ValidationError('name is required')
    return name.strip()


def _resolve_subject(payload) -> Subject:
    code = payload.get('subject_code')
    if not isinstance(code, str) or not code.strip():
        raise ValidationError('subject_code is required')

    subject = Subject.query.filter_by(code=code.strip()).first()
    if not subject:
        raise NotFoundError(f'Subject with code "{code.strip()}" not found')
    return subject


def _resolve_sections(payload, subject: Subject) -> List[Section]:
    section_ids = payload.get('section_ids')
    if not isinstance(section_ids, list) or not section_ids:
        raise ValidationError('At least one section must be selected (section_ids)')
    if any(isinstance(s, bool) or not isinstance(s, int) for s in section_ids):
        raise ValidationError('section_ids must be integers')

    unique_ids = list(dict.fromkeys(section_ids))
    found = {s.id: s for s in Section.query.filter(Section.id.in_(unique_ids)).all()}

    sections = []
    for section_id in unique_ids:
        section = found.get(section_id)
        if section is None:
            raise ValidationError(f'Section {section_id} does not exist')
        if section.department_id != subject.department_id:
            raise ValidationError(
                f'Section {section.code} does not belong to the department of subject {subject.code}'
            )
        if not section.is_assignable:
            raise ValidationError(f'Section {section.code} is a first-year {section.cycle} cycle section')
        sections.append(section)
    return sections


def _validate_availability(payload, grid: GridConfig) -> List[Cell]:
    entries = payload.get('availability')
    if not entries:
        raise ValidationError('At least one availability slot is required')
    cells = deserialize_availability(entries, grid)
    return sorted(cells, key=lambda cell: (grid.day_index(cell[0]), cell[1]))


def validate_faculty_payload(payload,
                             grid: GridConfig,
                             roster: Iterable[RosterEntry],
                             editing_id: Optional[int] = None) -> ValidatedFaculty:
    """
    Check a create/update payload in order, failing on the first problem.

    1. name, 2. subject_code, 3. section_ids, 4. availability,
    5. conflicts against `roster` (excluding `editing_id`).

    Raises:
        ValidationError, NotFoundError, ConflictError
    """
    if not isinstance(payload, dict):
        raise ValidationError('Request body must be a JSON object')

    name = _validate_name(payload)
    subject = _resolve_subject(payload)
    sections = _resolve_sections(payload, subject)
    cells = _validate_availability(payload, grid)

    blocked = build_conflict_index([s.id for s in sections], roster, editing_id, grid)
    collisions = find_collisions(blocked, cells)
    if collisions:
        raise ConflictError(collisions)

    return ValidatedFaculty(
        name=name,
        subject=subject,
        sections=sections,
        availability=serialize_selection(cells, grid),
        cells=cells
    )
