"""
Faculty service
Roster and section reads, plus the validated write path for faculty records.
"""

import threading
from contextlib import contextmanager
from typing import Iterable, List, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from models import db, AvailabilityEntry, Department, Faculty, Section, SlotClaim
from utils.conflicts import BlockedMap, RosterEntry, build_conflict_index, find_collisions
from utils.errors import ConflictError, FacultyError, NotFoundError, StoreError
from utils.faculty_validator import ValidatedFaculty, validate_faculty_payload
from utils.grid import GridConfig

# Fixed pool of striped locks; a section always maps to the same stripe
LOCK_STRIPES = 64
_section_locks = [threading.Lock() for _ in range(LOCK_STRIPES)]


def _stripes_for(section_ids: Iterable[int]) -> List[int]:
    return sorted({section_id % LOCK_STRIPES for section_id in section_ids})


@contextmanager
def section_write_lock(section_ids: Iterable[int]):
    """Hold the stripe locks of every section, in ascending stripe order."""
    locks = [_section_locks[stripe] for stripe in _stripes_for(section_ids)]

    acquired = []
    try:
        for lock in locks:
            lock.acquire()
            acquired.append(lock)
        yield
    finally:
        for lock in reversed(acquired):
            lock.release()


def fetch_roster(exclude_id: Optional[int] = None) -> List[RosterEntry]:
    """All faculty as conflict-builder snapshots, ordered by id."""
    query = Faculty.query.order_by(Faculty.id)
    if exclude_id is not None:
        query = query.filter(Faculty.id != exclude_id)
    return [faculty.to_roster_entry() for faculty in query.all()]


def fetch_sections(department_id: int) -> List[Section]:
    """Sections of a department that can take a faculty (no first-year cycle sections)."""
    department = db.session.get(Department, department_id)
    if not department:
        raise NotFoundError(f'Department {department_id} not found')

    return Section.query.filter(
        Section.department_id == department_id,
        db.or_(Section.cycle.is_(None), Section.cycle == '')
    ).order_by(Section.year, Section.code).all()


def compute_blocked_slots(section_ids: Iterable[int],
                          grid: GridConfig,
                          editing_id: Optional[int] = None) -> BlockedMap:
    """Blocked-slot hints for the editing form. Reads the roster without locking."""
    blocked = build_conflict_index(section_ids, fetch_roster(), editing_id, grid)
    current_app.logger.info(f'Blocked slots: {len(blocked)}')
    return blocked


def _section_ids_to_lock(payload) -> List[int]:
    section_ids = payload.get('section_ids') if isinstance(payload, dict) else None
    if not isinstance(section_ids, list):
        return []
    return [s for s in section_ids if isinstance(s, int) and not isinstance(s, bool)]


def _apply(faculty: Faculty, validated: ValidatedFaculty):
    """Write validated fields, replacing availability and claims wholesale."""
    if faculty.id is not None:
        # Old rows must be gone before new ones hit the unique constraints
        faculty.availability_entries = []
        faculty.claims = []
        db.session.flush()

    faculty.name = validated.name
    faculty.subject = validated.subject
    faculty.department_id = validated.subject.department_id
    faculty.sections = list(validated.sections)
    faculty.availability_entries = [
        AvailabilityEntry(day=entry['day'], periods=list(entry['periods']))
        for entry in validated.availability
    ]
    faculty.claims = [
        SlotClaim(section_id=section.id, day=day, period=period)
        for section in validated.sections
        for day, period in validated.cells
    ]


def submit_faculty(payload, grid: GridConfig, editing_id: Optional[int] = None) -> Faculty:
    """
    Create (editing_id is None) or fully replace a faculty record.

    Validation and commit run while holding the locks of the submitted
    sections, against a roster read inside the lock. If another process still
    commits a colliding claim first, the database constraint rejects this one
    and the collision is reported as a ConflictError.

    Raises:
        ValidationError, NotFoundError, ConflictError, StoreError
    """
    with section_write_lock(_section_ids_to_lock(payload)):
        db.session.expire_all()

        faculty = None
        if editing_id is not None:
            faculty = db.session.get(Faculty, editing_id)
            if not faculty:
                raise NotFoundError(f'Faculty {editing_id} not found')

        try:
            validated = validate_faculty_payload(payload, grid, fetch_roster(exclude_id=editing_id), editing_id)
        except FacultyError as e:
            current_app.logger.warning(f'Faculty submission rejected: {e.message}')
            raise

        try:
            if faculty is None:
                faculty = Faculty()
                db.session.add(faculty)
            _apply(faculty, validated)
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            section_ids = [s.id for s in validated.sections]
            blocked = build_conflict_index(section_ids, fetch_roster(exclude_id=editing_id), editing_id, grid)
            collisions = find_collisions(blocked, validated.cells)
            if collisions:
                current_app.logger.warning(f'Faculty submission lost a write race: {len(collisions)} conflicts')
                raise ConflictError(collisions)
            current_app.logger.exception('Integrity error while saving faculty')
            raise StoreError('Server error while saving faculty')
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception('Error saving faculty')
            raise StoreError('Server error while saving faculty')

    action = 'updated' if editing_id is not None else 'created'
    current_app.logger.info(f'Faculty {action} successfully: {faculty.name}')
    return faculty


def delete_faculty(faculty_id: int):
    """Remove a faculty record; its claims go with it and the slots become free."""
    faculty = db.session.get(Faculty, faculty_id)
    if not faculty:
        raise NotFoundError(f'Faculty {faculty_id} not found')

    name = faculty.name
    try:
        db.session.delete(faculty)
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Error deleting faculty')
        raise StoreError('Server error while deleting faculty')

    current_app.logger.info(f'Faculty deleted successfully: {name}')
