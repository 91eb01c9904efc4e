"""
Availability Serializer
Converts between a set of selected (day, period) cells and the day-grouped
period lists stored on a faculty record.
"""

from typing import Dict, Iterable, List, Set

from utils.errors import ValidationError
from utils.grid import Cell, GridConfig


def serialize_selection(selection: Iterable[Cell], grid: GridConfig) -> List[Dict]:
    """
    Group selected cells by day.

    Days come out in grid order with ascending periods. Days without a
    selected period are omitted, so no entry ever has an empty period list.
    """
    by_day: Dict[str, Set[int]] = {}
    for day, period in selection:
        if not grid.contains(day, period):
            raise ValidationError(f'Slot {day}-{period} is outside the timetable grid')
        by_day.setdefault(day, set()).add(period)

    return [
        {'day': day, 'periods': sorted(by_day[day])}
        for day in grid.days
        if by_day.get(day)
    ]


def deserialize_availability(entries, grid: GridConfig) -> Set[Cell]:
    """Expand availability entries into individual cells, rejecting malformed input."""
    if not isinstance(entries, list):
        raise ValidationError('availability must be a list of {day, periods} entries')

    cells: Set[Cell] = set()
    seen_days = set()
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValidationError('availability entries must be objects with day and periods')

        day = entry.get('day')
        if day not in grid.days:
            raise ValidationError(f'availability day "{day}" is not one of {", ".join(grid.days)}')
        if day in seen_days:
            raise ValidationError(f'availability lists {day} more than once')
        seen_days.add(day)

        periods = entry.get('periods')
        if not isinstance(periods, list) or not periods:
            raise ValidationError(f'availability for {day} must list at least one period')

        for period in periods:
            # bool is an int subclass; reject it explicitly
            if isinstance(period, bool) or not isinstance(period, int):
                raise ValidationError(f'availability period "{period}" on {day} is not an integer')
            if not grid.contains(day, period):
                raise ValidationError(
                    f'availability period {period} on {day} is outside 1..{grid.periods_per_day}'
                )
            if (day, period) in cells:
                raise ValidationError(f'availability lists period {period} on {day} twice')
            cells.add((day, period))

    return cells


def normalize_availability(entries, grid: GridConfig) -> List[Dict]:
    """Validate entries and return them in canonical order."""
    return serialize_selection(deserialize_availability(entries, grid), grid)
