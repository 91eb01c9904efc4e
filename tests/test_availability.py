import pytest

from utils.availability import deserialize_availability, normalize_availability, serialize_selection
from utils.errors import ValidationError
from utils.grid import GridConfig, slot_key

GRID = GridConfig()


def test_serialize_groups_by_day_in_grid_order():
    selection = {('Wednesday', 3), ('Monday', 2), ('Monday', 1), ('Wednesday', 1)}

    assert serialize_selection(selection, GRID) == [
        {'day': 'Monday', 'periods': [1, 2]},
        {'day': 'Wednesday', 'periods': [1, 3]},
    ]


def test_serialize_empty_selection_emits_nothing():
    assert serialize_selection(set(), GRID) == []


def test_round_trip_of_well_formed_entries():
    entries = [
        {'day': 'Monday', 'periods': [1, 4]},
        {'day': 'Tuesday', 'periods': [2]},
        {'day': 'Friday', 'periods': [1, 2, 3, 4, 5]},
    ]
    assert serialize_selection(deserialize_availability(entries, GRID), GRID) == entries


def test_normalize_sorts_periods_and_days():
    entries = [{'day': 'Friday', 'periods': [3, 1]}, {'day': 'Monday', 'periods': [5]}]

    assert normalize_availability(entries, GRID) == [
        {'day': 'Monday', 'periods': [5]},
        {'day': 'Friday', 'periods': [1, 3]},
    ]


@pytest.mark.parametrize('entries', [
    [{'day': 'Monday', 'periods': [1]}, {'day': 'Monday', 'periods': [2]}],
    [{'day': 'Monday', 'periods': []}],
    [{'day': 'Saturday', 'periods': [1]}],
    [{'day': 'Monday', 'periods': [6]}],
    [{'day': 'Monday', 'periods': [0]}],
    [{'day': 'Monday', 'periods': ['1']}],
    [{'day': 'Monday', 'periods': [True]}],
    [{'day': 'Monday', 'periods': [2, 2]}],
    [{'day': 'Monday'}],
    ['Monday-1'],
    {'day': 'Monday', 'periods': [1]},
])
def test_malformed_entries_are_rejected(entries):
    with pytest.raises(ValidationError):
        deserialize_availability(entries, GRID)


def test_period_range_follows_the_grid():
    grid = GridConfig(periods_per_day=7)

    assert deserialize_availability([{'day': 'Monday', 'periods': [7]}], grid) == {('Monday', 7)}
    with pytest.raises(ValidationError):
        deserialize_availability([{'day': 'Monday', 'periods': [7]}], GRID)


def test_grid_rejects_bad_period_counts():
    with pytest.raises(ValueError):
        GridConfig(periods_per_day=0)


def test_slot_keys():
    assert slot_key('Monday', 3) == 'Monday-3'
    assert GRID.to_dict()['periods'] == [1, 2, 3, 4, 5]
