import pytest

from utils.conflicts import RosterEntry
from utils.errors import ValidationError
from utils.grid import GridConfig
from utils.slot_selection import CellState, SlotSelection

GRID = GridConfig()


@pytest.fixture()
def roster():
    return [
        RosterEntry(id=1, name='F1', subject_code='CS201', sections=[(1, '2A')],
                    availability=[{'day': 'Monday', 'periods': [1, 2]}]),
        RosterEntry(id=2, name='F2', subject_code='CS301', sections=[(2, '2B')],
                    availability=[{'day': 'Tuesday', 'periods': [3]}]),
    ]


def test_toggle_flips_free_cells(roster):
    selection = SlotSelection(GRID, roster)

    assert selection.toggle('Monday', 1) == []
    assert selection.state('Monday', 1) == CellState.FREE_SELECTED
    assert selection.toggle('Monday', 1) == []
    assert selection.state('Monday', 1) == CellState.FREE_UNSELECTED


def test_toggle_only_affects_one_cell(roster):
    selection = SlotSelection(GRID, roster)
    selection.toggle('Wednesday', 4)

    assert selection.selected == {('Wednesday', 4)}


def test_blocked_cell_reports_conflicts_without_changing_selection(roster):
    selection = SlotSelection(GRID, roster)
    selection.set_sections([1])
    selection.toggle('Friday', 5)
    before = set(selection.selected)

    conflicts = selection.toggle('Monday', 2)

    assert [c.faculty_name for c in conflicts] == ['F1']
    assert selection.state('Monday', 2) == CellState.BLOCKED
    assert selection.selected == before


def test_recompute_clears_selected_cells_that_become_blocked(roster):
    selection = SlotSelection(GRID, roster)
    selection.toggle('Tuesday', 3)
    selection.toggle('Tuesday', 4)

    cleared = selection.add_section(2)

    assert cleared == {('Tuesday', 3)}
    assert selection.selected == {('Tuesday', 4)}
    assert not selection.selected & set(selection.blocked)


def test_removing_a_section_unblocks_its_cells(roster):
    selection = SlotSelection(GRID, roster)
    selection.set_sections([1, 2])
    assert ('Tuesday', 3) in selection.blocked

    selection.remove_section(2)

    assert ('Tuesday', 3) not in selection.blocked
    assert ('Monday', 1) in selection.blocked


def test_editing_excludes_own_availability(roster):
    selection = SlotSelection(GRID, roster)

    selection.start_editing(roster[0])

    assert selection.editing_id == 1
    assert selection.selected == {('Monday', 1), ('Monday', 2)}
    assert selection.blocked == {}
    assert selection.to_availability() == [{'day': 'Monday', 'periods': [1, 2]}]


def test_roster_refresh_recomputes_overlay(roster):
    selection = SlotSelection(GRID, [])
    selection.set_sections([1])
    selection.toggle('Monday', 1)

    cleared = selection.refresh_roster(roster)

    assert cleared == {('Monday', 1)}
    assert selection.state('Monday', 1) == CellState.BLOCKED


def test_stop_editing_resets_everything(roster):
    selection = SlotSelection(GRID, roster)
    selection.start_editing(roster[1])

    selection.stop_editing()

    assert selection.editing_id is None
    assert selection.selected == set()
    assert selection.blocked == {}


def test_loaded_availability_never_keeps_blocked_cells(roster):
    selection = SlotSelection(GRID, roster)
    selection.set_sections([1])

    cleared = selection.load_availability([{'day': 'Monday', 'periods': [2, 3]}])

    assert cleared == {('Monday', 2)}
    assert selection.to_availability() == [{'day': 'Monday', 'periods': [3]}]


def test_cells_outside_the_grid_are_rejected(roster):
    selection = SlotSelection(GRID, roster)

    with pytest.raises(ValidationError):
        selection.toggle('Saturday', 1)
    with pytest.raises(ValidationError):
        selection.toggle('Monday', 6)
