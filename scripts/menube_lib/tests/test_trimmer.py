"""Tests for fitting a branch into a bounded window."""

import pytest

from menube_lib.menu import MenuItem, MoreMarker, trim_branch


def make_branch(count):
    return [MenuItem(label=f"item{i}") for i in range(count)]


def labels(window):
    return [item.label for item in window]


def test_short_branch_is_returned_unchanged():
    branch = make_branch(4)

    assert trim_branch(branch, 3, 5) is branch
    assert trim_branch(branch, 3, 4) is branch


@pytest.mark.parametrize("limit", [None, 0])
def test_no_limit_disables_trimming(limit):
    branch = make_branch(50)

    assert trim_branch(branch, 30, limit) is branch


def test_negative_limit_raises():
    with pytest.raises(ValueError):
        trim_branch(make_branch(10), 0, -1)


def test_selection_near_end_shows_leading_marker():
    window = trim_branch(make_branch(10), 7, 5)

    assert len(window) == 5
    assert isinstance(window[0], MoreMarker)
    assert labels(window) == ["...", "item6", "item7", "item8", "item9"]
    assert not any(isinstance(item, MoreMarker) for item in window[1:])


def test_selection_at_top_shows_trailing_marker():
    window = trim_branch(make_branch(10), 0, 5)

    assert labels(window) == ["item0", "item1", "item2", "item3", "..."]
    assert isinstance(window[-1], MoreMarker)


def test_second_item_keeps_window_at_top():
    window = trim_branch(make_branch(10), 1, 5)

    assert labels(window)[:2] == ["item0", "item1"]
    assert not isinstance(window[0], MoreMarker)


def test_middle_selection_shows_both_markers():
    window = trim_branch(make_branch(20), 8, 5)

    assert labels(window) == ["...", "item8", "item9", "item10", "..."]
    assert isinstance(window[0], MoreMarker)
    assert isinstance(window[-1], MoreMarker)


def test_custom_marker_labels():
    window = trim_branch(make_branch(20), 8, 5, more_up_label="^", more_down_label="v")

    assert window[0].label == "^"
    assert window[-1].label == "v"


@pytest.mark.parametrize("length", [6, 7, 10, 23])
@pytest.mark.parametrize("limit", [3, 4, 5])
def test_window_properties(length, limit):
    branch = make_branch(length)

    for selected in range(length):
        window = trim_branch(branch, selected, limit)

        assert len(window) == limit
        assert branch[selected] in window

        start = selected if selected > 1 else 0
        if start + limit - 1 > length:
            start = length - limit + 1
        assert isinstance(window[0], MoreMarker) == (start > 1)

        shown = [item for item in window if not isinstance(item, MoreMarker)]
        reaches_end = shown[-1] is branch[-1]
        assert isinstance(window[-1], MoreMarker) == (not reaches_end)


def test_single_line_window_shows_selection():
    branch = make_branch(10)

    assert trim_branch(branch, 4, 1) == [branch[4]]


def test_two_line_window_keeps_selection():
    branch = make_branch(10)

    assert labels(trim_branch(branch, 1, 2)) == ["item1", "..."]
    assert labels(trim_branch(branch, 9, 2)) == ["...", "item9"]
