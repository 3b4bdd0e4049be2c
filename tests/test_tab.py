import io

import pytest

from libmykit import tab


def test_put_tab_default_separator():
    stream = io.StringIO()
    count = tab.put_tab(["a", "b", "c"], None, stream)
    assert stream.getvalue() == "a, b, c"
    assert count == len(stream.getvalue())


def test_put_tab_custom_separator():
    stream = io.StringIO()
    count = tab.put_tab(["x", "y"], "-", stream)
    assert stream.getvalue() == "x-y"
    assert count == 3


def test_put_tab_single_item_has_no_separator():
    stream = io.StringIO()
    tab.put_tab(["only"], "|", stream)
    assert stream.getvalue() == "only"


def test_put_tab_empty():
    stream = io.StringIO()
    assert tab.put_tab([], None, stream) == 0
    assert stream.getvalue() == ""


def test_extend_tab():
    items = ["a", "b"]
    extended = tab.extend_tab(items, 5)
    assert len(extended) == 5
    assert extended[:2] == items
    assert extended[2:] == [None, None, None]
    assert items == ["a", "b"]


def test_extend_tab_exact_size():
    items = ["a", "b"]
    assert tab.extend_tab(items, 2) == items


@pytest.mark.parametrize("nmemb", [0, -1, 1])
def test_extend_tab_too_small(nmemb):
    with pytest.raises(ValueError):
        tab.extend_tab(["a", "b"], nmemb)


def test_nullify_tab():
    items = ["a", "b", "c"]
    tab.nullify_tab(items)
    assert items == [None, None, None]


def test_nullify_tab_stops_at_first_none():
    items = ["a", None, "c"]
    tab.nullify_tab(items)
    assert items == [None, None, "c"]


def test_nullify_tab_none_raises():
    with pytest.raises(ValueError):
        tab.nullify_tab(None)