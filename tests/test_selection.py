"""
tests/test_selection
~~~~~~~~~~~~~~~~~~~~
"""

import pytest

from upsetaxis import SelectionConfig, aggregate, collapse, select


def _records(label_sets):
    return aggregate(collapse(label_sets))


@pytest.mark.api
def test_select_orders_by_frequency_with_lexical_ties(movie_records):
    """
    Ensures frequency order is descending with ties broken by key.
    """
    selection = select(movie_records)

    assert selection.keys == ("Action-Drama", "", "Drama")
    assert selection.label_order is None


@pytest.mark.api
def test_select_orders_by_degree():
    """
    Ensures degree order is ascending degree, then descending frequency.
    """
    records = _records([["A"]] * 3 + [["A", "B"]] + [["A", "B", "C"]] * 2 + [["B"]])
    selection = select(records, SelectionConfig(order_by="degree"))

    assert selection.keys == ("A", "B", "A-B", "A-B-C")


@pytest.mark.api
def test_select_keeps_input_order():
    """
    Ensures order_by="none" keeps first-appearance order.
    """
    records = _records([["z"], ["a"], ["a"], ["m"]])
    selection = select(records, SelectionConfig(order_by="none"))

    assert selection.keys == ("z", "a", "m")


@pytest.mark.api
def test_select_explicit_sets_fix_universe():
    """
    Ensures explicit sets drop records with other labels and fix the label order.
    """
    records = _records(
        [["Action"], ["Romance", "Action"], ["Comedy"], ["Comedy", "Action"], ["Drama"], ["Action"]]
    )
    selection = select(records, SelectionConfig(sets=("Romance", "Action")))

    assert selection.keys == ("Action", "Action-Romance")
    assert selection.label_order == ("Romance", "Action")


@pytest.mark.api
def test_select_explicit_sets_excluding_everything_is_empty():
    """
    Ensures a selection that excludes every category is empty rather than an error.
    """
    records = _records([["Comedy"], ["Drama"]])
    with pytest.warns(RuntimeWarning, match="No categories"):
        selection = select(records, SelectionConfig(sets=("Western",)))

    assert len(selection) == 0
    assert selection.label_order == ("Western",)


@pytest.mark.api
def test_select_n_sets_drops_whole_records(genre_records):
    """
    Ensures records with a label outside the top sets are dropped, not truncated.
    """
    selection = select(genre_records, SelectionConfig(n_sets=1))

    assert selection.keys == ("Drama",)


@pytest.mark.api
def test_select_n_sets_within_explicit_sets():
    """
    Ensures n_sets is applied inside the explicit set list and keeps its order.
    """
    records = _records([["Action"]] * 4 + [["Comedy"]] * 2 + [["Romance"]])
    selection = select(records, SelectionConfig(sets=("Romance", "Action", "Comedy"), n_sets=2))

    assert selection.label_order == ("Action", "Comedy")
    assert set(selection.keys) == {"Action", "Comedy"}


@pytest.mark.api
def test_select_n_intersections_is_monotone():
    """
    Ensures n_intersections caps the column count and larger caps extend smaller ones.
    """
    records = _records([["a"]] * 5 + [["b"]] * 4 + [["a", "b"]] * 3 + [["c"]] * 2 + [["a", "c"]])
    previous = ()
    for k in range(0, 7):
        keys = select(records, SelectionConfig(n_intersections=k)).keys if k else ()
        assert len(keys) <= k
        assert keys[: len(previous)] == previous
        previous = keys


@pytest.mark.api
def test_select_explicit_intersections_order():
    """
    Ensures explicit intersections filter and order the columns.
    """
    records = _records([["Action", "Drama"], ["Drama"], ["Comedy"]])
    selection = select(records, SelectionConfig(intersections=(("Drama",), "Action-Drama", ("Western",))))

    assert selection.keys == ("Drama", "Action-Drama")


@pytest.mark.api
def test_select_intersection_keys_in_any_label_order():
    """
    Ensures intersection key strings match regardless of the order of their labels.
    """
    records = _records([["Action", "Drama"], ["Drama"]])
    selection = select(records, SelectionConfig(intersections=("Drama-Action",)))

    assert selection.keys == ("Action-Drama",)


@pytest.mark.api
def test_select_reverse(movie_records):
    """
    Ensures reverse flips the final column order.
    """
    selection = select(movie_records, SelectionConfig(reverse=True))

    assert selection.keys == ("Drama", "", "Action-Drama")


@pytest.mark.unit
@pytest.mark.parametrize(
    "kwargs, error",
    [
        ({"order_by": "size"}, ValueError),
        ({"n_intersections": -1}, ValueError),
        ({"n_sets": 1.5}, TypeError),
        ({"sets": "Action"}, TypeError),
    ],
)
def test_selection_config_validation(kwargs, error):
    """
    Ensures invalid selection options are rejected at construction.
    """
    with pytest.raises(error):
        SelectionConfig(**kwargs)
