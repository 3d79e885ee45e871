"""
tests/test_records
~~~~~~~~~~~~~~~~~~
"""

import pytest

from upsetaxis import aggregate, collapse
from upsetaxis.core.records import from_counts, label_totals


@pytest.mark.api
def test_aggregate_counts_frequencies(movie_records):
    """
    Ensures aggregate() counts observations per key in first-appearance order.
    """
    summary = [(r.key, r.labels, r.frequency, r.degree) for r in movie_records]

    assert summary == [
        ("Action-Drama", ("Action", "Drama"), 2, 2),
        ("Drama", ("Drama",), 1, 1),
        ("", (), 1, 0),
    ]


@pytest.mark.api
def test_aggregate_sums_weights():
    """
    Ensures weights replace counting with summation.
    """
    records = aggregate(collapse([["a"], ["a"], ["b"]]), weights=[2.5, 1.5, 4.0])

    assert {r.key: r.frequency for r in records} == {"a": 4.0, "b": 4.0}


@pytest.mark.unit
def test_aggregate_rejects_mismatched_weights():
    """
    Ensures weights must match the number of observations.
    """
    with pytest.raises(ValueError):
        aggregate(collapse([["a"], ["b"]]), weights=[1.0])


@pytest.mark.unit
def test_aggregate_empty_input():
    """
    Ensures aggregating no observations yields no records.
    """
    assert aggregate([]) == []


@pytest.mark.api
def test_from_counts_accepts_keys_and_label_sets():
    """
    Ensures from_counts() accepts key strings and label collections and merges duplicates.
    """
    records = from_counts({"Action-Drama": 3, ("Drama", "Action"): 1, ("Drama",): 2, "": 1})
    by_key = {r.key: r for r in records}

    assert by_key["Action-Drama"].frequency == 4
    assert by_key["Action-Drama"].labels == ("Action", "Drama")
    assert by_key["Drama"].frequency == 2
    assert by_key[""].degree == 0


@pytest.mark.api
def test_from_counts_merges_keys_in_any_label_order():
    """
    Ensures key strings naming the same labels in a different order become one record.
    """
    records = from_counts({"Drama-Action": 2, "Action-Drama": 3})

    assert [(r.key, r.labels, r.frequency) for r in records] == [("Action-Drama", ("Action", "Drama"), 5)]


@pytest.mark.api
def test_label_totals_orders_by_frequency(genre_records):
    """
    Ensures label totals count every record containing the label.
    """
    totals = label_totals(genre_records)

    assert totals.index.tolist() == ["Drama", "Comedy"]
    assert totals.tolist() == [5.0, 3.0]
