"""
tests/test_collapse
~~~~~~~~~~~~~~~~~~~
"""

import warnings

import numpy as np
import pandas as pd
import pytest

from upsetaxis import InvalidLabelError, InvalidLabelWarning, collapse, merge_labels
from upsetaxis.core.collapse import EMPTY_KEY, make_key, normalize_label_set, split_key


@pytest.mark.api
def test_collapse_builds_sorted_keys(movie_labels):
    """
    Ensures collapse() sorts labels and joins them with the delimiter.
    """
    keys = [key for key, _labels in collapse(movie_labels)]

    assert keys == ["Action-Drama", "Drama", "Action-Drama", EMPTY_KEY]


@pytest.mark.api
def test_collapse_key_is_order_independent():
    """
    Ensures label sets with the same content collapse to the same key.
    """
    collapsed = collapse([["b", "a", "c"], ["c", "a", "b"], ["a", "b", "c", "a"]])

    assert len({key for key, _labels in collapsed}) == 1
    assert collapsed[0][1] == ("a", "b", "c")


@pytest.mark.api
def test_collapse_scalars_and_missing_values():
    """
    Ensures scalar strings become single-label sets and missing values the empty set.
    """
    collapsed = collapse(["Drama", None, np.nan, [], [1, 2]])

    assert collapsed[0] == ("Drama", ("Drama",))
    assert collapsed[1] == (EMPTY_KEY, ())
    assert collapsed[2] == (EMPTY_KEY, ())
    assert collapsed[3] == (EMPTY_KEY, ())
    assert collapsed[4] == ("1-2", ("1", "2"))


@pytest.mark.api
def test_collapse_custom_delimiter():
    """
    Ensures a custom delimiter is used to join labels.
    """
    collapsed = collapse([["Sci-Fi", "Drama"]], sep="|")

    assert collapsed[0][0] == "Drama|Sci-Fi"


@pytest.mark.api
def test_collapse_warns_on_delimiter_in_label():
    """
    Ensures labels containing the delimiter warn and still collapse best-effort.
    """
    with pytest.warns(InvalidLabelWarning, match="delimiter"):
        collapsed = collapse([["Sci-Fi", "Drama"]])

    assert collapsed[0][0] == "Drama-Sci-Fi"


@pytest.mark.api
def test_collapse_strict_raises_invalid_label_error():
    """
    Ensures strict mode raises InvalidLabelError instead of warning.
    """
    with pytest.raises(InvalidLabelError):
        collapse([["Sci-Fi"]], strict=True)


@pytest.mark.api
def test_collapse_warns_on_non_string_label():
    """
    Ensures labels that are not string-like are reported.
    """
    with pytest.warns(InvalidLabelWarning, match="not a string label"):
        collapse([[("nested",), "Drama"]])


@pytest.mark.api
def test_collapse_treats_bytes_as_one_invalid_label():
    """
    Ensures a bytes value is reported as one label instead of being split into integers.
    """
    with pytest.warns(InvalidLabelWarning, match="not a string label"):
        collapsed = collapse([b"ab"])

    assert len(collapsed) == 1
    assert collapsed[0][1] == ("b'ab'",)


@pytest.mark.unit
def test_collapse_reports_problems_once_per_call():
    """
    Ensures all label problems of a call are reported in a single warning.
    """
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        collapse([["a-b"], ["c-d"], ["e-f"]])

    relevant = [w for w in caught if issubclass(w.category, InvalidLabelWarning)]
    assert len(relevant) == 1
    assert "3 label problem(s)" in str(relevant[0].message)


@pytest.mark.unit
def test_collapse_rejects_plain_string_input():
    """
    Ensures a bare string is not mistaken for a sequence of label sets.
    """
    with pytest.raises(TypeError):
        collapse("Drama")


@pytest.mark.unit
def test_collapse_rejects_empty_delimiter():
    """
    Ensures an empty delimiter is rejected.
    """
    with pytest.raises(ValueError):
        collapse([["a"]], sep="")


@pytest.mark.api
def test_split_key_recovers_label_count():
    """
    Ensures splitting a key recovers as many labels as the deduplicated label set.
    """
    for labels in (["x"], ["x", "y"], ["z", "x", "y", "x"], []):
        key = make_key(labels)
        assert len(split_key(key)) == len(set(labels))


@pytest.mark.api
def test_merge_labels_keeps_series_index():
    """
    Ensures merge_labels() returns keys aligned to the input Series.
    """
    values = pd.Series([["b", "a"], ["a"]], index=["r1", "r2"], name="genres")
    merged = merge_labels(values)

    assert merged.index.tolist() == ["r1", "r2"]
    assert merged.name == "genres"
    assert merged.tolist() == ["a-b", "a"]


@pytest.mark.api
def test_merge_labels_is_idempotent_on_single_label_keys():
    """
    Ensures re-collapsing collapsed single-label keys is a no-op.
    """
    once = merge_labels([["Drama"], ["Action"], []])
    twice = merge_labels(once)

    assert twice.tolist() == once.tolist()


@pytest.mark.unit
def test_normalize_label_set_deduplicates():
    """
    Ensures normalize_label_set() deduplicates and sorts labels.
    """
    assert normalize_label_set(["b", "a", "b"]) == ("a", "b")
    assert normalize_label_set("a") == ("a",)
    assert normalize_label_set(None) == ()
