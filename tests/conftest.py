"""
tests/conftest
~~~~~~~~~~~~~~
"""

import pandas as pd
import pytest

from upsetaxis import aggregate, collapse


@pytest.fixture(scope="session")
def movie_labels():
    """
    Returns the four-observation label sets used across tests.

    Returns:
        list: Label set per observation.
    """
    return [["Action", "Drama"], ["Drama"], ["Drama", "Action"], []]


@pytest.fixture(scope="session")
def movie_records(movie_labels):
    """
    Returns aggregated records for the toy label sets.

    Args:
        movie_labels (list): Toy label sets.

    Returns:
        list: CategoryRecords in first-appearance order.
    """
    return aggregate(collapse(movie_labels))


@pytest.fixture(scope="session")
def movies_df():
    """
    Returns a small movie table with a list-valued genre column.

    Returns:
        pd.DataFrame: Toy movie table.
    """
    return pd.DataFrame(
        {
            "title": ["m1", "m2", "m3", "m4", "m5", "m6"],
            "genres": [
                ["Action", "Drama"],
                ["Drama"],
                ["Drama", "Action"],
                [],
                ["Comedy"],
                ["Drama"],
            ],
            "rating": [7.0, 6.0, 8.0, 5.0, 6.5, 7.5],
        }
    )


@pytest.fixture(scope="session")
def genre_records():
    """
    Returns records where Drama totals 5 and Comedy totals 3.

    Returns:
        list: CategoryRecords.
    """
    labels = [["Drama"]] * 3 + [["Comedy", "Drama"]] * 2 + [["Comedy"]]
    return aggregate(collapse(labels))
