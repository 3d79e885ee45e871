"""
upsetaxis/core/collapse
~~~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

import numbers
from collections.abc import Iterable as IterableABC
from typing import Any, Iterable, List, Sequence, Tuple

import numpy as np
import pandas as pd

from ..util.errors import InvalidLabelError
from ..util.warnings import InvalidLabelWarning, warn

# Key of the label set with no labels (rendered as the "none" column)
EMPTY_KEY = ""
DEFAULT_SEP = "-"

LabelSet = Tuple[str, ...]


def _validate_sep(sep: str) -> None:
    if not isinstance(sep, str) or not sep:
        raise ValueError("`sep` must be a non-empty string")


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if pd.api.types.is_scalar(value):
        return bool(pd.isna(value))
    return False


def _label_to_str(label: Any, sep: str, problems: List[str]) -> str:
    """
    Converts one label to its string form, recording anything that makes keys ambiguous.

    Args:
        label (Any): Raw label.
        sep (str): Key delimiter.
        problems (List[str]): Collector for problem descriptions.

    Returns:
        str: String label.
    """
    if isinstance(label, str):
        text = label
    elif isinstance(label, (numbers.Number, np.generic)) and not _is_missing(label):
        text = str(label)
    else:
        problems.append(f"{label!r} is not a string label")
        text = str(label)

    if text == "":
        problems.append("empty label collides with the empty category")
    elif sep in text:
        problems.append(f"label {text!r} contains the delimiter {sep!r}")
    return text


def _normalize(value: Any, sep: str, problems: List[str]) -> LabelSet:
    if _is_missing(value) or (isinstance(value, str) and value == EMPTY_KEY):
        return ()
    # bytes is one (invalid) label, not a sequence of integer labels
    if isinstance(value, (str, bytes)) or not isinstance(value, IterableABC):
        raw: Iterable[Any] = [value]
    else:
        raw = value
    labels = {_label_to_str(label, sep, problems) for label in raw}
    return tuple(sorted(labels))


def _report(problems: Sequence[str], strict: bool) -> None:
    unique = list(dict.fromkeys(problems))
    shown = "; ".join(unique[:5])
    more = f" (+{len(unique) - 5} more)" if len(unique) > 5 else ""
    message = f"{len(unique)} label problem(s) may cause category keys to collide: {shown}{more}"
    if strict:
        raise InvalidLabelError(message)
    warn(message, InvalidLabelWarning, stacklevel=4)


def _iter_values(values: Any) -> List[Any]:
    if isinstance(values, (str, bytes)):
        raise TypeError("values must be a sequence of label sets, not a string")
    if isinstance(values, pd.Series):
        return values.tolist()
    return list(values)


def make_key(labels: Iterable[str], sep: str = DEFAULT_SEP) -> str:
    """
    Builds the category key of a label set: sorted, deduplicated, joined by `sep`.

    Args:
        labels (Iterable[str]): String labels.
        sep (str): Key delimiter. Defaults to "-".

    Returns:
        str: Category key, or EMPTY_KEY for an empty label set.
    """
    _validate_sep(sep)
    return sep.join(sorted(set(labels)))


def split_key(key: str, sep: str = DEFAULT_SEP) -> LabelSet:
    """
    Recovers the labels of a category key.

    Args:
        key (str): Category key.
        sep (str): Key delimiter. Defaults to "-".

    Returns:
        LabelSet: Constituent labels; empty for EMPTY_KEY.
    """
    _validate_sep(sep)
    if key == EMPTY_KEY:
        return ()
    return tuple(key.split(sep))


def normalize_label_set(value: Any, sep: str = DEFAULT_SEP, *, strict: bool = False) -> LabelSet:
    """
    Normalizes one observation's labels to a sorted, deduplicated tuple of strings.
    A scalar string is a single-label set; None/NaN is the empty set.

    Args:
        value (Any): Raw label set.
        sep (str): Key delimiter, used to detect ambiguous labels. Defaults to "-".

    Kwargs:
        strict (bool): Raise instead of warning on ambiguous labels. Defaults to False.

    Returns:
        LabelSet: Normalized labels.
    """
    _validate_sep(sep)
    problems: List[str] = []
    labels = _normalize(value, sep, problems)
    if problems:
        _report(problems, strict)
    return labels


def collapse(
    values: Any, sep: str = DEFAULT_SEP, *, strict: bool = False
) -> List[Tuple[str, LabelSet]]:
    """
    Collapses list-valued observations into (category key, label set) pairs.

    Ambiguous labels (containing `sep`, empty, or not string-like) are reported
    once per call as an InvalidLabelWarning and collapsed best-effort; the
    resulting keys may collide.

    Args:
        values (Any): Sequence (or Series) of label sets.
        sep (str): Key delimiter. Defaults to "-".

    Kwargs:
        strict (bool): Raise InvalidLabelError instead of warning. Defaults to False.

    Returns:
        List[Tuple[str, LabelSet]]: One (key, labels) pair per observation, in input order.

    Raises:
        InvalidLabelError: If `strict` and any label is ambiguous.
    """
    _validate_sep(sep)
    problems: List[str] = []
    collapsed = []
    for value in _iter_values(values):
        labels = _normalize(value, sep, problems)
        collapsed.append((sep.join(labels), labels))
    if problems:
        _report(problems, strict)
    return collapsed


def merge_labels(values: Any, sep: str = DEFAULT_SEP, *, strict: bool = False) -> pd.Series:
    """
    Merges each observation's labels into its category key string.
    Collapsing an already-collapsed single-label key returns it unchanged.

    Args:
        values (Any): Sequence (or Series) of label sets.
        sep (str): Key delimiter. Defaults to "-".

    Kwargs:
        strict (bool): Raise InvalidLabelError instead of warning. Defaults to False.

    Returns:
        pd.Series: Category key per observation; a Series input keeps its index and name.
    """
    collapsed = collapse(values, sep, strict=strict)
    keys = [key for key, _labels in collapsed]
    if isinstance(values, pd.Series):
        return pd.Series(keys, index=values.index, name=values.name, dtype=object)
    return pd.Series(keys, dtype=object)
