"""
upsetaxis/core/layout
~~~~~~~~~~~~~~~~~~~~~
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .records import CategoryRecord, label_totals
from ..util.warnings import warn

ROW_ORDERS = ("frequency", "input")
ORIENTATIONS = ("horizontal", "vertical")
FRAME_COLUMNS = [
    "position",
    "key",
    "label",
    "row",
    "labels",
    "observed",
    "degree",
    "frequency",
    "x",
    "y",
]


@dataclass(frozen=True, eq=False)
class LayoutFrame:
    """
    Data class for the combination-matrix grid handed to rendering.

    Rows are labels (top to bottom), columns are the selected categories at
    positions 1..N (left to right). `observed[row, col]` is True iff the column's
    category contains the row's label. Arrays are read-only.
    """

    records: Tuple[CategoryRecord, ...]
    labels: Tuple[str, ...]
    observed: np.ndarray
    positions: np.ndarray

    @property
    def n_rows(self) -> int:
        return len(self.labels)

    @property
    def n_cols(self) -> int:
        return len(self.records)

    def on_rows(self, col: int) -> List[int]:
        """
        Returns the row indices observed in one column.

        Args:
            col (int): Column index (0-based).

        Returns:
            List[int]: Observed row indices, top to bottom.
        """
        return np.flatnonzero(self.observed[:, col]).tolist()

    def siblings(self, row: int, col: int) -> List[int]:
        """
        Returns the other observed rows sharing a column with a cell.

        Args:
            row (int): Row index (0-based).
            col (int): Column index (0-based).

        Returns:
            List[int]: Observed rows in `col` other than `row`.
        """
        return [r for r in self.on_rows(col) if r != row]

    def segments(self) -> List[Tuple[float, int, int]]:
        """
        Returns the connecting segment of each column with two or more observed cells.

        Returns:
            List[Tuple[float, int, int]]: (position, first observed row, last observed row).
        """
        out = []
        for col in range(self.n_cols):
            rows = self.on_rows(col)
            if len(rows) >= 2:
                out.append((float(self.positions[col]), rows[0], rows[-1]))
        return out

    def to_frame(self, orientation: str = "horizontal") -> pd.DataFrame:
        """
        Projects the grid to one table row per (label, column) pair.

        Args:
            orientation (str): "horizontal" puts positions on x and rows on y;
                "vertical" swaps them. Defaults to "horizontal".

        Returns:
            pd.DataFrame: Columns position, key, label, row, labels, observed,
                degree, frequency, x, y.
        """
        if orientation not in ORIENTATIONS:
            raise ValueError(f"orientation must be one of {ORIENTATIONS}, got {orientation!r}")
        rows = []
        for col, record in enumerate(self.records):
            position = float(self.positions[col])
            for row, label in enumerate(self.labels):
                rows.append(
                    {
                        "position": position,
                        "key": record.key,
                        "label": label,
                        "row": row,
                        "labels": record.labels,
                        "observed": bool(self.observed[row, col]),
                        "degree": record.degree,
                        "frequency": record.frequency,
                    }
                )
        df = pd.DataFrame(rows, columns=FRAME_COLUMNS[:-2])
        df["observed"] = df["observed"].astype(bool)
        if orientation == "horizontal":
            df["x"], df["y"] = df["position"], df["row"]
        else:
            df["x"], df["y"] = df["row"], df["position"]
        return df


def _rank_labels(records: Sequence[CategoryRecord], row_order: str) -> List[str]:
    if row_order == "input":
        return list(dict.fromkeys(label for r in records for label in r.labels))
    return list(label_totals(records).index)


def compute_layout(
    records: Sequence[CategoryRecord],
    label_order: Optional[Sequence[str]] = None,
    *,
    row_order: str = "frequency",
) -> LayoutFrame:
    """
    Computes the combination-matrix grid for the selected records.

    Columns follow `records` exactly. Rows follow `label_order` when given;
    constituent labels missing from it are appended so that no label is dropped.
    Otherwise rows are ordered by `row_order`: "frequency" (descending total
    frequency across `records`, ties lexical) or "input" (first appearance).

    Args:
        records (Sequence[CategoryRecord]): Selected, ordered records.
        label_order (Optional[Sequence[str]]): Explicit row order. Defaults to None.

    Kwargs:
        row_order (str): Row ordering when `label_order` is None. Defaults to "frequency".

    Returns:
        LayoutFrame: Grid of observed cells with column positions 1..N.
    """
    if row_order not in ROW_ORDERS:
        raise ValueError(f"row_order must be one of {ROW_ORDERS}, got {row_order!r}")
    records = tuple(records)

    if label_order is not None:
        labels = list(dict.fromkeys(str(label) for label in label_order))
        present = set(labels)
        missing = [label for label in _rank_labels(records, "frequency") if label not in present]
        if missing:
            warn(
                f"Labels {missing} are not in the explicit row order; appending them",
                RuntimeWarning,
            )
            labels.extend(missing)
    else:
        labels = _rank_labels(records, row_order)

    # Fill the membership grid
    row_index = {label: i for i, label in enumerate(labels)}
    observed = np.zeros((len(labels), len(records)), dtype=bool)
    for col, record in enumerate(records):
        for label in record.labels:
            observed[row_index[label], col] = True
    observed.setflags(write=False)
    positions = np.arange(1, len(records) + 1, dtype=float)
    positions.setflags(write=False)

    return LayoutFrame(records, tuple(labels), observed, positions)
