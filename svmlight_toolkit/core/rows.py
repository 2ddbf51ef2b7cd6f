"""Decoded row container and small helpers over row collections."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Generic, Iterable, Optional, TypeVar

import pandas as pd

T = TypeVar("T")
F = TypeVar("F")


@dataclass(frozen=True)
class Row(Generic[T, F]):
    """One decoded line.

    `target` and `features` take whatever shape the chosen decoders produce.
    `group_id` is set only when a `qid:<n>` token followed the target, and
    `comment` holds everything after the first `#` exactly as written.
    """

    target: T
    features: F
    group_id: Optional[int] = None
    comment: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "Target": _display_target(self.target),
            "Group_ID": self.group_id,
            "Dimension": dims(self.features),
            "NNZ": _nnz(self.features),
            "Comment": self.comment,
        }


def dims(features: Any) -> int:
    """Nominal width of a decoded feature container.

    Sparse vectors report their fixed dimension; dense vectors their length.
    """

    dimension = getattr(features, "dimension", None)
    if dimension is not None:
        return int(dimension)
    return len(features)


def _nnz(features: Any) -> int:
    nnz = getattr(features, "nnz", None)
    if nnz is not None:
        return int(nnz)
    return sum(1 for v in features if v != 0.0)


def _display_target(target: Any) -> Any:
    # Sets are shown sorted so tables are stable across runs.
    if isinstance(target, (set, frozenset)):
        return ",".join(str(t) for t in sorted(target))
    return target


def rows_to_frame(rows: Iterable[Row]) -> pd.DataFrame:
    """Summarize rows as a DataFrame (one record per row, no feature values)."""

    records = [r.to_dict() for r in rows]
    if not records:
        return pd.DataFrame(columns=["Target", "Group_ID", "Dimension", "NNZ", "Comment"])
    return pd.DataFrame(records)
