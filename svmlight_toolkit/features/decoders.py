"""Feature decoders.

A feature decoder turns the feature tokens of one line into a container:

- `DenseFeatures` keeps one float per token, in token order;
- `SparseFeatures(dimension)` keeps sorted, de-duplicated, in-range, non-zero
  `index:value` pairs as a `SparseVector`.

Decoding is all-or-nothing: a single malformed token makes `decode` return None.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from svmlight_toolkit.core.numbers import parse_float, parse_unsigned


@dataclass(frozen=True)
class SparseVector:
    dimension: int
    indices: Tuple[int, ...] = ()
    values: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.indices) != len(self.values):
            raise ValueError(
                f"indices and values differ in length ({len(self.indices)} != {len(self.values)})"
            )

    @property
    def nnz(self) -> int:
        return len(self.indices)

    def items(self) -> Iterable[Tuple[int, float]]:
        return zip(self.indices, self.values)

    def to_dense(self, dtype: Any = np.float64) -> np.ndarray:
        """Expand to a vector of length `dimension`; unlisted positions are zero."""

        out = np.zeros((int(self.dimension),), dtype=dtype)
        if self.indices:
            out[np.asarray(self.indices, dtype=np.int64)] = np.asarray(self.values, dtype=dtype)
        return out


class FeatureDecoder(ABC):
    """Base class for the feature decoders."""

    name: str = ""

    @abstractmethod
    def decode(self, tokens: Sequence[str]) -> Optional[Any]:
        """Decode a line's feature tokens, or return None if any token is malformed."""


@dataclass(frozen=True)
class DenseFeatures(FeatureDecoder):
    name = "dense"

    def decode(self, tokens: Sequence[str]) -> Optional[Tuple[float, ...]]:
        out: List[float] = []
        for tok in tokens:
            # Both "0.5" and "3:0.5" are accepted; the index, if any, is ignored.
            v = parse_float(tok.rsplit(":", 1)[-1])
            if v is None:
                return None
            out.append(v)
        return tuple(out)


@dataclass(frozen=True)
class SparseFeatures(FeatureDecoder):
    dimension: int
    name = "sparse"

    def __post_init__(self) -> None:
        d = self.dimension
        if isinstance(d, bool) or not isinstance(d, (int, np.integer)) or d < 0:
            raise ValueError(f"Sparse dimension must be a non-negative integer, got {d!r}")
        object.__setattr__(self, "dimension", int(d))

    def decode(self, tokens: Sequence[str]) -> Optional[SparseVector]:
        pairs: List[Tuple[int, float]] = []
        for tok in tokens:
            parts = tok.split(":")
            if len(parts) < 2:
                return None
            idx = parse_unsigned(parts[0])
            v = parse_float(parts[1])
            if idx is None or v is None:
                return None
            pairs.append((idx, v))

        # sorted() is stable, so the first pair written for an index survives.
        pairs.sort(key=lambda p: p[0])
        indices: List[int] = []
        values: List[float] = []
        last: Optional[int] = None
        for idx, v in pairs:
            if idx == last:
                continue
            last = idx
            if idx >= self.dimension or v == 0.0:
                continue
            indices.append(idx)
            values.append(v)

        return SparseVector(int(self.dimension), tuple(indices), tuple(values))
