"""Stack decoded rows into matrices.

SciPy is not a dependency. Sparse rows are collected straight into CSR arrays
(`data, indices, indptr, shape`) that `scipy.sparse.csr_matrix((data, indices, indptr), shape=shape)`
accepts as-is, and can be bundled into an NPZ file.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from svmlight_toolkit.core.rows import dims

from .decoders import SparseVector


@dataclass
class CSRBuilder:
    n_cols: int
    data: List[float] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    indptr: List[int] = field(default_factory=lambda: [0])

    @property
    def n_rows(self) -> int:
        return len(self.indptr) - 1

    def add_sparse(self, vec: SparseVector) -> None:
        # SparseVector is already sorted and filtered against its own dimension.
        for k, v in vec.items():
            if k >= int(self.n_cols):
                continue
            self.indices.append(int(k))
            self.data.append(float(v))
        self.indptr.append(len(self.data))

    def add_dense(self, values: Sequence[float]) -> None:
        for k, v in enumerate(values[: int(self.n_cols)]):
            if float(v) == 0.0:
                continue
            self.indices.append(int(k))
            self.data.append(float(v))
        self.indptr.append(len(self.data))

    def to_arrays(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        data = np.asarray(self.data, dtype=np.float32)
        indices = np.asarray(self.indices, dtype=np.int32)
        indptr = np.asarray(self.indptr, dtype=np.int32)
        shape = np.asarray([self.n_rows, int(self.n_cols)], dtype=np.int64)
        return data, indices, indptr, shape


def rows_to_csr(
    rows: Iterable, n_cols: Optional[int] = None
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """Build CSR arrays from rows with sparse or dense features.

    `n_cols` defaults to the widest row seen.
    """

    rows = list(rows)
    if n_cols is None:
        n_cols = max((dims(r.features) for r in rows), default=0)

    b = CSRBuilder(n_cols=int(n_cols))
    for r in rows:
        if isinstance(r.features, SparseVector):
            b.add_sparse(r.features)
        else:
            b.add_dense(r.features)
    return b.to_arrays()


def rows_to_dense(rows: Iterable, n_cols: Optional[int] = None, dtype=np.float32) -> np.ndarray:
    """Stack rows into a 2-D array, zero-padding shorter dense rows."""

    rows = list(rows)
    if n_cols is None:
        n_cols = max((dims(r.features) for r in rows), default=0)

    out = np.zeros((len(rows), int(n_cols)), dtype=dtype)
    for i, r in enumerate(rows):
        if isinstance(r.features, SparseVector):
            for k, v in r.features.items():
                if k < n_cols:
                    out[i, k] = v
        else:
            vals = list(r.features)[: int(n_cols)]
            out[i, : len(vals)] = vals
    return out


def save_csr_npz(path: str, *, data: np.ndarray, indices: np.ndarray, indptr: np.ndarray, shape: np.ndarray) -> None:
    np.savez_compressed(path, data=data, indices=indices, indptr=indptr, shape=shape)
