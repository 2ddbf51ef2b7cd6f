"""Feature decoding subpackage.

Dense decoding yields a tuple of floats; sparse decoding yields a `SparseVector`
that can be expanded with numpy or stacked into CSR arrays (see `sparse_matrix`).
"""

from __future__ import annotations

from .decoders import DenseFeatures, FeatureDecoder, SparseFeatures, SparseVector
from .sparse_matrix import CSRBuilder, rows_to_csr, rows_to_dense, save_csr_npz

__all__ = [
    "FeatureDecoder",
    "DenseFeatures",
    "SparseFeatures",
    "SparseVector",
    "CSRBuilder",
    "rows_to_csr",
    "rows_to_dense",
    "save_csr_npz",
]
