"""Target decoding subpackage."""

from __future__ import annotations

from .decoders import (
    BinaryClassification,
    DisjointClassification,
    MultiLabelClassification,
    Regression,
    Tags,
    TargetDecoder,
)

__all__ = [
    "TargetDecoder",
    "Regression",
    "BinaryClassification",
    "DisjointClassification",
    "MultiLabelClassification",
    "Tags",
]
