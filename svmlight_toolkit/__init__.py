"""SVMLight Toolkit (importable package).

Reads the SVMLight / libsvm text format into typed rows:

    <target> [qid:<n>] <index>:<value> ... [# comment]

Target decoding (regression, binary, class id, label set, tag set) and feature
materialization (dense or sparse) are chosen independently; see
`svmlight_toolkit.targets` and `svmlight_toolkit.features`.
"""

from __future__ import annotations

# ruff: noqa: F401

from .core.parser import LineParser, parse_line
from .core.reader import RowSequence, open_rows, parse_lines
from .core.registry import (
    FEATURE_DECODERS,
    TARGET_DECODERS,
    ReaderConfig,
    get_feature_decoder,
    get_target_decoder,
)
from .core.rows import Row, dims, rows_to_frame
from .features import DenseFeatures, SparseFeatures, SparseVector
from .targets import BinaryClassification, DisjointClassification, MultiLabelClassification, Regression, Tags
