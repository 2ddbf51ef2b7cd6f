"""Decoder registry.

The registry maps the decoder names used by tools and configs to the decoder
classes in `svmlight_toolkit.targets` and `svmlight_toolkit.features`.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Tuple, Union

from svmlight_toolkit.features.decoders import DenseFeatures, FeatureDecoder, SparseFeatures
from svmlight_toolkit.targets.decoders import (
    BinaryClassification,
    DisjointClassification,
    MultiLabelClassification,
    Regression,
    Tags,
    TargetDecoder,
)

from .reader import RowSequence, open_rows


@dataclass(frozen=True)
class DecoderSpec:
    key: str
    description: str
    factory: Callable[..., Any]
    needs_dimension: bool = False


TARGET_DECODERS: Dict[str, DecoderSpec] = {
    "regression": DecoderSpec("regression", "Real-valued target (float)", Regression),
    "binary": DecoderSpec("binary", "Binary classification: 1 -> True, -1 -> False", BinaryClassification),
    "disjoint": DecoderSpec("disjoint", "Single class id (non-negative integer)", DisjointClassification),
    "multilabel": DecoderSpec(
        "multilabel", "Comma-separated class ids; unparsable ids are skipped", MultiLabelClassification
    ),
    "tags": DecoderSpec("tags", "Comma-separated string tags; empty tags are skipped", Tags),
}

FEATURE_DECODERS: Dict[str, DecoderSpec] = {
    "dense": DecoderSpec("dense", "One float per token, index prefixes ignored", DenseFeatures),
    "sparse": DecoderSpec(
        "sparse", "Sorted index:value pairs, duplicates/out-of-range/zeros dropped", SparseFeatures, True
    ),
}


def get_target_decoder(name: str) -> TargetDecoder:
    key = name.lower()
    if key not in TARGET_DECODERS:
        raise ValueError(f"Unknown target decoder: {name}. Available: {list(TARGET_DECODERS.keys())}")
    return TARGET_DECODERS[key].factory()


def get_feature_decoder(name: str, *, dimension: Optional[int] = None) -> FeatureDecoder:
    key = name.lower()
    if key not in FEATURE_DECODERS:
        raise ValueError(f"Unknown feature decoder: {name}. Available: {list(FEATURE_DECODERS.keys())}")

    spec = FEATURE_DECODERS[key]
    if spec.needs_dimension:
        if dimension is None:
            raise ValueError(f"Feature decoder '{key}' requires a dimension")
        return spec.factory(int(dimension))
    return spec.factory()


@dataclass(frozen=True)
class ReaderConfig:
    """Named decoder choice, e.g. from CLI flags."""

    target: str = "regression"
    features: str = "sparse"
    dimension: Optional[int] = None

    def build_decoders(self) -> Tuple[TargetDecoder, FeatureDecoder]:
        return get_target_decoder(self.target), get_feature_decoder(self.features, dimension=self.dimension)

    def open(self, path: Union[str, Path]) -> RowSequence:
        target, features = self.build_decoders()
        return open_rows(path, target, features)
