"""
Target decoders.

Each decoder turns the leading target token of a line into one output shape.
`decode` is also called with an empty string for lines that carry no target
(lines starting with a space); decoders that cannot accept "" return None there.

Available decoders
------------------
regression : float
binary     : bool, only "1" (True) and "-1" (False)
disjoint   : single class id (non-negative int)
multilabel : frozenset of class ids from a comma-separated list
tags       : frozenset of non-empty strings from a comma-separated list
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, FrozenSet, Optional

from svmlight_toolkit.core.numbers import parse_float, parse_unsigned


class TargetDecoder(ABC):
    """Base class for the target decoders."""

    name: str = ""

    @abstractmethod
    def decode(self, token: str) -> Optional[Any]:
        """Decode a target token, or return None if it is not valid for this decoder."""


@dataclass(frozen=True)
class Regression(TargetDecoder):
    name = "regression"

    def decode(self, token: str) -> Optional[float]:
        return parse_float(token)


@dataclass(frozen=True)
class BinaryClassification(TargetDecoder):
    name = "binary"

    def decode(self, token: str) -> Optional[bool]:
        if token == "1":
            return True
        if token == "-1":
            return False
        return None


@dataclass(frozen=True)
class DisjointClassification(TargetDecoder):
    name = "disjoint"

    def decode(self, token: str) -> Optional[int]:
        return parse_unsigned(token)


@dataclass(frozen=True)
class MultiLabelClassification(TargetDecoder):
    name = "multilabel"

    def decode(self, token: str) -> FrozenSet[int]:
        # Pieces that are not class ids are skipped, never fatal.
        ids = (parse_unsigned(piece) for piece in token.split(","))
        return frozenset(i for i in ids if i is not None)


@dataclass(frozen=True)
class Tags(TargetDecoder):
    name = "tags"

    def decode(self, token: str) -> FrozenSet[str]:
        return frozenset(piece for piece in token.split(",") if piece)
