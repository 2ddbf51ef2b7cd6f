"""Single-line parsing.

Line layout:

    [" "] [target] [qid:<n>] <feature> <feature> ... [# comment]

A line that starts with a space has no target token; the target decoder is then
asked to decode "" instead. Everything after the first `#` is the comment.

Parsing never raises for malformed input: `parse` returns None and the caller
decides what to do with the line (the row sequence simply skips it).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional, Tuple

from .numbers import parse_unsigned
from .rows import Row

if TYPE_CHECKING:
    from svmlight_toolkit.features.decoders import FeatureDecoder
    from svmlight_toolkit.targets.decoders import TargetDecoder

QID_PREFIX = "qid:"


def split_comment(line: str) -> Tuple[str, Optional[str]]:
    """Split `line` at the first `#` into (data, comment); comment is None without `#`."""

    data, sep, comment = line.partition("#")
    if not sep:
        return data, None
    return data, comment


def parse_qid(token: str) -> Optional[int]:
    if not token.startswith(QID_PREFIX):
        return None
    return parse_unsigned(token[len(QID_PREFIX):], allow_sign=False)


@dataclass(frozen=True)
class LineParser:
    """Parse lines with a fixed pair of decoders.

    `target` is a target decoder (see `svmlight_toolkit.targets`) and `features`
    a feature decoder (see `svmlight_toolkit.features`).
    """

    target: TargetDecoder
    features: FeatureDecoder

    def parse(self, line: str) -> Optional[Row]:
        has_target = not line.startswith(" ")
        data, comment = split_comment(line)
        tokens: List[str] = data.split()

        pos = 0
        if has_target:
            if not tokens:
                return None
            y = self.target.decode(tokens[0])
            pos = 1
        else:
            y = self.target.decode("")
        if y is None:
            return None

        group_id = None
        if pos < len(tokens):
            group_id = parse_qid(tokens[pos])
            if group_id is not None:
                pos += 1

        x = self.features.decode(tokens[pos:])
        if x is None:
            return None

        return Row(target=y, features=x, group_id=group_id, comment=comment)


def parse_line(line: str, target: TargetDecoder, features: FeatureDecoder) -> Optional[Row]:
    """Convenience wrapper: `LineParser(target, features).parse(line)`."""

    return LineParser(target, features).parse(line)
