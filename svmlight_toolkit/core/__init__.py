"""Shared parsing machinery: number tokens, rows, the line parser and the row sequence.

This subpackage does not import the concrete decoders; the name registry lives in
`svmlight_toolkit.core.registry` and is imported explicitly where needed.
"""

from __future__ import annotations

from .numbers import parse_float, parse_unsigned
from .parser import LineParser, parse_line
from .reader import RowSequence, open_rows, parse_lines
from .rows import Row, dims, rows_to_frame
