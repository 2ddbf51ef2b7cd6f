"""
Tests for svmlight_toolkit.core.reader.

Run with: pytest tests/test_reader.py -v
"""

import os
import tempfile
from pathlib import Path

import pytest

from svmlight_toolkit import open_rows, parse_lines
from svmlight_toolkit.core.reader import RowSequence
from svmlight_toolkit.core.parser import LineParser
from svmlight_toolkit.features import DenseFeatures, SparseFeatures
from svmlight_toolkit.targets import BinaryClassification, DisjointClassification, Regression

SAMPLE = Path(__file__).resolve().parent / "data" / "sample.svm"


class TestOpenRows:
    def test_sample_disjoint(self):
        with open_rows(SAMPLE, DisjointClassification(), SparseFeatures(12)) as rows:
            out = list(rows)
            assert rows.n_lines == 6
            assert rows.n_skipped == 4

        assert [r.target for r in out] == [1, 3]
        assert out[0].group_id == 1234
        assert out[0].comment == " hello"
        assert out[0].features.indices == (0, 11)
        assert out[1].group_id == 7
        assert out[1].comment is None
        assert out[1].features.indices == (2,)
        assert out[1].features.values == (0.5,)

    def test_sample_binary(self):
        with open_rows(str(SAMPLE), BinaryClassification(), SparseFeatures(12)) as rows:
            out = list(rows)
        assert [r.target for r in out] == [True, False]

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            open_rows(tmp_path / "missing.svm", Regression(), DenseFeatures())

    def test_file_closed_after_exhaustion(self):
        rows = open_rows(SAMPLE, Regression(), DenseFeatures())
        source = rows._source
        list(rows)
        assert rows.exhausted
        assert source.closed

    def test_file_closed_on_early_exit(self):
        with open_rows(SAMPLE, DisjointClassification(), SparseFeatures(12)) as rows:
            source = rows._source
            first = next(rows)
        assert first.target == 1
        assert source.closed
        assert list(rows) == []

    def test_crlf_line_endings(self, tmp_path):
        p = tmp_path / "crlf.svm"
        p.write_bytes(b"1 1:2 # a\r\n-1 1:3\r\n")
        with open_rows(p, BinaryClassification(), SparseFeatures(4)) as rows:
            out = list(rows)
        assert [r.target for r in out] == [True, False]
        assert out[0].comment == " a"

    def test_undecodable_bytes_end_sequence(self):
        with tempfile.NamedTemporaryFile(mode="wb", suffix=".svm", delete=False) as f:
            f.write(b"1 1:1\n\xff\xfe 1:2\n1 1:3\n")
        try:
            with open_rows(f.name, Regression(), DenseFeatures()) as rows:
                out = list(rows)
            assert [r.features for r in out] == [(1.0,)]
        finally:
            os.unlink(f.name)


class TestParseLines:
    def test_malformed_lines_are_skipped(self):
        lines = ["1 1:1", "1 abc", "", "# c", "2 2:2"]
        rows = parse_lines(lines, Regression(), DenseFeatures())
        assert [r.target for r in rows] == [1.0, 2.0]
        assert rows.n_skipped == 3

    def test_exhausted_is_terminal(self):
        lines = iter(["1 1:1"])
        rows = parse_lines(lines, Regression(), DenseFeatures())
        assert len(list(rows)) == 1
        with pytest.raises(StopIteration):
            next(rows)

    def test_lazy(self):
        seen = []

        def source():
            for line in ["1 1:1", "2 2:2", "3 3:3"]:
                seen.append(line)
                yield line

        rows = parse_lines(source(), Regression(), DenseFeatures())
        assert next(rows).target == 1.0
        assert seen == ["1 1:1"]

    def test_read_error_ends_sequence(self):
        def source():
            yield "1 1:1"
            raise OSError("disk went away")

        rows = RowSequence(source(), LineParser(Regression(), DenseFeatures()))
        assert [r.target for r in rows] == [1.0]
        assert rows.exhausted

    def test_huge_index_line_is_skipped(self):
        lines = ["1 " + "9" * 5000 + ":1", "2 1:1"]
        rows = parse_lines(lines, Regression(), SparseFeatures(4))
        assert [r.target for r in rows] == [2.0]
        assert rows.n_skipped == 1

    def test_bytes_lines(self):
        rows = parse_lines([b"1 0:5\n"], Regression(), SparseFeatures(2))
        assert [r.features.values for r in rows] == [(5.0,)]
