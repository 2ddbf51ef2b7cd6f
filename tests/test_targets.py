"""
Tests for svmlight_toolkit.targets.

Run with: pytest tests/test_targets.py -v
"""

import pytest

from svmlight_toolkit.targets import (
    BinaryClassification,
    DisjointClassification,
    MultiLabelClassification,
    Regression,
    Tags,
)


class TestRegression:
    def test_float_token(self):
        assert Regression().decode("-0.25") == pytest.approx(-0.25)

    def test_integer_token(self):
        assert Regression().decode("3") == 3.0

    @pytest.mark.parametrize("token", ["", "abc", "1,2"])
    def test_invalid(self, token):
        assert Regression().decode(token) is None


class TestBinary:
    def test_positive(self):
        assert BinaryClassification().decode("1") is True

    def test_negative(self):
        assert BinaryClassification().decode("-1") is False

    @pytest.mark.parametrize("token", ["0", "", "+1", "1.0", "2", "true"])
    def test_other_tokens_fail(self, token):
        assert BinaryClassification().decode(token) is None


class TestDisjoint:
    def test_class_id(self):
        assert DisjointClassification().decode("1") == 1

    @pytest.mark.parametrize("token", ["", "-1", "1.5", "a"])
    def test_invalid(self, token):
        assert DisjointClassification().decode(token) is None


class TestMultiLabel:
    def test_duplicates_and_junk(self):
        """Duplicates collapse and unparsable pieces are dropped."""
        assert MultiLabelClassification().decode("3,5,3,x") == {3, 5}

    def test_empty_token_gives_empty_set(self):
        assert MultiLabelClassification().decode("") == frozenset()

    def test_all_invalid_never_fails(self):
        labels = MultiLabelClassification().decode("a,b,-1")
        assert labels is not None
        assert len(labels) == 0


class TestTags:
    def test_tags(self):
        assert Tags().decode("news,sports,news") == {"news", "sports"}

    def test_empty_pieces_excluded(self):
        assert Tags().decode(",a,,b,") == {"a", "b"}
        assert Tags().decode("") == frozenset()
