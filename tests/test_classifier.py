"""Tests for the reference prefix normalizer."""

from casecodec.core.fragment import Fragment
from casecodec.normalize.classifier import (
    iter_fragments,
    normalize,
    normalize_prefix,
)


class TestNormalizePrefix:
    def test_uppercase(self):
        assert normalize_prefix(b"Abc") == (Fragment(b"Ua", 1), 1)

    def test_lowercase(self):
        assert normalize_prefix(b"abc") == (Fragment(b"a", 1), 1)

    def test_space(self):
        assert normalize_prefix(b" x") == (Fragment(b" ", 1), 1)

    def test_punctuation(self):
        assert normalize_prefix(b",x") == (Fragment(b"P,", 1), 1)

    def test_digit_is_neutral(self):
        assert normalize_prefix(b"7") == (Fragment(b"7", 1), 1)

    def test_symbol_is_neutral(self):
        assert normalize_prefix(b"$") == (Fragment(b"$", 1), 1)

    def test_multibyte_uppercase(self):
        fragment, consumed = normalize_prefix("Éa".encode("utf-8"))
        assert fragment == Fragment(b"U" + "é".encode("utf-8"), 2)
        assert consumed == 2

    def test_unicode_punctuation(self):
        dash = "—".encode("utf-8")
        assert normalize_prefix(dash) == (Fragment(b"P" + dash, 3), 3)

    def test_non_roundtrip_uppercase_is_neutral(self):
        dotted = "İ".encode("utf-8")  # lowercases to two code points
        assert normalize_prefix(dotted) == (Fragment(dotted, 2), 2)

    def test_invalid_byte(self):
        assert normalize_prefix(b"\xffa") == (Fragment(b"\xff", 1), 1)

    def test_truncated_sequence(self):
        assert normalize_prefix(b"\xc3") == (Fragment(b"\xc3", 1), 1)

    def test_empty(self):
        assert normalize_prefix(b"") == (Fragment(b"", 0), 0)


class TestIterFragments:
    def test_sequence(self):
        assert list(iter_fragments("Hi!")) == [
            Fragment(b"Uh", 1),
            Fragment(b"i", 1),
            Fragment(b"P!", 1),
        ]

    def test_consumed_sums_to_length(self):
        text = "Grüße, WORLD"
        total = sum(f.consumed for f in iter_fragments(text))
        assert total == len(text.encode("utf-8"))


class TestNormalize:
    def test_case_encoded(self):
        assert normalize("Hi!").text == b"Thi!"

    def test_identity(self):
        result = normalize("Hi!", encode_case=False)
        assert result.text == b"UhiP!"
        assert result.norm_to_orig == []
