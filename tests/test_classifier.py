"""
Tests for the field classifier (fields → typed items).
"""

import math

import pytest
from otherdata.classifier import classify, classify_fields, parse_number, promote_numeric
from otherdata.errors import CodecError, InvalidFormatError
from otherdata.items import StringValue, NumericValue, NamedValue


class TestClassify:
    """Test the first classification pass."""

    def test_plain_string(self):
        """A field without '=' is a StringValue."""
        assert classify("walk") == StringValue("walk")

    def test_empty_field(self):
        """An empty field is an empty StringValue."""
        assert classify("") == StringValue("")

    def test_named_value(self):
        """An unescaped '=' makes a NamedValue."""
        assert classify("unit=bpm") == NamedValue(name="unit", value="bpm")

    def test_extra_subfields_dropped(self):
        """Sub-fields beyond the second are discarded."""
        assert classify("a=b=c") == NamedValue(name="a", value="b")

    def test_empty_value(self):
        """'name=' has an empty value."""
        assert classify("a=") == NamedValue(name="a", value="")

    def test_escaped_equals_in_name(self):
        """'\\=' in the name is unescaped."""
        assert classify(r"x\=y=1") == NamedValue(name="x=y", value="1")

    def test_escaped_equals_in_plain_string(self):
        """An escaped '=' alone keeps the field a StringValue."""
        assert classify(r"a\=b") == StringValue("a=b")

    def test_value_keeps_escape_markers(self):
        """Only the name side is unescaped."""
        assert classify(r"k=v\=w") == NamedValue(name="k", value=r"v\=w")

    def test_escaped_comma_unescaped(self):
        """'\\,' becomes ','."""
        assert classify(r"a\,b") == StringValue("a,b")

    def test_escaped_backslash_unescaped(self):
        """'\\\\' in a plain string becomes one backslash."""
        assert classify(r"a\\b") == StringValue("a\\b")

    def test_name_unescaped_once_per_subfield(self):
        """With two sub-fields the name is unescaped twice."""
        result = classify(r"a\\\\b=1")
        assert result == NamedValue(name="a\\b", value="1")

    def test_trailing_escape_marker(self):
        """A lone trailing backslash stays literal."""
        assert classify("a\\") == StringValue("a\\")

    def test_classify_fields_preserves_order(self):
        """Order and duplicates are preserved."""
        result = classify_fields(["1", "k=v", "1"])
        assert result == [StringValue("1"), NamedValue("k", "v"), StringValue("1")]


class TestParseNumber:
    """Test culture-invariant number parsing."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1", 1.0),
            ("-2.5", -2.5),
            ("+3", 3.0),
            (".5", 0.5),
            ("1.", 1.0),
            ("1E+20", 1e20),
            ("2.5e-3", 0.0025),
            (" 7 ", 7.0),
            ("Infinity", math.inf),
            ("-Infinity", -math.inf),
            ("inf", math.inf),
        ],
    )
    def test_valid_numbers(self, text, expected):
        assert parse_number(text) == expected

    def test_nan(self):
        """NaN parses, in any case."""
        assert math.isnan(parse_number("NaN"))
        assert math.isnan(parse_number("nan"))

    @pytest.mark.parametrize("text", ["", "abc", "1_000", "1 000", "0x10", "1.2.3", "e5", "--1"])
    def test_invalid_numbers(self, text):
        with pytest.raises(ValueError):
            parse_number(text)


class TestPromoteNumeric:
    """Test the optional numeric pass."""

    def test_promotes_strings(self):
        """StringValue items become NumericValue."""
        result = promote_numeric([StringValue("1.5"), StringValue("-2")])
        assert result == [NumericValue(1.5), NumericValue(-2.0)]

    def test_named_values_pass_through(self):
        """NamedValue items are untouched."""
        named = NamedValue("unit", "bpm")
        result = promote_numeric([named, StringValue("60")])
        assert result == [named, NumericValue(60.0)]

    def test_numeric_values_pass_through(self):
        """Already-numeric items are kept."""
        assert promote_numeric([NumericValue(1.0)]) == [NumericValue(1.0)]

    def test_invalid_value_fails_whole_batch(self):
        """One bad value raises; nothing is returned."""
        with pytest.raises(InvalidFormatError) as exc_info:
            promote_numeric([StringValue("1"), StringValue("abc"), StringValue("2")])
        assert exc_info.value.text == "abc"
        assert exc_info.value.index == 1

    def test_invalid_format_is_codec_error(self):
        """InvalidFormatError belongs to the codec error family."""
        with pytest.raises(CodecError):
            promote_numeric([StringValue("abc")])
        with pytest.raises(ValueError):
            promote_numeric([StringValue("abc")])

    def test_non_item_rejected(self):
        """Anything that is not an Item is a TypeError."""
        with pytest.raises(TypeError):
            promote_numeric(["1"])

    def test_empty_sequence(self):
        """Nothing to promote."""
        assert promote_numeric([]) == []
