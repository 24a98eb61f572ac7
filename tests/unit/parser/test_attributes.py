"""Unit tests for layered attribute resolution."""

import pytest

from fmb_parser.attributes import (
    AttributeLayer,
    classify_prefix,
    parse_int,
    resolve_attribute,
    resolve_first,
    resolve_flag,
    resolve_int,
    split_qualified_name,
)


class TestPrefixClassification:
    """Test namespace prefix to layer mapping."""

    @pytest.mark.parametrize("prefix,layer", [
        ("", AttributeLayer.PLAIN),
        ("MYFORM_overridden", AttributeLayer.OVERRIDDEN),
        ("FORM_STD_inherited", AttributeLayer.INHERITED),
        ("FORM_STD_inherited_overridden", AttributeLayer.INHERITED),
        ("MYFORM_default", AttributeLayer.DEFAULT),
        ("MYFORM_OVERRIDDEN", AttributeLayer.OVERRIDDEN),
        ("forms", AttributeLayer.OTHER),
    ])
    def test_classify_prefix(self, prefix, layer):
        assert classify_prefix(prefix) == layer

    def test_split_qualified_name(self):
        assert split_qualified_name("MYFORM_default:Prompt") == ("MYFORM_default", "Prompt")
        assert split_qualified_name("{http://xmlns.oracle.com/Forms}Prompt") == ("http://xmlns.oracle.com/Forms", "Prompt")
        assert split_qualified_name("Prompt") == ("", "Prompt")


class TestResolveAttribute:
    """Test the resolution priority contract."""

    def test_overridden_beats_inherited_and_default(self):
        attributes = {
            "F_default:X": "a",
            "STD_inherited:X": "b",
            "F_overridden:X": "c",
        }
        assert resolve_attribute(attributes, "X") == "c"

    def test_inherited_beats_default(self):
        attributes = {"F_default:X": "a", "STD_inherited:X": "b"}
        assert resolve_attribute(attributes, "X") == "b"

    def test_other_prefix_beats_default(self):
        attributes = {"F_default:X": "a", "forms:X": "b"}
        assert resolve_attribute(attributes, "X") == "b"

    def test_plain_attribute_wins_even_when_empty(self):
        attributes = {"X": "", "F_overridden:X": "c"}
        assert resolve_attribute(attributes, "X") == ""

    def test_empty_values_are_skipped(self):
        attributes = {"F_overridden:X": "", "F_default:X": "a"}
        assert resolve_attribute(attributes, "X") == "a"

    def test_all_empty_returns_empty_string(self):
        attributes = {"F_overridden:X": "", "F_default:X": ""}
        assert resolve_attribute(attributes, "X") == ""

    def test_missing_returns_none(self):
        assert resolve_attribute({"F_default:Y": "a"}, "X") is None

    def test_local_name_must_match_exactly(self):
        assert resolve_attribute({"F_default:XY": "a"}, "X") is None

    def test_resolve_first_prefers_first_non_empty_spelling(self):
        attributes = {"F_default:CanvasName": "", "F_overridden:Canvas": "CANVAS_BODY"}
        assert resolve_first(attributes, ("CanvasName", "Canvas")) == "CANVAS_BODY"
        assert resolve_first(attributes, ("CanvasName",)) == ""
        assert resolve_first(attributes, ("Missing",)) is None


class TestTypedResolution:
    """Test integer and flag resolution."""

    @pytest.mark.parametrize("value,expected", [
        ("20", 20),
        (" 42px", 42),
        ("-3", -3),
        ("abc", None),
        ("", None),
        (None, None),
    ])
    def test_parse_int(self, value, expected):
        assert parse_int(value) == expected

    def test_resolve_int_missing_is_none_not_zero(self):
        assert resolve_int({}, "MaximumLength") is None
        assert resolve_int({"F_default:MaximumLength": "30"}, "MaximumLength") == 30

    def test_resolve_flag_literals_only(self):
        assert resolve_flag({"F_overridden:Required": "TRUE"}, "Required", False) is True
        assert resolve_flag({"F_overridden:Enabled": "false"}, "Enabled", True) is False
        assert resolve_flag({"F_overridden:Enabled": "yes"}, "Enabled", True) is True
        assert resolve_flag({}, "Visible", True) is True
