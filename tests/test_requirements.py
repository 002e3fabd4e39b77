"""Tests for requirement parsing.

Tests cover:
- Converters: string, integer, number, reference, regexp
- Literal-regex normalization
- Array requirement tokenizer
- Requirement parser (scalar, tuple, pass-through)
"""

import re

import pytest

from ruleforge.validation.errors import (
    ArityMismatch,
    NoSuchReference,
    NotAnArray,
    NotAnInteger,
    NotANumber,
    UnknownRequirementType,
)
from ruleforge.validation.requirements import (
    ConverterRegistry,
    convert_requirement,
    normalize_regexp,
    parse_numeric,
    parse_requirements,
    tokenize_array_requirement,
)
from ruleforge.validation.types import RegexRequirement, RequirementType


class FakeResolver:
    """Selector lookup over a fixed mapping."""

    def __init__(self, elements: dict[str, list]):
        self.elements = elements
        self.calls: list[str] = []

    def select(self, selector: str) -> list:
        self.calls.append(selector)
        return self.elements.get(selector, [])


# =============================================================================
# Converter Tests
# =============================================================================


class TestConverters:
    """Tests for the converter registry."""

    def test_string_is_identity(self):
        assert convert_requirement("string", "  hello ") == "  hello "

    def test_missing_type_falls_back_to_string(self):
        assert convert_requirement(None, "abc") == "abc"
        assert convert_requirement("", "abc") == "abc"

    def test_enum_and_string_tags_are_equivalent(self):
        assert convert_requirement(RequirementType.INTEGER, "7") == 7
        assert convert_requirement("integer", "7") == 7

    @pytest.mark.parametrize("text,expected", [
        ("42", 42),
        ("-17", -17),
        (" 8 ", 8),
        ("007", 7),
        ("3.7", 3),
        ("-3.7", -3),
        ("+5", 5),
        ("1e3", 1),
        ("1e-3", 1),
        ("12.9e2", 12),
    ])
    def test_integer(self, text, expected):
        result = convert_requirement("integer", text)
        assert result == expected
        assert isinstance(result, int)

    @pytest.mark.parametrize("text", ["abc", "", "   ", "nan", "1_000", "12px", "inf", ".5"])
    def test_integer_rejects_non_numeric(self, text):
        with pytest.raises(NotAnInteger) as exc_info:
            convert_requirement("integer", text)
        assert exc_info.value.requirement == text
        assert "Requirement is not an integer" in str(exc_info.value)

    @pytest.mark.parametrize("text,expected", [
        ("3.14", 3.14),
        ("10", 10.0),
        ("-0.5", -0.5),
        ("1e3", 1000.0),
    ])
    def test_number(self, text, expected):
        assert convert_requirement("number", text) == expected

    @pytest.mark.parametrize("text", ["abc", "", "NaN", "1,5"])
    def test_number_rejects_non_numeric(self, text):
        with pytest.raises(NotANumber) as exc_info:
            convert_requirement("number", text)
        assert exc_info.value.requirement == text

    def test_reference_resolves_through_resolver(self):
        resolver = FakeResolver({"#password": ["secret"]})
        assert convert_requirement("reference", "#password", resolver) == ["secret"]
        assert resolver.calls == ["#password"]

    def test_reference_with_empty_result(self):
        resolver = FakeResolver({})
        with pytest.raises(NoSuchReference) as exc_info:
            convert_requirement("reference", "#missing", resolver)
        assert exc_info.value.requirement == "#missing"

    def test_reference_without_resolver(self):
        with pytest.raises(NoSuchReference):
            convert_requirement("reference", "#password")

    def test_regexp_returns_pattern_and_flags(self):
        assert convert_requirement("regexp", "/ab+c/gi") == RegexRequirement("ab+c", "gi")
        assert convert_requirement("regexp", "ab+c") == RegexRequirement("ab+c", "")

    def test_unknown_type(self):
        with pytest.raises(UnknownRequirementType) as exc_info:
            convert_requirement("date", "2024-01-01")
        assert exc_info.value.requirement_type == "date"
        assert 'Unknown requirement specification: "date"' in str(exc_info.value)

    def test_registry_lists_all_types(self):
        assert ConverterRegistry.list_registered() == [
            "integer", "number", "reference", "regexp", "string",
        ]
        assert ConverterRegistry.is_registered("number")
        assert not ConverterRegistry.is_registered("boolean")


class TestParseNumeric:
    def test_numeric_strings(self):
        assert parse_numeric("12") == 12.0
        assert parse_numeric(" -1.5 ") == -1.5

    def test_non_numeric_strings(self):
        assert parse_numeric("") is None
        assert parse_numeric("abc") is None
        assert parse_numeric("nan") is None


# =============================================================================
# Literal-Regex Normalizer Tests
# =============================================================================


class TestNormalizeRegexp:
    """Tests for `/pattern/flags` handling."""

    def test_literal_with_flags(self):
        assert normalize_regexp("/ab+c/gi") == ("ab+c", "gi")

    def test_literal_without_flags(self):
        assert normalize_regexp("/ab+c/") == ("ab+c", "")

    def test_bare_pattern(self):
        assert normalize_regexp("ab+c") == ("ab+c", "")

    def test_internal_slashes(self):
        assert normalize_regexp("/a/b/i") == ("a/b", "i")
        assert normalize_regexp("/\\d+/\\d+/m") == ("\\d+/\\d+", "m")

    def test_unknown_flag_is_not_a_literal(self):
        assert normalize_regexp("/abc/x") == ("/abc/x", "")

    def test_single_slash_is_not_a_literal(self):
        assert normalize_regexp("/") == ("/", "")

    def test_all_flags(self):
        assert normalize_regexp("/x/gimy") == ("x", "gimy")

    def test_trailing_newline_is_not_a_literal(self):
        assert normalize_regexp("/ab/\n") == ("/ab/\n", "")
        assert normalize_regexp("/ab/i\n") == ("/ab/i\n", "")

    def test_newline_inside_body_is_not_a_literal(self):
        assert normalize_regexp("/a\nb/i") == ("/a\nb/i", "")


class TestRegexRequirement:
    def test_ignorecase_flag(self):
        regexp = RegexRequirement("abc", "i")
        assert regexp.compile().flags & re.IGNORECASE
        assert regexp.test("xxABCxx")

    def test_multiline_flag(self):
        regexp = RegexRequirement("^b$", "m")
        assert regexp.test("a\nb\nc")
        assert not RegexRequirement("^b$").test("a\nb\nc")

    def test_global_flag_is_ignored(self):
        assert RegexRequirement("b", "g").test("abc")

    def test_sticky_anchors_at_start(self):
        assert RegexRequirement("ab", "y").test("abc")
        assert not RegexRequirement("bc", "y").test("abc")

    def test_invalid_pattern_fails_only_when_compiled(self):
        regexp = convert_requirement("regexp", "(unclosed")
        assert regexp.pattern == "(unclosed"
        with pytest.raises(re.error):
            regexp.compile()


# =============================================================================
# Array Tokenizer Tests
# =============================================================================


class TestTokenizer:
    """Tests for bracketed array requirements."""

    def test_tokenize(self):
        assert tokenize_array_requirement("[1, 2, 3]", 3) == ["1", "2", "3"]

    def test_tokens_are_trimmed(self):
        assert tokenize_array_requirement("  [ a ,b,   c ]  ", 3) == ["a", "b", "c"]

    def test_empty_brackets_yield_one_empty_token(self):
        assert tokenize_array_requirement("[]", 1) == [""]

    def test_arity_mismatch(self):
        with pytest.raises(ArityMismatch) as exc_info:
            tokenize_array_requirement("[1,2]", 3)
        assert exc_info.value.got == 2
        assert exc_info.value.want == 3
        assert str(exc_info.value) == "Requirement has 2 values when 3 are needed"

    def test_missing_brackets(self):
        with pytest.raises(NotAnArray) as exc_info:
            tokenize_array_requirement("1,2", 2)
        assert exc_info.value.requirement == "1,2"

    def test_unclosed_bracket(self):
        with pytest.raises(NotAnArray):
            tokenize_array_requirement("[1,2", 2)


# =============================================================================
# Parser Tests
# =============================================================================


class TestParseRequirements:
    """Tests for the requirement parser."""

    def test_scalar(self):
        assert parse_requirements("5", "integer") == [5]
        assert parse_requirements("5", RequirementType.STRING) == ["5"]

    def test_scalar_defaults_to_string(self):
        assert parse_requirements("5", None) == ["5"]

    def test_tuple(self):
        assert parse_requirements("[1,2]", ("integer", "integer")) == [1, 2]

    def test_list_type_behaves_like_tuple(self):
        assert parse_requirements("[1,2]", ["integer", "integer"]) == [1, 2]

    def test_mixed_tuple(self):
        result = parse_requirements(
            "[3, 2.5, /x+/i]",
            (RequirementType.INTEGER, RequirementType.NUMBER, RequirementType.REGEXP),
        )
        assert result == [3, 2.5, RegexRequirement("x+", "i")]

    def test_tuple_conversion_error(self):
        with pytest.raises(NotAnInteger) as exc_info:
            parse_requirements("[1, x]", ("integer", "integer"))
        assert exc_info.value.requirement == "x"

    def test_tuple_arity_mismatch(self):
        with pytest.raises(ArityMismatch):
            parse_requirements("[1, 2, 3]", ("integer", "integer"))

    def test_tuple_requires_brackets(self):
        with pytest.raises(NotAnArray):
            parse_requirements("1, 2", ("integer", "integer"))

    def test_non_string_passthrough(self):
        assert parse_requirements([1, 2], "integer") == [1, 2]
        assert parse_requirements((1, 2), "integer") == [1, 2]
        assert parse_requirements(5, "integer") == [5]
        assert parse_requirements(None, "string") == [None]

    def test_reference_uses_resolver(self):
        resolver = FakeResolver({"#other": ["value"]})
        assert parse_requirements("#other", "reference", resolver) == [["value"]]

    def test_unknown_type(self):
        with pytest.raises(UnknownRequirementType):
            parse_requirements("x", "bogus")

    def test_parsing_is_repeatable(self):
        requirement_type = ("integer", "number", "regexp")
        first = parse_requirements("[1, 2, /a/g]", requirement_type)
        second = parse_requirements("[1, 2, /a/g]", requirement_type)
        assert first == second
        assert first is not second
