"""Tests for the structural validators."""

import pytest
from ..core.dictionary import PropertyDictionary
from ..core.model import Declaration, Diagnostic, Position, Rule, Span, Stylesheet
from ..core.parser import parse_stylesheet
from ..core.validator import (
    selector_names,
    validate_declaration_count,
    validate_indentation,
    validate_markup_references,
    validate_newlines,
    validate_property_uniqueness,
    validate_property_values,
)

def span(start_line, start_col, end_line, end_col):
    return Span(Position(start_line, start_col), Position(end_line, end_col))

ALL_VALIDATORS = [
    validate_property_values,
    validate_indentation,
    validate_newlines,
    validate_property_uniqueness,
    validate_declaration_count,
]

class TestEmptyStylesheet:
    """Every validator accepts a stylesheet without rules."""

    @pytest.mark.parametrize('validator', ALL_VALIDATORS)
    def test_no_rules(self, validator):
        """No rules, no diagnostics."""
        assert validator(Stylesheet()) == []

    def test_conforming_stylesheet(self, sample_css):
        """The sample stylesheet passes every validator."""
        sheet = parse_stylesheet(sample_css)
        for validator in ALL_VALIDATORS:
            assert validator(sheet) == []

class TestPropertyValues:
    """Tests for validate_property_values."""

    def test_invalid_value(self):
        """A rejected value is reported on the declaration's line."""
        sheet = parse_stylesheet("a {\n    position: bogus;\n}\n")
        assert validate_property_values(sheet, file='x.css') == [
            Diagnostic(2, "invalid property/value pair (position/bogus)", 'x.css')
        ]

    def test_injected_dictionary(self):
        """The dictionary passed in decides what is valid."""
        sheet = parse_stylesheet("a {\n    cursor: grab;\n}\n")
        assert validate_property_values(sheet) == []
        strict = PropertyDictionary({'cursor': ['pointer']})
        assert len(validate_property_values(sheet, strict)) == 1

    def test_value_comments_ignored(self):
        """Comments around a value do not change what is checked."""
        sheet = parse_stylesheet(
            "a {\n    color: red /* brand */;\n    position: /* x */ absolute;\n}\n"
        )
        assert validate_property_values(sheet) == []

    def test_comments_are_skipped(self):
        """Comment declarations are never looked up."""
        comment = Declaration('', 'position: bogus', span(2, 5, 2, 25), is_comment=True)
        sheet = Stylesheet((Rule('a', (comment,), span(1, 1, 3, 2)),))
        assert validate_property_values(sheet) == []

class TestIndentation:
    """Tests for validate_indentation."""

    def test_default_width(self):
        """Four-space declarations and a column-one brace pass."""
        sheet = parse_stylesheet("a {\n    color: red;\n}\n")
        assert validate_indentation(sheet) == []

    def test_two_space_declaration(self):
        """A declaration indented by two spaces is reported once."""
        sheet = parse_stylesheet("a {\n  color: red;\n}\n")
        assert validate_indentation(sheet) == [Diagnostic(2, "bad indentation")]

    def test_custom_width(self):
        """The expected indent follows the width parameter."""
        sheet = parse_stylesheet("a {\n  color: red;\n}\n")
        assert validate_indentation(sheet, width=2) == []

    def test_indented_rule_and_closer(self):
        """Rule start and closing brace must be in column one."""
        sheet = parse_stylesheet("  a {\n    color: red;\n  }\n")
        assert validate_indentation(sheet) == [
            Diagnostic(1, "bad indentation"),
            Diagnostic(3, "bad indentation"),
        ]

    def test_oneliner_declarations_exempt(self):
        """One-liners only have their start column checked."""
        sheet = parse_stylesheet("a { color: red; }\n")
        assert validate_indentation(sheet) == []

    def test_comment_rules_exempt(self):
        """Comment rules may start anywhere."""
        sheet = parse_stylesheet("   /* note */\n")
        assert validate_indentation(sheet) == []

class TestNewlines:
    """Tests for validate_newlines."""

    def test_rules_on_one_line(self):
        """Two rules sharing a line are reported at the first rule's end."""
        sheet = parse_stylesheet("a { color: red; } b { color: blue; }\n")
        assert validate_newlines(sheet) == [Diagnostic(1, "missing newline between rules")]

    def test_declarations_on_one_line(self):
        """Two declarations sharing a line are reported."""
        sheet = parse_stylesheet("a {\n    color: red; background: blue;\n}\n")
        assert validate_newlines(sheet) == [Diagnostic(2, "missing newline between declarations")]

    def test_trailing_comment_ignored(self):
        """A comment sharing a declaration's line is not a violation."""
        sheet = parse_stylesheet("a {\n    color: red; /* text */\n    background: blue;\n}\n")
        assert validate_newlines(sheet) == []

    def test_comment_between_declarations(self):
        """Comments are skipped when pairing declarations."""
        sheet = parse_stylesheet("a {\n    color: red; /* x */ background: blue;\n}\n")
        assert validate_newlines(sheet) == [Diagnostic(2, "missing newline between declarations")]

    def test_comment_rule_counts_as_rule(self):
        """A comment on the closing line of a rule is a rule on that line."""
        sheet = parse_stylesheet("a {\n    color: red;\n} /* end */\n")
        assert validate_newlines(sheet) == [Diagnostic(3, "missing newline between rules")]

class TestPropertyUniqueness:
    """Tests for validate_property_uniqueness."""

    def test_duplicate(self):
        """Only the second occurrence is reported."""
        sheet = parse_stylesheet("a {\n    color: red;\n    color: blue;\n}\n")
        assert validate_property_uniqueness(sheet) == [Diagnostic(3, "duplicate property (color)")]

    def test_every_repeat_reported(self):
        """Third and later occurrences are reported too."""
        sheet = parse_stylesheet("a {\n    color: red;\n    color: blue;\n    color: green;\n}\n")
        assert [d.line for d in validate_property_uniqueness(sheet)] == [3, 4]

    def test_reset_per_rule(self):
        """The same property in different rules is fine."""
        sheet = parse_stylesheet("a {\n    color: red;\n}\n\nb {\n    color: red;\n}\n")
        assert validate_property_uniqueness(sheet) == []

class TestDeclarationCount:
    """Tests for validate_declaration_count."""

    @staticmethod
    def long_rule(count):
        body = ''.join(f"    prop-{i}: {i + 1}px;\n" for i in range(count))
        return "a {\n" + body + "}\n"

    def test_too_many(self):
        """26 declarations exceed the default maximum once."""
        sheet = parse_stylesheet(self.long_rule(26))
        assert validate_declaration_count(sheet) == [Diagnostic(1, "rule has too many declarations")]

    def test_at_maximum(self):
        """Exactly the maximum is allowed."""
        sheet = parse_stylesheet(self.long_rule(25))
        assert validate_declaration_count(sheet) == []

    def test_custom_maximum(self):
        """The maximum is configurable."""
        sheet = parse_stylesheet(self.long_rule(3))
        assert len(validate_declaration_count(sheet, maximum=2)) == 1

    def test_oneliner(self):
        """A one-liner may only hold one declaration, whatever the maximum."""
        sheet = parse_stylesheet("a { color: red; background: blue; }\n")
        expected = [Diagnostic(1, "rule (oneliner) has too many declarations")]
        assert validate_declaration_count(sheet) == expected
        assert validate_declaration_count(sheet, maximum=100) == expected

    def test_later_rules_checked(self):
        """Rules after the first are checked with their own line."""
        sheet = parse_stylesheet("a { color: red; }\n\nb { color: red; background: blue; }\n")
        assert validate_declaration_count(sheet) == [
            Diagnostic(3, "rule (oneliner) has too many declarations")
        ]

class TestMarkupReferences:
    """Tests for validate_markup_references."""

    def test_selector_names(self):
        """Ids and classes are extracted, attribute selectors ignored."""
        assert selector_names("#main .item > a:hover") == ['#main', '.item']
        assert selector_names("a[href='#top'].btn, .btn") == ['.btn']
        assert selector_names("body") == []

    def test_unknown_selectors(self):
        """Names missing from the markup are reported on the rule's line."""
        sheet = parse_stylesheet("#main .item {\n    color: red;\n}\n")
        assert validate_markup_references(sheet, ['#main', '.other']) == [
            Diagnostic(1, "selector (.item) not found in markup")
        ]

    def test_all_known(self):
        """No diagnostics when every name occurs in the markup."""
        sheet = parse_stylesheet("/* x */\n.a, #b {\n    color: red;\n}\n")
        assert validate_markup_references(sheet, {'.a', '#b'}) == []
