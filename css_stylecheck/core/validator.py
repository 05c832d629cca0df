"""Structural house-style validators.

Each validator walks a parsed stylesheet once and returns its diagnostics in
discovery order. None of them mutate the tree.
"""

import re
from typing import Iterable, List, Optional

from ..utils.config import DEFAULT_INDENT_WIDTH, DEFAULT_MAX_DECLARATIONS
from .dictionary import DEFAULT_DICTIONARY, PropertyDictionary
from .model import RULE, Diagnostic, Stylesheet

SELECTOR_NAME_RE = re.compile(r'([#.])(-?[_a-zA-Z][\w-]*)')
ATTRIBUTE_RE = re.compile(r'\[[^\]]*\]')

def validate_property_values(stylesheet: Stylesheet,
                             dictionary: PropertyDictionary = DEFAULT_DICTIONARY,
                             file: Optional[str] = None) -> List[Diagnostic]:
    """Flag declarations whose value the dictionary does not accept."""
    errors = []
    for rule in stylesheet:
        for dec in rule.properties:
            if not dictionary.accepts(dec.property, dec.value):
                msg = f"invalid property/value pair ({dec.property}/{dec.value})"
                errors.append(Diagnostic(dec.line, msg, file))
    return errors

def validate_indentation(stylesheet: Stylesheet,
                         width: int = DEFAULT_INDENT_WIDTH,
                         file: Optional[str] = None) -> List[Diagnostic]:
    """Check rule and declaration indentation.

    Rules start in column 1. A multi-line rule closes with ``}`` in column 1
    and indents each declaration by ``width`` spaces. One-liners are only
    checked for their start column.

    Args:
        stylesheet: Parsed stylesheet
        width: Expected declaration indent in spaces
        file: Label attached to every diagnostic

    Returns:
        One diagnostic per misplaced rule edge or declaration
    """
    errors = []
    for rule in stylesheet:
        if rule.is_comment:
            continue
        span = rule.span
        if span.start.column != 1:
            errors.append(Diagnostic(span.start.line, "bad indentation", file))
        if rule.is_oneliner:
            continue
        if span.end.column != 2:
            errors.append(Diagnostic(span.end.line, "bad indentation", file))
        for dec in rule.properties:
            if dec.span.start.column != width + 1:
                errors.append(Diagnostic(dec.line, "bad indentation", file))
    return errors

def validate_newlines(stylesheet: Stylesheet, file: Optional[str] = None) -> List[Diagnostic]:
    """Require a line break between consecutive rules and declarations."""
    errors = []
    rules = stylesheet.rules
    for previous, current in zip(rules, rules[1:]):
        if previous.span.end.line == current.span.start.line:
            msg = "missing newline between rules"
            errors.append(Diagnostic(previous.span.end.line, msg, file))

    for rule in rules:
        decs = rule.properties
        for previous, current in zip(decs, decs[1:]):
            if previous.span.end.line == current.span.start.line:
                msg = "missing newline between declarations"
                errors.append(Diagnostic(previous.span.end.line, msg, file))
    return errors

def validate_property_uniqueness(stylesheet: Stylesheet, file: Optional[str] = None) -> List[Diagnostic]:
    """Flag every repeat of a property within one rule."""
    errors = []
    for rule in stylesheet:
        seen = set()
        for dec in rule.properties:
            if dec.property in seen:
                msg = f"duplicate property ({dec.property})"
                errors.append(Diagnostic(dec.line, msg, file))
            else:
                seen.add(dec.property)
    return errors

def validate_declaration_count(stylesheet: Stylesheet,
                               maximum: int = DEFAULT_MAX_DECLARATIONS,
                               file: Optional[str] = None) -> List[Diagnostic]:
    """Limit declarations per rule.

    A one-liner may hold a single declaration whatever ``maximum`` is; any
    other rule may hold at most ``maximum``.
    """
    errors = []
    for rule in stylesheet:
        count = len(rule.properties)
        line = rule.span.start.line
        if rule.is_oneliner and count > 1:
            errors.append(Diagnostic(line, "rule (oneliner) has too many declarations", file))
        elif count > maximum:
            errors.append(Diagnostic(line, "rule has too many declarations", file))
    return errors

def selector_names(selector: str) -> List[str]:
    """Return the ``#id`` and ``.class`` names a selector mentions."""
    selector = ATTRIBUTE_RE.sub('', selector)
    names = []
    for prefix, name in SELECTOR_NAME_RE.findall(selector):
        if prefix + name not in names:
            names.append(prefix + name)
    return names

def validate_markup_references(stylesheet: Stylesheet, selectors: Iterable[str],
                               file: Optional[str] = None) -> List[Diagnostic]:
    """Flag id and class selectors that never occur in the markup.

    Args:
        stylesheet: Parsed stylesheet
        selectors: ``#id``/``.class`` names found in the markup
        file: Label attached to every diagnostic

    Returns:
        One diagnostic per unknown name, at the rule's first line
    """
    known = set(selectors)
    errors = []
    for rule in stylesheet:
        if rule.kind != RULE:
            continue
        for name in selector_names(rule.selector):
            if name not in known:
                msg = f"selector ({name}) not found in markup"
                errors.append(Diagnostic(rule.span.start.line, msg, file))
    return errors

__all__ = [
    'validate_property_values',
    'validate_indentation',
    'validate_newlines',
    'validate_property_uniqueness',
    'validate_declaration_count',
    'validate_markup_references',
    'selector_names',
]
