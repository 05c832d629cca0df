"""Structural CSS parser.

Builds a positioned :class:`Stylesheet` on top of tinycss2. tinycss2 reports
where each node starts; where it ends is recovered by advancing the start
over the node's serialization, which for ordinary stylesheets reproduces the
source text exactly. A rule whose closing brace is not found at the computed
end is treated as unterminated.
"""

import re
from typing import Optional

import tinycss2

from ..utils.error import CssSyntaxError
from ..utils.logging import get_logger
from .model import AT_RULE, COMMENT, RULE, Declaration, Position, Rule, Span, Stylesheet

logger = get_logger(__name__)

# Same newline normalization tinycss2 applies before tokenizing.
NEWLINE_RE = re.compile(r'\r\n|\r|\f')

class SourceText:
    """Normalized source with line/column to offset lookups."""

    def __init__(self, text: str):
        self.text = NEWLINE_RE.sub('\n', text)
        self.line_starts = [0]
        for match in re.finditer('\n', self.text):
            self.line_starts.append(match.end())

    def offset(self, position: Position) -> int:
        if position.line > len(self.line_starts):
            return len(self.text)
        return self.line_starts[position.line - 1] + position.column - 1

    def char_at(self, position: Position) -> str:
        offset = self.offset(position)
        return self.text[offset:offset + 1] if offset >= 0 else ''

    def char_before(self, position: Position) -> str:
        offset = self.offset(position) - 1
        return self.text[offset:offset + 1] if offset >= 0 else ''

def _start(node) -> Position:
    return Position(node.source_line, node.source_column)

def _end(node) -> Position:
    return _start(node).advance(node.serialize())

def parse_stylesheet(text: str) -> Stylesheet:
    """Parse CSS text into a positioned stylesheet.

    Args:
        text: CSS source, tabs already expanded

    Returns:
        Stylesheet whose rules are in source order

    Raises:
        CssSyntaxError: On the first malformed construct
    """
    source = SourceText(text)
    nodes = tinycss2.parse_stylesheet(source.text, skip_comments=False, skip_whitespace=True)
    rules = tuple(_build_rule(node, source) for node in nodes)
    logger.debug(f"Parsed {len(rules)} rules")
    return Stylesheet(rules)

def _build_rule(node, source: SourceText) -> Rule:
    if node.type == 'error':
        raise CssSyntaxError(node.source_line, node.message)

    start = _start(node)
    end = _end(node)

    if node.type == 'comment':
        return Rule('', (), Span(start, end), COMMENT)

    if node.type == 'qualified-rule':
        _reject_bad_tokens(node.prelude)
        _reject_bad_tokens(node.content)
        _expect_closer(source, start, end, '}')
        selector = tinycss2.serialize(node.prelude).strip()
        declarations = _build_declarations(node.content, source)
        return Rule(selector, declarations, Span(start, end), RULE)

    if node.type == 'at-rule':
        _reject_bad_tokens(node.prelude)
        _expect_closer(source, start, end, ';' if node.content is None else '}')
        prelude = tinycss2.serialize(node.prelude).strip()
        selector = f"@{node.at_keyword} {prelude}".strip()
        return Rule(selector, (), Span(start, end), AT_RULE)

    raise CssSyntaxError(start.line, f"unexpected {node.type}")

def _expect_closer(source: SourceText, start: Position, end: Position, closer: str) -> None:
    if source.char_before(end) != closer:
        raise CssSyntaxError(start.line, f"missing '{closer}'")

def _reject_bad_tokens(tokens) -> None:
    """Raise on the first bad-string or bad-url token, nested blocks included."""
    for token in tokens:
        if token.type == 'error':
            raise CssSyntaxError(token.source_line, token.message)
        nested = getattr(token, 'arguments', None) or getattr(token, 'content', None)
        if isinstance(nested, list):
            _reject_bad_tokens(nested)

def _build_declarations(content: Optional[list], source: SourceText) -> tuple:
    declarations = []
    if not content:
        return ()

    for node in tinycss2.parse_blocks_contents(content, skip_comments=False, skip_whitespace=True):
        if node.type == 'error':
            raise CssSyntaxError(node.source_line, node.message)
        if node.type == 'comment':
            span = Span(_start(node), _end(node))
            declarations.append(Declaration('', node.value.strip(), span, is_comment=True))
        elif node.type == 'declaration':
            declarations.append(_build_declaration(node, source))
        else:
            raise CssSyntaxError(node.source_line, "nested rules are not supported")
    return tuple(declarations)

def _build_declaration(node, source: SourceText) -> Declaration:
    _reject_bad_tokens(node.value)
    start = _start(node)
    value_tokens = [t for t in node.value if t.type not in ('whitespace', 'comment')]
    if value_tokens:
        end = _end(value_tokens[-1])
    else:
        end = start.advance(node.name)
    # the span covers a directly following semicolon
    if source.char_at(end) == ';':
        end = Position(end.line, end.column + 1)

    value = tinycss2.serialize([t for t in node.value if t.type != 'comment']).strip()
    if node.important:
        value = f"{value} !important"
    return Declaration(node.name, value, Span(start, end))

__all__ = ['SourceText', 'parse_stylesheet']
