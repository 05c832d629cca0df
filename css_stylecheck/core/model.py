"""Positioned stylesheet tree and lint diagnostics."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

RULE = 'rule'
COMMENT = 'comment'
AT_RULE = 'at-rule'

@dataclass(frozen=True, order=True)
class Position:
    """A 1-indexed line/column pair."""
    line: int
    column: int

    def advance(self, text: str) -> 'Position':
        """Return the position just after ``text`` when it starts here."""
        newlines = text.count('\n')
        if not newlines:
            return Position(self.line, self.column + len(text))
        return Position(self.line + newlines, len(text) - text.rfind('\n'))

@dataclass(frozen=True)
class Span:
    start: Position
    end: Position

@dataclass(frozen=True)
class Declaration:
    """One ``property: value`` pair, or a comment inside a rule body."""
    property: str
    value: str
    span: Span
    is_comment: bool = False

    @property
    def line(self) -> int:
        return self.span.start.line

@dataclass(frozen=True)
class Rule:
    """A selector and its declaration block, a comment, or an at-rule."""
    selector: str
    declarations: Tuple[Declaration, ...]
    span: Span
    kind: str = RULE

    @property
    def is_comment(self) -> bool:
        return self.kind == COMMENT

    @property
    def is_oneliner(self) -> bool:
        return self.span.start.line == self.span.end.line

    @property
    def properties(self) -> Tuple[Declaration, ...]:
        """Declarations that are not comments."""
        return tuple(d for d in self.declarations if not d.is_comment)

@dataclass(frozen=True)
class Stylesheet:
    rules: Tuple[Rule, ...] = ()

    def __iter__(self):
        return iter(self.rules)

    def __len__(self):
        return len(self.rules)

@dataclass(frozen=True)
class Diagnostic:
    """A single house-style violation."""
    line: int
    message: str
    file: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        result = {'line': self.line, 'message': self.message}
        if self.file is not None:
            result['file'] = self.file
        return result

    def __str__(self) -> str:
        if self.file is not None:
            return f"{self.file}:{self.line}: {self.message}"
        return f"line {self.line}: {self.message}"

@dataclass
class LintResult:
    """Diagnostics of one validation pass, in discovery order."""
    errors: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {'ok': self.ok, 'errors': [e.to_dict() for e in self.errors]}

__all__ = [
    'RULE', 'COMMENT', 'AT_RULE',
    'Position', 'Span', 'Declaration', 'Rule', 'Stylesheet',
    'Diagnostic', 'LintResult',
]
