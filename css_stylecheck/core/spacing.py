"""Line-by-line spacing analysis.

Checks what the structural parser cannot see: the exact whitespace around
``{``, ``}``, ``:``, ``,`` and ``;``. Comments are removed first so that
braces or colons inside them are never analyzed. House style:

- one-liner: one space after ``{``, ``prop: value;`` spacing, ``; }`` close
- selector line: ``a, b {`` with one space after each comma and before ``{``
- declaration line: no space before ``:``, one after, ends with ``;``
- closer line: ``}`` alone
"""

import re
from typing import List, Optional, Tuple

from .model import Diagnostic

COMMENT_DELIMITER_RE = re.compile(r'/\*|\*/')

def strip_comment_line(line: str, inside_comment: bool) -> Tuple[str, bool]:
    """Remove comment text from one line.

    Args:
        line: Raw source line
        inside_comment: Whether the line starts inside a block comment

    Returns:
        The code left on the line and whether the next line starts inside
        a comment
    """
    pieces = COMMENT_DELIMITER_RE.split(line)
    code = ''.join(
        piece for j, piece in enumerate(pieces)
        if (j % 2 == 1) == inside_comment
    )
    if len(pieces) % 2 == 0:
        inside_comment = not inside_comment
    return code, inside_comment

def strip_comments(lines: List[str]) -> List[str]:
    """Remove comments from every line, carrying comment state across lines."""
    stripped = []
    inside_comment = False
    for line in lines:
        code, inside_comment = strip_comment_line(line, inside_comment)
        stripped.append(code)
    return stripped

def _char(line: str, index: int) -> str:
    """Character at ``index``, empty when out of range."""
    if 0 <= index < len(line):
        return line[index]
    return ''

def _colon_spacing_ok(line: str, colon: int) -> bool:
    return (_char(line, colon - 1) != ' '
            and _char(line, colon + 1) == ' '
            and _char(line, colon + 2) != ' ')

def _check_oneliner(line: str) -> List[str]:
    problems = []
    open_brace = line.index('{')
    if _char(line, open_brace + 1) != ' ' or _char(line, open_brace + 2) == ' ':
        problems.append("bad spacing")

    colon = line.find(':', open_brace)
    if colon != -1 and not _colon_spacing_ok(line, colon):
        problems.append("bad spacing")

    semicolon = line.find(';', open_brace)
    if semicolon == -1:
        problems.append("no semicolon")
        return problems
    if _char(line, semicolon - 1) == ' ':
        problems.append("bad spacing")

    close_brace = line.rindex('}')
    before = _char(line, close_brace - 1)
    if before != ' ' and _char(line, close_brace - 2) != ';':
        problems.append("bad spacing")
    elif before == ' ' and _char(line, close_brace - 2) == ' ':
        problems.append("bad spacing")
    return problems

def _check_selector(line: str) -> List[str]:
    problems = []
    for segment in line.split(',')[1:]:
        if _char(segment, 0) != ' ' or _char(segment, 1) == ' ':
            problems.append("bad spacing")

    open_brace = line.index('{')
    if _char(line, open_brace - 1) != ' ' or _char(line, open_brace - 2) == ' ':
        problems.append("bad spacing")
    return problems

def _check_declaration(line: str) -> List[str]:
    problems = []
    if not _colon_spacing_ok(line, line.index(':')):
        problems.append("bad spacing")

    semicolon = line.find(';')
    if semicolon == -1:
        problems.append("no semicolon")
        return problems
    if _char(line, semicolon - 1) == ' ':
        problems.append("bad spacing")
    if line[line.rindex(';') + 1:].strip():
        problems.append("bad spacing")
    return problems

def _check_closer(line: str) -> List[str]:
    if _char(line, 0) != '}' or line[1:].strip():
        return ["bad spacing"]
    return []

def check_line(line: str) -> List[str]:
    """Return the spacing problems of one comment-free line."""
    if '{' in line and '}' in line and ':' in line:
        return _check_oneliner(line)
    if '{' in line:
        return _check_selector(line)
    if ':' in line:
        return _check_declaration(line)
    if '}' in line:
        return _check_closer(line)
    return []

def check_spacing(lines: List[str], file: Optional[str] = None) -> List[Diagnostic]:
    """Check comment-free lines against the spacing rules."""
    errors = []
    for number, line in enumerate(lines, start=1):
        for problem in check_line(line):
            errors.append(Diagnostic(number, problem, file))
    return errors

def analyze_text(text: str, file: Optional[str] = None) -> List[Diagnostic]:
    """Run the line-by-line analysis over raw CSS text.

    Args:
        text: CSS source with tabs already expanded to spaces
        file: Label attached to every diagnostic

    Returns:
        Spacing diagnostics in line order
    """
    return check_spacing(strip_comments(text.split('\n')), file)

__all__ = ['strip_comment_line', 'strip_comments', 'check_line', 'check_spacing', 'analyze_text']
