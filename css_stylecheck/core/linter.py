"""Validation orchestrator.

Parses a stylesheet once, runs every structural validator and the
line-by-line analyzer over it and merges their diagnostics.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Tuple, Union

from ..utils.config import DEFAULT_INDENT_WIDTH, DEFAULT_JOBS, DEFAULT_MAX_DECLARATIONS
from ..utils.error import ConfigurationError, CssSyntaxError, StyleCheckError
from ..utils.file import read_css_file
from ..utils.logging import get_logger
from .dictionary import DEFAULT_DICTIONARY, PropertyDictionary
from .model import Diagnostic, LintResult
from .parser import parse_stylesheet
from .spacing import analyze_text
from .validator import (
    validate_declaration_count,
    validate_indentation,
    validate_markup_references,
    validate_newlines,
    validate_property_uniqueness,
    validate_property_values,
)

logger = get_logger(__name__)

def validate(text: str, file: Optional[str] = None, *,
             dictionary: PropertyDictionary = DEFAULT_DICTIONARY,
             indent_width: int = DEFAULT_INDENT_WIDTH,
             max_declarations: int = DEFAULT_MAX_DECLARATIONS,
             markup_selectors: Optional[Iterable[str]] = None) -> LintResult:
    """Validate CSS text against the house style.

    Args:
        text: CSS source with tabs already expanded to spaces
        file: Label attached to every diagnostic
        dictionary: Accepted property values
        indent_width: Expected declaration indent in spaces
        max_declarations: Largest number of declarations per rule
        markup_selectors: ``#id``/``.class`` names from markup; when given,
            selectors missing from it are reported too

    Returns:
        LintResult whose errors keep checker order, then discovery order.
        A stylesheet that fails to parse yields exactly one error.
    """
    _check_options(indent_width, max_declarations)

    try:
        stylesheet = parse_stylesheet(text)
    except CssSyntaxError as e:
        logger.debug(f"Parse failed for {file or '<text>'}: {e}")
        return LintResult([Diagnostic(e.line, e.message, file)])

    checks: List[Tuple[str, Callable[[], List[Diagnostic]]]] = [
        ('property/value', lambda: validate_property_values(stylesheet, dictionary, file)),
        ('indentation', lambda: validate_indentation(stylesheet, indent_width, file)),
        ('newlines', lambda: validate_newlines(stylesheet, file)),
        ('uniqueness', lambda: validate_property_uniqueness(stylesheet, file)),
        ('declaration count', lambda: validate_declaration_count(stylesheet, max_declarations, file)),
        ('spacing', lambda: analyze_text(text, file)),
    ]
    if markup_selectors is not None:
        selectors = list(markup_selectors)
        checks.append(('markup', lambda: validate_markup_references(stylesheet, selectors, file)))

    result = LintResult()
    for name, check in checks:
        try:
            found = check()
        except Exception as e:
            logger.error(f"Error running {name} check on {file or '<text>'}: {e}")
            continue
        logger.debug(f"{name} check found {len(found)} problems")
        result.errors.extend(found)
    return result

def _check_options(indent_width: int, max_declarations: int) -> None:
    if not isinstance(indent_width, int) or indent_width < 0:
        raise ConfigurationError(f"Invalid indent width: {indent_width!r}")
    if not isinstance(max_declarations, int) or max_declarations < 1:
        raise ConfigurationError(f"Invalid declaration maximum: {max_declarations!r}")

def lint_file(file_path: str, **options) -> LintResult:
    """Read a stylesheet from disk and validate it.

    Raises:
        FileOperationError: If the file cannot be read
    """
    text = read_css_file(file_path)
    return validate(text, file_path, **options)

def lint_files(file_paths: Iterable[str], jobs: Optional[int] = DEFAULT_JOBS,
               **options) -> List[Tuple[str, Union[LintResult, StyleCheckError]]]:
    """Validate several stylesheets concurrently.

    Args:
        file_paths: Stylesheets to check
        jobs: Worker threads, None for the executor default
        **options: Passed on to :func:`validate`

    Returns:
        (path, outcome) pairs in input order. The outcome is the
        LintResult, or the StyleCheckError that stopped that file.
    """
    file_paths = list(file_paths)

    def run(path):
        try:
            return path, lint_file(path, **options)
        except StyleCheckError as e:
            logger.error(f"Error linting {path}: {e}")
            return path, e

    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(run, file_paths))

__all__ = ['validate', 'lint_file', 'lint_files']
