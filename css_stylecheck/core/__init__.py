"""Core stylesheet checking functionality."""

from .dictionary import DEFAULT_DICTIONARY, PropertyDictionary, is_color, is_measurement, is_url
from .linter import validate, lint_file, lint_files
from .model import Diagnostic, LintResult, Stylesheet
from .parser import parse_stylesheet
from .spacing import analyze_text, strip_comments

__all__ = [
    'DEFAULT_DICTIONARY',
    'PropertyDictionary',
    'is_color',
    'is_measurement',
    'is_url',
    'validate',
    'lint_file',
    'lint_files',
    'Diagnostic',
    'LintResult',
    'Stylesheet',
    'parse_stylesheet',
    'analyze_text',
    'strip_comments',
]
