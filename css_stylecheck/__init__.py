"""House-style checker for CSS."""

from .core import validate, lint_file, lint_files, Diagnostic, LintResult
from .utils.config import VERSION

__version__ = VERSION

__all__ = ['validate', 'lint_file', 'lint_files', 'Diagnostic', 'LintResult', '__version__']
