"""File utility for CSS Stylecheck."""

import os
from typing import List
import chardet
from .config import CSS_EXTENSIONS, MAX_CSS_SIZE, TAB_WIDTH
from .error import FileOperationError
from .logging import get_logger

logger = get_logger(__name__)

def detect_encoding(file_path: str) -> str:
    """Detect file encoding.

    Args:
        file_path: Path to file

    Returns:
        Detected encoding, 'utf-8' when detection is inconclusive
    """
    with open(file_path, 'rb') as f:
        raw_data = f.read()

    encoding = chardet.detect(raw_data)['encoding']
    if not encoding or encoding.lower() == 'ascii':
        encoding = 'utf-8'
    return encoding

def safe_read_file(file_path: str, encoding: str = None, max_size: int = MAX_CSS_SIZE) -> str:
    """Safely read content from a file.

    Args:
        file_path: Path to the file
        encoding: File encoding, detected when omitted
        max_size: Largest accepted file size in bytes

    Returns:
        File content

    Raises:
        FileOperationError: If file read fails
    """
    try:
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")
        size = os.path.getsize(file_path)
        if size > max_size:
            raise ValueError(f"File too large ({size} bytes, max {max_size})")
        if encoding is None:
            encoding = detect_encoding(file_path)
        with open(file_path, 'r', encoding=encoding) as f:
            return f.read()
    except (OSError, ValueError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

def normalize_tabs(text: str, width: int = TAB_WIDTH) -> str:
    """Replace every tab character with ``width`` spaces."""
    return text.replace('\t', ' ' * width)

def read_css_file(file_path: str) -> str:
    """Read a stylesheet and normalize its tabs.

    Raises:
        FileOperationError: If file read fails
    """
    logger.debug(f"Reading stylesheet {file_path}")
    return normalize_tabs(safe_read_file(file_path))

def find_css_files(path: str) -> List[str]:
    """Expand a path into the stylesheets it names.

    A file is returned as is; a directory is walked recursively for files
    with a CSS extension, in sorted order.

    Raises:
        FileOperationError: If the path does not exist
    """
    if os.path.isfile(path):
        return [path]
    if not os.path.isdir(path):
        raise FileOperationError(f"No such file or directory: {path}")

    found = []
    for root, dirs, files in os.walk(path):
        dirs.sort()
        for name in sorted(files):
            if os.path.splitext(name)[1].lower() in CSS_EXTENSIONS:
                found.append(os.path.join(root, name))
    return found

# Exported functions
__all__ = [
    'detect_encoding',
    'safe_read_file',
    'normalize_tabs',
    'read_css_file',
    'find_css_files',
]
