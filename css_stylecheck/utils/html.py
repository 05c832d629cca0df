"""Markup loading and selector extraction."""

import os
from typing import List
import requests
import validators
from bs4 import BeautifulSoup
from .config import MAX_HTML_SIZE, REQUEST_TIMEOUT, USER_AGENT
from .error import FileOperationError, MarkupError
from .file import safe_read_file
from .logging import get_logger

logger = get_logger(__name__)

def load_markup(source: str) -> str:
    """Get HTML content from a source (URL or file).

    Args:
        source: URL or file path

    Returns:
        HTML content as string

    Raises:
        MarkupError: If the markup cannot be loaded
    """
    if is_valid_url(source):
        return get_html_from_url(source)
    return get_html_from_file(source)

def get_html_from_url(url: str) -> str:
    """Get HTML content from a URL.

    Raises:
        MarkupError: If the request fails or does not return HTML
    """
    try:
        response = requests.get(url, headers={'User-Agent': USER_AGENT}, timeout=REQUEST_TIMEOUT)
        response.raise_for_status()
    except requests.RequestException as e:
        raise MarkupError(f"Error fetching URL {url}: {e}")

    content_type = response.headers.get('content-type', '').lower()
    if 'text/html' not in content_type and 'application/xhtml+xml' not in content_type:
        raise MarkupError(f"Invalid content type for {url}: {content_type}")

    logger.debug(f"Fetched {len(response.content)} bytes of markup from {url}")
    return response.text

def get_html_from_file(file_path: str) -> str:
    """Get HTML content from a file.

    Raises:
        MarkupError: If file read fails
    """
    try:
        return safe_read_file(file_path, max_size=MAX_HTML_SIZE)
    except FileOperationError as e:
        raise MarkupError(str(e))

def parse_html(html: str) -> BeautifulSoup:
    """Parse HTML content with the standard library backend."""
    return BeautifulSoup(html, 'html.parser')

def get_all_ids(html: str) -> List[str]:
    """Return every id in the markup as ``#id``, first occurrence order."""
    ids = []
    for tag in parse_html(html).find_all(id=True):
        selector = '#' + tag['id'].strip()
        if selector != '#' and selector not in ids:
            ids.append(selector)
    return ids

def get_all_classes(html: str) -> List[str]:
    """Return every class in the markup as ``.class``, first occurrence order.

    A multi-class attribute contributes each of its classes separately.
    """
    classes = []
    for tag in parse_html(html).find_all(class_=True):
        for name in tag.get('class', []):
            selector = '.' + name
            if selector not in classes:
                classes.append(selector)
    return classes

def extract_selectors(html: str) -> List[str]:
    """Return the de-duplicated id and class selectors referenced in markup.

    Args:
        html: HTML content

    Returns:
        Ids first, then classes, each in document order
    """
    return get_all_ids(html) + get_all_classes(html)

def is_valid_url(url: str) -> bool:
    """Check if string is a valid URL rather than a local path."""
    if os.path.exists(url):
        return False
    return validators.url(url) is True

# Exported functions
__all__ = [
    'load_markup',
    'get_html_from_url',
    'get_html_from_file',
    'parse_html',
    'get_all_ids',
    'get_all_classes',
    'extract_selectors',
    'is_valid_url',
]
