"""Pytest configuration for CSS Stylecheck tests."""

import logging
import pytest

# Configure logging
logging.basicConfig(
    level=logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

@pytest.fixture(scope='session')
def sample_css():
    """Return stylesheet content that follows the house style."""
    return (
        "/* layout */\n"
        "body {\n"
        "    color: #333;\n"
        "    margin: 0;\n"
        "}\n"
        "\n"
        ".header, .footer {\n"
        "    background: #f5f5f5;\n"
        "    padding: 10px;\n"
        "}\n"
        "\n"
        "a { color: red; }\n"
    )

@pytest.fixture(scope='session')
def messy_css():
    """Return stylesheet content with one problem of each kind."""
    return (
        "a {\n"
        "  position: bogus;\n"
        "    color: red;\n"
        "    color:blue\n"
        "}\n"
        "b { color: red; background: blue; }\n"
    )

@pytest.fixture(scope='session')
def sample_html():
    """Return sample HTML content for testing."""
    return """
    <!DOCTYPE html>
    <html lang="en">
    <head>
        <title>Test Page</title>
    </head>
    <body>
        <div id="main" class="container">
            <header class="header wide">
                <h1 id="title">Test Page</h1>
            </header>
            <p class="header">Repeated class</p>
            <footer class="footer"></footer>
        </div>
    </body>
    </html>
    """

@pytest.fixture
def css_file(tmp_path):
    """Return a factory writing CSS content to a temporary file."""
    def write(content, name='style.css'):
        path = tmp_path / name
        path.write_text(content, encoding='utf-8')
        return path
    return write
