#!/usr/bin/env python3
"""
Command-line interface for CSS Stylecheck.
"""

import argparse
import logging
import sys
from typing import List, Optional

import orjson
from colorama import Fore, Style, init as colorama_init

from css_stylecheck.core.linter import lint_files, validate
from css_stylecheck.utils.config import (
    DEFAULT_INDENT_WIDTH,
    DEFAULT_JOBS,
    DEFAULT_MAX_DECLARATIONS,
    VERSION,
)
from css_stylecheck.utils.error import StyleCheckError
from css_stylecheck.utils.file import find_css_files, normalize_tabs
from css_stylecheck.utils.html import extract_selectors, load_markup
from css_stylecheck.utils.logging import setup_logging

# Exit codes
EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2

STDIN_LABEL = '<stdin>'

def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value}")
    return number

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='css-stylecheck',
        description='Check CSS files against the house style'
    )

    parser.add_argument(
        'paths',
        help="CSS files or directories to check ('-' reads standard input)",
        nargs='+'
    )

    # Style options
    parser.add_argument(
        '--indent',
        help='Declaration indent in spaces',
        type=positive_int,
        default=DEFAULT_INDENT_WIDTH
    )
    parser.add_argument(
        '--max-declarations',
        help='Maximum declarations per rule',
        type=positive_int,
        default=DEFAULT_MAX_DECLARATIONS
    )
    parser.add_argument(
        '--html',
        help='HTML file or URL whose ids and classes every selector must match'
    )

    # Output options
    parser.add_argument(
        '--format',
        help='Output format',
        choices=['text', 'json'],
        default='text'
    )
    parser.add_argument(
        '--no-color',
        help='Disable colored output',
        action='store_true'
    )

    # Other options
    parser.add_argument(
        '-j', '--jobs',
        help='Number of files to check in parallel',
        type=positive_int,
        default=DEFAULT_JOBS
    )
    parser.add_argument(
        '--log-file',
        help='Also write log records to this file'
    )
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser.parse_args(argv)

def collect_paths(paths: List[str]) -> List[str]:
    """Expand directories into the stylesheets they contain."""
    found = []
    for path in paths:
        if path == '-':
            found.append(path)
        else:
            found.extend(find_css_files(path))
    return found

def format_text(outcomes, color: bool) -> str:
    """Render outcomes as one line per diagnostic or system error."""
    red = Fore.RED if color else ''
    yellow = Fore.YELLOW if color else ''
    green = Fore.GREEN if color else ''
    reset = Style.RESET_ALL if color else ''

    lines = []
    total = 0
    for path, outcome in outcomes:
        if isinstance(outcome, Exception):
            lines.append(f"{red}{path}: error: {outcome}{reset}")
            continue
        for diagnostic in outcome.errors:
            total += 1
            lines.append(f"{yellow}{path}:{diagnostic.line}{reset}: {diagnostic.message}")

    if total:
        lines.append(f"{red}{total} problem(s) found{reset}")
    elif not any(isinstance(o, Exception) for _, o in outcomes):
        lines.append(f"{green}No problems found{reset}")
    return '\n'.join(lines)

def format_json(outcomes) -> str:
    """Render outcomes as a JSON document keyed by path."""
    report = []
    for path, outcome in outcomes:
        if isinstance(outcome, Exception):
            report.append({'file': path, 'error': str(outcome)})
        else:
            report.append({'file': path, **outcome.to_dict()})
    return orjson.dumps(report, option=orjson.OPT_INDENT_2).decode('utf-8')

def exit_code(outcomes) -> int:
    if any(isinstance(outcome, Exception) for _, outcome in outcomes):
        return EXIT_ERROR
    if any(not outcome.ok for _, outcome in outcomes):
        return EXIT_VIOLATIONS
    return EXIT_OK

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(args.verbose, args.log_file)
    color = not args.no_color and sys.stdout.isatty()
    if color:
        colorama_init()

    try:
        options = {
            'indent_width': args.indent,
            'max_declarations': args.max_declarations,
        }
        if args.html:
            options['markup_selectors'] = extract_selectors(load_markup(args.html))
            logging.debug(f"Loaded {len(options['markup_selectors'])} selectors from {args.html}")

        paths = collect_paths(args.paths)
        files = [p for p in paths if p != '-']
        outcomes = dict(lint_files(files, jobs=args.jobs, **options))
        if '-' in paths:
            text = normalize_tabs(sys.stdin.read())
            outcomes['-'] = validate(text, STDIN_LABEL, **options)

        ordered = [(STDIN_LABEL if p == '-' else p, outcomes[p]) for p in paths]
    except StyleCheckError as e:
        logging.error(f"Error: {e}")
        return EXIT_ERROR

    if args.format == 'json':
        print(format_json(ordered))
    else:
        print(format_text(ordered, color=color))

    return exit_code(ordered)

if __name__ == '__main__':
    sys.exit(main())
