"""
Translate suggestions for the launcher's script filter.
Usage:
    python main.py <source> <target> <query> [<target display name>]
    python main.py en es hello "Spanish"
"""

import argparse
import logging
import sys
from Translator.Utility.env import load_env_file, get_log_level
from Translator.Utility.validators import validate_query_args
from Translator.Utility.feedback import render_feedback
from Translator.Exception.TranslateError import TranslateError
from Translator.Business.TranslateBusiness import TranslateBusiness

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Translate a query and print launcher suggestion JSON",
        epilog="""
            Examples:
            python main.py en es hello              # English -> Spanish
            python main.py auto de "good morning"   # detect source language
        """
    )
    parser.add_argument('source', help='Source language code (e.g. en, auto)')
    parser.add_argument('target', help='Target language code (e.g. es)')
    parser.add_argument('query', help='Text to translate')
    parser.add_argument(
        'target_display_name',
        nargs='?',
        default=None,
        help='Target language display name (accepted for compatibility, unused)'
    )
    return parser


def main(argv=None, business=None) -> int:
    """Parse arguments, translate and print the item list. Returns the exit status."""
    args = build_parser().parse_args(argv)

    load_env_file()
    logging.basicConfig(level=getattr(logging, get_log_level(), logging.WARNING), stream=sys.stderr)

    try:
        request = validate_query_args(args.source, args.target, args.query, args.target_display_name)
    except ValueError as e:
        print(f"Invalid arguments: {e}", file=sys.stderr)
        return 2

    try:
        business = business or TranslateBusiness()
        feedback = business.TranslateQuery(request)
    except TranslateError as e:
        logger.debug("Translation failed", exc_info=True)
        print(f"Translation failed: {e.message}", file=sys.stderr)
        return 1

    print(render_feedback(feedback))
    return 0


if __name__ == '__main__':
    sys.exit(main())
