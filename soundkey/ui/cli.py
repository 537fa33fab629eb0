"""Command-line interface for SoundKey."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from .. import __version__
from ..config import SoundKeyConfig
from ..core.encoder import scan
from ..matching import NameMatcher, PhoneticIndex

# Exit code of 'compare' when the names do not sound alike
NO_MATCH = 2


def build_config(args: argparse.Namespace) -> SoundKeyConfig:
    """Build matching settings from the global options."""
    return SoundKeyConfig.from_dict({
        'max_length': args.max_length,
        'key_mode': 'primary' if args.primary_only else 'both',
    })


def encode_command(args: argparse.Namespace) -> int:
    """Execute the encode command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    matcher = NameMatcher(build_config(args))

    for word in args.words:
        keys = matcher.word_keys(word)
        marker = " (ambiguous)" if keys.is_ambiguous else ""
        print(f"{word:<24} {keys.primary:<12} {keys.secondary:<12}{marker}")

        if args.explain:
            for step in scan(word):
                emit = step.emit
                secondary = emit.primary if emit.secondary is None else emit.secondary
                print(f"    {step.pos:>3} {step.letter} {step.rule:<20} "
                      f"{emit.primary or '-':<3} {secondary or '-':<3} +{emit.advance}")

    return 0


def compare_command(args: argparse.Namespace) -> int:
    """Execute the compare command.

    Returns:
        0 if the names sound alike, 2 if they do not
    """
    matcher = NameMatcher(build_config(args))
    keys1 = matcher.keys_for(args.name1)
    keys2 = matcher.keys_for(args.name2)
    level = matcher.match_level(args.name1, args.name2)

    print(f"{args.name1}: {keys1.primary}/{keys1.secondary}")
    print(f"{args.name2}: {keys2.primary}/{keys2.secondary}")

    if level is None:
        print("No phonetic match")
        return NO_MATCH

    print(f"Match: {level}")
    return 0


def group_command(args: argparse.Namespace) -> int:
    """Execute the group command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    filepath = args.file

    if not Path(filepath).exists():
        print(f"Error: File not found: {filepath}", file=sys.stderr)
        return 1

    index = PhoneticIndex(build_config(args))
    count = index.load(filepath)
    groups = index.groups()

    print(f"\nLoaded {count:,} names, {len(groups):,} possible duplicate groups")
    print("-" * 60)
    for key, members in sorted(groups.items()):
        print(f"{key}: " + ", ".join(entry.name for entry in members))
    print("-" * 60 + "\n")

    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog='soundkey',
        description='Phonetic (Double Metaphone style) keys for names and words.',
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose output'
    )

    parser.add_argument(
        '--max-length',
        type=int,
        default=None,
        help='Cut keys to this many characters (default: no limit)'
    )

    parser.add_argument(
        '--primary-only',
        action='store_true',
        help='Match on primary keys only'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Available commands'
    )

    encode_parser = subparsers.add_parser(
        'encode',
        help='Print the phonetic keys of one or more words'
    )
    encode_parser.add_argument(
        'words',
        nargs='+',
        help='Words or names to encode'
    )
    encode_parser.add_argument(
        '-e', '--explain',
        action='store_true',
        help='Show the rule fired at each position'
    )

    compare_parser = subparsers.add_parser(
        'compare',
        help='Check whether two names sound alike'
    )
    compare_parser.add_argument('name1', help='First name')
    compare_parser.add_argument('name2', help='Second name')

    group_parser = subparsers.add_parser(
        'group',
        help='Group names in a file that may be duplicates'
    )
    group_parser.add_argument(
        'file',
        help='Text file with one name per line'
    )

    return parser


COMMANDS = {
    'encode': encode_command,
    'compare': compare_command,
    'group': group_command,
}


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # If no command specified, print help
    if not args.command:
        parser.print_help()
        return 0

    try:
        return COMMANDS[args.command](args)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == '__main__':
    sys.exit(main())
