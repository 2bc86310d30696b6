"""
Waldo CLI: search a JSON document from the command line.

Usage:
    waldo data.json --name port
    waldo data.json --kind null
    waldo data.json --value '"admin"'
    cat data.json | waldo - --name id --path payload

Prints one ``path -> (kind)`` line per match. Exit status is 0 when
something matched, 1 when nothing did and 2 for usage or input errors.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from .api import Finder
from .config import FinderConfig


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="waldo",
        description="Find every slot in a JSON document matching a criterion.",
    )
    parser.add_argument(
        "file",
        help="JSON file to search, or - for standard input",
    )

    criterion = parser.add_mutually_exclusive_group(required=True)
    criterion.add_argument("--name", help="match members with this exact name")
    criterion.add_argument("--kind", help="match values of this kind (object, array, string, number, boolean, null)")
    criterion.add_argument(
        "--value",
        help="match values equal to this JSON literal; objects and arrays compare by structure, with no type coercion",
    )

    parser.add_argument(
        "--path",
        default="$",
        help="label for the document root in printed paths (default: $)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="log search progress to stderr",
    )
    return parser


def same_json(value, target) -> bool:
    """Compare decoded JSON values structurally, with no type coercion.

    ``1`` never equals ``1.0`` or ``true``, at any depth.
    """
    if type(value) is not type(target):
        return False
    if isinstance(target, dict):
        return value.keys() == target.keys() and all(same_json(value[k], target[k]) for k in target)
    if isinstance(target, list):
        return len(value) == len(target) and all(same_json(v, t) for v, t in zip(value, target))
    return bool(value == target)


def load_document(source: str):
    """Read and decode the document named on the command line."""
    if source == "-":
        return json.load(sys.stdin)
    with open(source, "r", encoding="utf-8") as fh:
        return json.load(fh)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        document = load_document(args.file)
    except OSError as e:
        print(f"waldo: cannot read {args.file}: {e}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as e:
        print(f"waldo: {args.file} is not valid JSON: {e}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as e:
        print(f"waldo: {args.file} is not valid UTF-8: {e}", file=sys.stderr)
        return 2

    finder = Finder(FinderConfig.for_json(document, root_label=args.path))

    if args.name is not None:
        matches = finder.by_name(args.name)
    elif args.kind is not None:
        matches = finder.by_kind(args.kind)
    else:
        try:
            target = json.loads(args.value)
        except json.JSONDecodeError as e:
            print(f"waldo: --value is not a JSON literal: {e}", file=sys.stderr)
            return 2
        if isinstance(target, (dict, list)):
            # Decoded containers are fresh objects, so identity can never hold
            matches = finder.custom(lambda value, key, owner: same_json(value, target))
        else:
            matches = finder.by_value(target)

    for match in matches:
        print(match.line)

    return 0 if matches else 1
