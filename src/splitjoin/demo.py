# src/splitjoin/demo.py
import argparse
import json
import sys

from dotenv import load_dotenv


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="splitjoin-demo",
        description="Split text into fields or join values, Perl style.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_split = sub.add_parser("split", help="Split TEXT and print the fields as JSON")
    p_split.add_argument("text", help="Text to split")
    group = p_split.add_mutually_exclusive_group()
    group.add_argument("--sep", help="Literal separator (one character or a substring)")
    group.add_argument("--regex", help="Regular-expression separator")
    group.add_argument("--profile", help="Named profile from profiles.json")
    p_split.add_argument(
        "--max-fields",
        type=int,
        default=None,
        dest="max_fields",
        help="Maximum number of fields (0 = unlimited)",
    )

    p_join = sub.add_parser("join", help="Join VALUES and print the result")
    p_join.add_argument("values", nargs="*", help="Values to join")
    p_join.add_argument("--sep", default=None, help="Separator between values (default: one space)")
    p_join.add_argument("--last-sep", default=None, dest="last_sep", help="Separator before the last value")
    p_join.add_argument("--profile", help="Named profile from profiles.json")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI demo: split a string into JSON fields, or join values with separators."""
    from .joiner import join
    from .profiles import get_profile
    from .splitter import split
    from .types import Pattern

    load_dotenv()
    args = _build_parser().parse_args(argv)

    try:
        if args.command == "split":
            if args.profile:
                profile = get_profile(args.profile)
                max_fields = profile.max_fields if args.max_fields is None else args.max_fields
                fields = split(args.text, profile.separator, max_fields)
            else:
                sep = Pattern(args.regex) if args.regex is not None else args.sep
                fields = split(args.text, sep, args.max_fields or 0)
            print(json.dumps(fields, ensure_ascii=False))
        else:
            if args.profile:
                profile = get_profile(args.profile)
                sep = profile.joiner if args.sep is None else args.sep
                last_sep = profile.last_joiner if args.last_sep is None else args.last_sep
                print(join(args.values, sep, last_sep))
            elif args.sep is None:
                print(join(args.values, last_sep=args.last_sep))
            else:
                print(join(args.values, args.sep, args.last_sep))
    except Exception as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
