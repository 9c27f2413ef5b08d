"""
pwtier - check password strength or generate a password for a strength tier.

    pwtier --password 'Abcdefghijk1!'
    pwtier --generate strong --count 3
    pwtier --generate low --server http://127.0.0.1:5000
"""

import argparse
import random
import sys

from client import ServiceError, classify_remote, generate_remote, get_server_url
from logger import write_log
from password_generator import generate_many
from strength import InvalidLevelError, StrengthLevel, classify, parse_level, suggestions

INVALID_INPUT_MESSAGE = "Invalid input. Use --help for usage."


def build_parser():
    parser = argparse.ArgumentParser(
        prog="pwtier",
        description="Check password strength or generate a password of a given strength.",
    )
    parser.add_argument("--password", metavar="TEXT", help="Password to classify")
    parser.add_argument(
        "--generate",
        metavar="LEVEL",
        help="Generate a password: low, intermediate or strong (case-insensitive)",
    )
    parser.add_argument("-c", "--count", type=int, default=1, help="Number of passwords to generate (default: 1)")
    parser.add_argument("--seed", type=int, default=None, help="Seed the generator for reproducible output")
    parser.add_argument(
        "--server",
        metavar="URL",
        default=get_server_url(),
        help="Use a running pwtier server instead of local functions (env: PWTIER_SERVER_URL)",
    )
    return parser


def notice(message):
    print(f"[!] {message}", file=sys.stderr)


def run_classify(password, server=None):
    if server:
        data = classify_remote(server, password)
        level = StrengthLevel(data["level"])
        hints = data.get("suggestions", [])
    else:
        level = classify(password)
        hints = suggestions(password)

    print(f"Strength: {level.label}")
    if hints:
        print("Suggestions:")
        for tip in hints:
            print(f"  - {tip}")

    if not server:
        write_log("classify", level, len(password), "cli")
    return level


def run_generate(level_text, count=1, seed=None, server=None):
    try:
        level = parse_level(level_text)
    except InvalidLevelError as e:
        print(e)
        return None

    if count < 1:
        print("Error: --count must be at least 1")
        return None

    if server:
        if seed is not None:
            notice("--seed is ignored with --server")
        passwords = generate_remote(server, level.value, count)
    else:
        passwords = generate_many(level, count, random.Random(seed))

    for pwd in passwords:
        print(pwd)

    if not server:
        for pwd in passwords:
            write_log("generate", level, len(pwd), "cli")
    return passwords


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    try:
        if args.password is not None:
            if args.count != 1 or args.seed is not None:
                notice("--count and --seed only apply to --generate")
            run_classify(args.password, server=args.server)
        elif args.generate is not None:
            run_generate(args.generate, count=args.count, seed=args.seed, server=args.server)
        else:
            print(INVALID_INPUT_MESSAGE)
    except ServiceError as e:
        print(f"[!] Error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
