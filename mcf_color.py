#!/usr/bin/env python3
import argparse
import sys

from corefunctions.color_shell import ColorShell
from corefunctions.messages import DEFAULT_MESSAGES, load_messages


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description="Convert colors between RGB (0-255) and MCF server form (0-1)")
    parser.add_argument('--lang', choices=sorted(DEFAULT_MESSAGES), default='en',
                        help="menu language")
    parser.add_argument('--messages', metavar='PATH',
                        help="YAML file with message overrides")
    parser.add_argument('--once', action='store_true',
                        help="exit after a single conversion")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="print config status to stderr")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(sys.argv[1:] if argv is None else argv)
    messages = load_messages(args.lang, args.messages, verbose=args.verbose)

    try:
        with ColorShell(sys.stdin, sys.stdout, messages, once=args.once) as shell:
            shell.run()
    except KeyboardInterrupt:
        print()
        print(messages["farewell"])
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
