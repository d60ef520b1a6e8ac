#!/usr/bin/env python3
"""
Name: bcs-utils
Description: a program launcher for the bcs-utils tools
License: perl
"""

import sys
import argparse
import importlib

__version__ = "1.0.0"

# Each tool is a module of the same name exposing main(argv).
TOOLS = {'basename', 'cut', 'dirname', 'head', 'realpath'}

def main(argv=None):
    """Parses arguments and launches the specified tool."""
    parser = argparse.ArgumentParser(
        prog='bcs-utils',
        description="A program launcher for the bcs-utils tools.",
        usage="%(prog)s [-l | --list] [-V | --version] [-h | --help] tool [arg ...]"
    )
    parser.add_argument(
        '-V', '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '-l', '--list',
        action='store_true',
        help='list available tools'
    )
    # This collects the tool name and all subsequent arguments.
    parser.add_argument(
        'command',
        nargs=argparse.REMAINDER,
        help='The tool to run followed by its arguments.'
    )

    args = parser.parse_args(argv)

    if args.list:
        print("\n".join(sorted(TOOLS)))
        sys.exit(0)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    tool, tool_args = args.command[0], args.command[1:]

    if tool not in TOOLS:
        print(f"bcs-utils: unknown tool '{tool}'; try '--list'", file=sys.stderr)
        sys.exit(1)

    # The tool exits with its own status.
    importlib.import_module(tool).main(tool_args)

if __name__ == "__main__":
    main()
