#!/usr/bin/env python3
"""
Name: dirname
Description: print the directory name of a path
License: perl

Prints the directory component of each path. Everything starting
from the last path separator is deleted.
"""
import sys
import argparse

__version__ = "1.0.0"

def get_dirname(path):
    """
    POSIX dirname. Unlike os.path.dirname, trailing slashes do not
    count as a separator: dirname('/a/b/') is '/a'.
    """
    stripped = path.rstrip('/')
    if not stripped:
        return '/' if path else '.'
    if '/' not in stripped:
        return '.'
    head = stripped.rsplit('/', 1)[0].rstrip('/')
    return head or '/'

def main(argv=None):
    """Parses arguments and prints the directory name of each path."""
    parser = argparse.ArgumentParser(
        prog='dirname',
        description="Print the directory component of each path.",
        usage="%(prog)s [-z] string [string ...]"
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument(
        'names',
        nargs='+',
        metavar='string',
        help='The path string from which to extract the directory name.'
    )

    args = parser.parse_args(argv)

    terminator = '\0' if args.zero else '\n'
    for name in args.names:
        sys.stdout.write(get_dirname(name) + terminator)

    sys.exit(0)

if __name__ == "__main__":
    main()
