#!/usr/bin/env python3
"""
Name: realpath
Description: print the resolved absolute file name
License: perl

Resolves each path to its canonical absolute form, following every
symbolic link. By default, and with -e, every component of the path
must exist. With -m nothing has to exist: a path that cannot be
resolved is printed as given if it is absolute, or joined onto the
current directory if it is relative.
"""

import os
import sys
import argparse

__version__ = "1.0.0"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

def resolve(path, may_not_exist=False):
    """
    Returns the canonical form of path. Raises OSError if a component
    is missing, unless may_not_exist is set.
    """
    try:
        return os.path.realpath(path, strict=True)
    except OSError:
        if not may_not_exist:
            raise
    if os.path.isabs(path):
        return path
    return os.path.join(os.getcwd(), path)

def main(argv=None):
    """Parses arguments and prints the resolved name of each path."""
    parser = argparse.ArgumentParser(
        prog='realpath',
        description="Print the resolved absolute file name.",
        usage="%(prog)s [-e|-m] [-q] [-z] file [file ...]"
    )
    # -e and -m pull in opposite directions; the last one given wins.
    parser.add_argument('-e', '--canonicalize-existing', dest='may_not_exist',
                        action='store_false',
                        help='all components of the path must exist (default)')
    parser.add_argument('-m', '--canonicalize-missing', dest='may_not_exist',
                        action='store_true',
                        help='no path components need exist')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='suppress most error messages')
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('files', nargs='+', metavar='file',
                        help='The paths to resolve.')
    parser.set_defaults(may_not_exist=False)

    args = parser.parse_args(argv)

    terminator = '\0' if args.zero else '\n'
    exit_status = EXIT_SUCCESS

    for path in args.files:
        try:
            resolved = resolve(path, args.may_not_exist)
        except OSError as e:
            if not args.quiet:
                print(f"realpath: {path}: {e.strerror}", file=sys.stderr)
            exit_status = EXIT_FAILURE
            continue
        sys.stdout.write(resolved + terminator)

    sys.exit(exit_status)

if __name__ == "__main__":
    main()
