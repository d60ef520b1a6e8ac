#!/usr/bin/env python3
"""
Name: basename
Description: print the basename of a file
License: perl

Prints the file component of a path. A second argument to
basename is interpreted as a suffix to remove from the file.
With -a (or -s), every argument is a path and the suffix, if any,
comes from -s.
"""
import sys
import argparse

__version__ = "1.0.0"

EX_SUCCESS = 0

def get_basename(path, suffix=None):
    """
    Implements the POSIX basename logic.

    1.  Trailing slashes are ignored, and a path made only of slashes
        is '/'.
    2.  Everything up to the last remaining slash is stripped.
    3.  If a suffix is provided and it matches the end of the
        resulting string, it is removed.
    """
    stripped = path.rstrip('/')
    if not stripped:
        # '' stays empty, '///' is the root directory.
        return '/' if path else ''

    base = stripped.rsplit('/', 1)[-1]

    # The suffix is never removed if it constitutes the entire string.
    if suffix and base.endswith(suffix) and len(base) > len(suffix):
        base = base[:-len(suffix)]

    return base

def main(argv=None):
    """Parses command-line arguments and runs the basename logic."""
    parser = argparse.ArgumentParser(
        prog='basename',
        description="Print the filename component of a path, with an optional suffix removed.",
        usage="%(prog)s string [suffix]\n"
              "       %(prog)s [-a] [-s suffix] [-z] string [string ...]"
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument('-a', '--multiple', action='store_true',
                        help='support multiple arguments and treat each as a NAME')
    parser.add_argument('-s', '--suffix', default=None,
                        help='remove a trailing SUFFIX; implies -a')
    parser.add_argument('-z', '--zero', action='store_true',
                        help='end each output line with NUL, not newline')
    parser.add_argument(
        'names',
        nargs='+',
        metavar='string',
        help='The path string (e.g., /usr/bin/local), optionally followed by a suffix.'
    )

    args = parser.parse_args(argv)
    multiple = args.multiple or args.suffix is not None

    if multiple:
        names, suffix = args.names, args.suffix
    else:
        if len(args.names) > 2:
            parser.error(f"extra operand '{args.names[2]}'")
        names = args.names[:1]
        suffix = args.names[1] if len(args.names) == 2 else None

    terminator = '\0' if args.zero else '\n'
    for name in names:
        sys.stdout.write(get_basename(name, suffix) + terminator)

    sys.exit(EX_SUCCESS)

if __name__ == "__main__":
    main()
