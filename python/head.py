#!/usr/bin/env python3
"""
Name: head
Description: print the first lines of a file
License: perl
"""

import sys
import os
import argparse
import itertools
import re

__version__ = "1.0.0"

EX_SUCCESS = 0
EX_FAILURE = 1

def warn(message):
    print(f"head: {message}", file=sys.stderr)

def preprocess_argv(args_list: list) -> list:
    """
    Translates the historical '-NUMBER' syntax to the standard '-n NUMBER'.
    For example, '-20' becomes ['-n', '20'].
    """
    processed_args = []
    for arg in args_list:
        # Match arguments like '-20' but not '-' or '--' or '-n'
        match = re.match(r'^-(\d+)$', arg)
        if match:
            processed_args.extend(['-n', match.group(1)])
        else:
            processed_args.append(arg)
    return processed_args

def line_count(value: str) -> int:
    """argparse type for -n: a positive number of lines."""
    try:
        count = int(value)
    except ValueError:
        count = 0
    if count <= 0:
        raise argparse.ArgumentTypeError(f"invalid number of lines: '{value}'")
    return count

def copy_head(stream, output, count):
    """Copies the first 'count' lines of a binary stream, newlines included."""
    for line in itertools.islice(stream, count):
        output.write(line)

class HeaderFlag(argparse.Action):
    """-q and -v cancel each other; whichever comes last wins."""
    def __call__(self, parser, namespace, values, option_string=None):
        namespace.headers = self.const

def main(argv=None):
    """Parses arguments and prints the first N lines of files or stdin."""
    if argv is None:
        argv = sys.argv[1:]

    parser = argparse.ArgumentParser(
        prog='head',
        description="Print the first lines of each file.",
        usage="%(prog)s [-n count] [-q | -v] [file ...]"
    )
    parser.add_argument(
        '-n', '--lines',
        dest='count',
        type=line_count,
        default=10,
        help='The number of lines to print (default: 10).'
    )
    parser.add_argument('-q', '--quiet', action=HeaderFlag, nargs=0, const=False,
                        dest='headers', help='never print headers giving file names')
    parser.add_argument('-v', '--verbose', action=HeaderFlag, nargs=0, const=True,
                        dest='headers', help='always print headers giving file names')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument(
        'files',
        nargs='*',
        help='Files to process. Reads from stdin if none are given.'
    )
    parser.set_defaults(headers=None)

    args = parser.parse_args(preprocess_argv(argv))

    # With no operands standard input is read bare, as if -q were given.
    files = args.files or ['-']
    if not args.files:
        show_headers = False
    elif args.headers is not None:
        show_headers = args.headers
    else:
        show_headers = len(files) > 1
    output = sys.stdout.buffer
    exit_status = EX_SUCCESS

    for index, filename in enumerate(files):
        display_name = 'standard input' if filename == '-' else filename
        if filename == '-':
            stream = sys.stdin.buffer
        else:
            try:
                stream = open(filename, 'rb')
            except OSError as e:
                warn(f"{filename}: {e.strerror}")
                exit_status = EX_FAILURE
                continue

        try:
            if show_headers:
                separator = b'\n' if index > 0 else b''
                output.write(separator + b'==> ' + os.fsencode(display_name) + b' <==\n')
            copy_head(stream, output, args.count)
        except BrokenPipeError:
            # A reader such as 'head | true' may stop early; that is not our error.
            exit_status = EX_FAILURE
            break
        except OSError as e:
            warn(f"{display_name}: {e.strerror or e}")
            exit_status = EX_FAILURE
        finally:
            if filename != '-':
                stream.close()

    try:
        output.flush()
    except BrokenPipeError:
        exit_status = EX_FAILURE
    sys.exit(exit_status)

if __name__ == "__main__":
    main()
