#!/usr/bin/env python3
"""
Name: cut
Description: select portions of each line of a file
License: perl

Prints selected bytes, characters or fields from each record of the
named files (or standard input) to standard output. Records are read
and written as raw bytes, so input in any encoding passes through
untouched.
"""

import sys
import os
import argparse
import re
from collections import namedtuple
from enum import Enum

__version__ = "1.0.0"

EX_SUCCESS = 0
EX_FAILURE = 1
EX_USAGE = 2
EX_INTERRUPTED = 130

CHUNK_SIZE = 65536
ENCODING = 'utf-8'

NUMBER_RE = re.compile(r'[0-9]+')
# 'N-', '-M' or 'N-M'; a lone '-' matches too and is rejected later.
SPAN_RE = re.compile(r'([0-9]*)-([0-9]*)')


class CutError(Exception):
    """Base class for everything cut reports to the user."""


class UsageError(CutError):
    """The command line cannot describe a valid selection."""


class ParseError(UsageError):
    """A byte/character/field list could not be parsed."""

    def __init__(self, message, token=None):
        super().__init__(message)
        self.token = token


class InputError(CutError):
    """One input source could not be opened or read."""

    def __init__(self, filename, strerror):
        super().__init__(f"{filename}: {strerror}")
        self.filename = filename
        self.strerror = strerror


class OutputError(CutError):
    """Writing to the output sink failed; nothing more can be done."""


class SelectionMode(Enum):
    BYTES = 'b'
    CHARACTERS = 'c'
    FIELDS = 'f'


class CharacterModel(Enum):
    """How -c counts characters."""
    BYTE_ORIENTED = 'bytes'
    CODEPOINT_ORIENTED = 'codepoints'


class Range(namedtuple('Range', ['start', 'end'])):
    """
    An inclusive span of 1-based positions. 'end' is None when the
    range runs to the end of the record.
    """
    __slots__ = ()

    def covers(self, position: int) -> bool:
        return self.start <= position and (self.end is None or position <= self.end)


OutputPolicy = namedtuple('OutputPolicy', ['line_terminator', 'suppress_undelimited'])

DEFAULT_POLICY = OutputPolicy(line_terminator=b'\n', suppress_undelimited=False)


def warn(message):
    print(f"cut: {message}", file=sys.stderr)


# --- Range lists ---

def parse_token(token: str) -> Range:
    """Turns one comma-separated list element into a Range."""
    if NUMBER_RE.fullmatch(token):
        position = int(token)
        if position == 0:
            raise ParseError(f"byte/character positions and fields are numbered from 1: '{token}'", token)
        return Range(position, position)

    match = SPAN_RE.fullmatch(token)
    if not match:
        raise ParseError(f"invalid byte, character or field list '{token}'", token)

    start_str, end_str = match.groups()
    if not start_str and not end_str:
        raise ParseError("invalid range with no endpoint: -", token)

    start = int(start_str) if start_str else 1
    end = int(end_str) if end_str else None

    if start == 0 or end == 0:
        raise ParseError(f"byte/character positions and fields are numbered from 1: '{token}'", token)
    if end is not None and start > end:
        raise ParseError(f"invalid decreasing range '{token}'", token)

    return Range(start, end)


def parse_list(list_str: str) -> tuple:
    """
    Parses a cut-style list such as "1,5-7,10-" into a tuple of Range
    objects, in the order they were written.

    Overlapping and repeated ranges are kept as given; selection is a
    union test so they do no harm. Empty elements (e.g. a trailing comma)
    are skipped, but a list with no elements at all is an error.
    """
    ranges = tuple(parse_token(part) for part in list_str.split(',') if part)
    if not ranges:
        raise ParseError("you must specify a list of bytes, characters, or fields", list_str)
    return ranges


def is_selected(ranges, position: int) -> bool:
    """True if the 1-based position falls inside any of the ranges."""
    for r in ranges:
        if r.covers(position):
            return True
    return False


# --- Records and units ---

def read_records(stream, terminator=b'\n'):
    """
    Yields the records of a binary stream with their terminators removed.

    A final record that lacks a terminator is still yielded. read1() is
    preferred so that records arriving through a pipe are handed on as
    soon as they are complete.

    Each chunk is searched once; the pieces of a record that spans
    several chunks are only joined when its terminator turns up.
    """
    read = getattr(stream, 'read1', stream.read)
    pieces = []
    while True:
        chunk = read(CHUNK_SIZE)
        if not chunk:
            break
        start = 0
        end = chunk.find(terminator)
        while end != -1:
            pieces.append(chunk[start:end])
            yield b''.join(pieces)
            pieces = []
            start = end + len(terminator)
            end = chunk.find(terminator, start)
        if start < len(chunk):
            pieces.append(chunk[start:])
    if pieces:
        yield b''.join(pieces)


def split_units(record: bytes, mode, delimiter=b'\t',
                character_model=CharacterModel.BYTE_ORIENTED):
    """
    Breaks a record into (position, unit) pairs numbered from 1.

    Fields are split on every delimiter, so adjacent delimiters produce
    empty fields. A record with no delimiter comes back as one field;
    whether to print it at all is the caller's decision.
    """
    if mode is SelectionMode.FIELDS:
        return enumerate(record.split(delimiter), 1)

    if mode is SelectionMode.CHARACTERS and character_model is CharacterModel.CODEPOINT_ORIENTED:
        text = record.decode(ENCODING, 'surrogateescape')
        return ((i, char.encode(ENCODING, 'surrogateescape'))
                for i, char in enumerate(text, 1))

    # Bytes, and characters counted the traditional way.
    return ((i, record[i - 1:i]) for i in range(1, len(record) + 1))


def cut_record(record: bytes, ranges, mode, delimiter=b'\t', policy=DEFAULT_POLICY,
               character_model=CharacterModel.BYTE_ORIENTED):
    """
    Returns the output for one record, terminator included, or None when
    the record is suppressed.
    """
    if mode is SelectionMode.FIELDS and delimiter not in record:
        if policy.suppress_undelimited:
            return None
        return record + policy.line_terminator

    kept = [unit for position, unit in split_units(record, mode, delimiter, character_model)
            if is_selected(ranges, position)]

    joiner = delimiter if mode is SelectionMode.FIELDS else b''
    # A delimited line with no selected fields still produces an empty line.
    return joiner.join(kept) + policy.line_terminator


def write_output(output, data):
    try:
        output.write(data)
    except OSError as e:
        raise OutputError(e.strerror or str(e)) from e


def cut_stream(stream, output, ranges, mode, delimiter=b'\t', policy=DEFAULT_POLICY,
               character_model=CharacterModel.BYTE_ORIENTED):
    """Cuts every record of one open binary stream onto output."""
    for record in read_records(stream, policy.line_terminator):
        result = cut_record(record, ranges, mode, delimiter, policy, character_model)
        if result is not None:
            write_output(output, result)


def open_source(name):
    """Opens a named input for binary reading; '-' is standard input."""
    if name == '-':
        return sys.stdin.buffer
    try:
        return open(name, 'rb')
    except OSError as e:
        raise InputError(name, e.strerror) from e


def process(sources, ranges, mode, delimiter=b'\t', policy=DEFAULT_POLICY,
            character_model=CharacterModel.BYTE_ORIENTED, output=None) -> int:
    """
    Runs the selection over each source in turn and returns an exit status.

    A source that cannot be opened or read is reported and skipped, and
    the rest are still processed; the status is EX_FAILURE if that happened
    to any of them. An OutputError is not caught here: once the sink is
    gone there is no point in reading further.
    """
    if output is None:
        output = sys.stdout.buffer

    exit_status = EX_SUCCESS
    for name in sources or ('-',):
        try:
            stream = open_source(name)
        except InputError as e:
            warn(e)
            exit_status = EX_FAILURE
            continue

        try:
            cut_stream(stream, output, ranges, mode, delimiter, policy, character_model)
        except OSError as e:
            # Only reads can get here; write failures are OutputErrors.
            warn(InputError(name, e.strerror or str(e)))
            exit_status = EX_FAILURE
        finally:
            if name != '-':
                stream.close()

    try:
        output.flush()
    except OSError as e:
        raise OutputError(e.strerror or str(e)) from e

    return exit_status


# --- Command line ---

def delimiter_arg(value: str) -> str:
    """argparse type for -d: exactly one character."""
    if len(value) != 1:
        raise argparse.ArgumentTypeError("the delimiter must be a single character")
    return value


def build_parser():
    parser = argparse.ArgumentParser(
        prog='cut',
        description="Print selected parts of lines from each FILE to standard output.",
        usage="%(prog)s -b list [-z] [file ...]\n"
              "       %(prog)s -c list [--codepoints] [-z] [file ...]\n"
              "       %(prog)s -f list [-d delim] [-s] [-z] [file ...]",
        epilog="LIST is one or more comma-separated ranges: N, N-, N-M or -M, "
               "counted from 1."
    )
    # The main modes are mutually exclusive.
    mode_group = parser.add_mutually_exclusive_group(required=True)
    mode_group.add_argument('-b', '--bytes', dest='byte_list', metavar='LIST',
                            help='select only these bytes')
    mode_group.add_argument('-c', '--characters', dest='char_list', metavar='LIST',
                            help='select only these characters')
    mode_group.add_argument('-f', '--fields', dest='field_list', metavar='LIST',
                            help='select only these fields')

    # Options that only matter in field mode.
    parser.add_argument('-d', '--delimiter', type=delimiter_arg, default='\t', metavar='DELIM',
                        help='use DELIM instead of TAB for field delimiter')
    parser.add_argument('-s', '--only-delimited', action='store_true',
                        help='do not print lines not containing delimiters')

    parser.add_argument('-z', '--zero-terminated', action='store_true',
                        help='line delimiter is NUL, not newline')
    parser.add_argument('--codepoints', action='store_true',
                        help='with -c, count UTF-8 characters rather than bytes')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    parser.add_argument('files', nargs='*', metavar='file',
                        help='Files to process. Reads from stdin if none are given.')
    return parser


def selection_mode(args):
    """Returns the chosen SelectionMode and its list string."""
    if args.byte_list is not None:
        return SelectionMode.BYTES, args.byte_list
    if args.char_list is not None:
        return SelectionMode.CHARACTERS, args.char_list
    # The parser's required group guarantees one of -b, -c and -f.
    return SelectionMode.FIELDS, args.field_list


def main(argv=None):
    """Parses arguments, builds the selection and runs it over the inputs."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Everything is validated before the first byte is read.
    try:
        mode, list_str = selection_mode(args)
        ranges = parse_list(list_str)
    except UsageError as e:
        parser.error(str(e))

    delimiter = os.fsencode(args.delimiter)
    policy = OutputPolicy(
        line_terminator=b'\0' if args.zero_terminated else b'\n',
        suppress_undelimited=args.only_delimited,
    )
    character_model = (CharacterModel.CODEPOINT_ORIENTED if args.codepoints
                       else CharacterModel.BYTE_ORIENTED)

    try:
        exit_status = process(args.files, ranges, mode, delimiter, policy, character_model)
    except OutputError as e:
        if isinstance(e.__cause__, BrokenPipeError):
            # The reader went away; keep the interpreter from complaining
            # about the unflushed stdout on the way out.
            devnull = os.open(os.devnull, os.O_WRONLY)
            os.dup2(devnull, sys.stdout.fileno())
        else:
            warn(f"write error: {e}")
        exit_status = EX_FAILURE
    except KeyboardInterrupt:
        exit_status = EX_INTERRUPTED

    sys.exit(exit_status)


if __name__ == "__main__":
    main()
