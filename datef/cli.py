"""Command-line driver: convert timestamps between formats.

    datef [flags]                            print the current time
    datef [flags] -                          convert lines from stdin
    datef [flags] timestamp1 timestamp2 ...  convert the arguments

Every timestamp is parsed with the input format, moved to UTC and printed
in the output format. Failures are reported on stderr and the exit status
is 1 if any input could not be converted.
"""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from typing import IO, Iterable

from datef.core.instant import Instant
from datef.errors import FormatError
from datef.formats import NAMED_FORMATS, Format, FormatKind, new_format

L = logging.getLogger(__name__)

FIXED_FORMATS = (
    (FormatKind.UNIX.value, "seconds since unix epoch"),
    (FormatKind.UNIX_MS.value, "milliseconds since unix epoch"),
)


def usage(prog: str) -> str:
    return (
        f"\n  {prog} [flags]                            or\n"
        f"  {prog} [flags] -                          or\n"
        f"  {prog} [flags] timestamp1 timestamp2 ..."
    )


def formats_help() -> str:
    """Describe the fixed formats and the named layouts, sorted by name."""
    rows = list(FIXED_FORMATS)
    rows.extend((name, NAMED_FORMATS[name].description) for name in sorted(NAMED_FORMATS))
    width = max(8, max(len(name) for name, _ in rows))

    lines = ["the formats are:", ""]
    lines.extend(f"  {name:<{width}s} {desc}" for name, desc in rows)
    lines.extend([
        "",
        "or any custom layout: write the reference time",
        "Mon Jan 2 15:04:05 MST 2006 the way the timestamps look,",
        "e.g. \"2006-01-02 15:04:05.000\" or \"02/Jan/2006:15:04:05 -0700\".",
        "",
        "One or more timestamps may be provided; the output will be printed line-by-line.",
        "If no timestamps are provided, the current time is used. If - is given as the",
        "only argument, then input timestamps are read line-by-line from standard input.",
    ])
    return "\n".join(lines)


def parse_args(*args):
    parser = ArgumentParser(
        description="Convert timestamps between formats.",
        usage=usage("%(prog)s"),
        epilog=formats_help(),
        formatter_class=RawDescriptionHelpFormatter,
    )

    parser.add_argument("-i", metavar="format", default=FormatKind.UNIX.value,
                        help="Input format (default: %(default)s).")
    parser.add_argument("-o", metavar="format", default="RFC3339",
                        help="Output format (default: %(default)s).")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log debugging information to stderr.")
    parser.add_argument("timestamps", nargs="*",
                        help="Timestamps to convert, or - to read them from stdin.")

    return parser.parse_args(*args)


def print_timestamp(s: str, iformat: Format, oformat: Format,
                    out: IO[str], err: IO[str]) -> bool:
    """Convert one timestamp, printing the result or the error. Returns success."""
    try:
        t = iformat.parse(s)
    except FormatError as e:
        print(e, file=err)
        return False
    print(oformat.render(t.to_utc()), file=out)
    return True


def read_lines(stream: IO[bytes]) -> Iterable[str]:
    """Yield lines without their terminators, skipping empty ones.

    Lines are decoded as UTF-8 one at a time; undecodable bytes survive as
    surrogate escapes so they fail conversion like any other bad input.
    """
    for line in stream:
        if line.endswith(b"\n"):
            line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
        if line == b"":
            continue
        yield line.decode("utf-8", errors="surrogateescape")


def main(args, stdin: IO[bytes] | None = None,
         stdout: IO[str] | None = None, stderr: IO[str] | None = None) -> bool:
    """Run the conversion described by args. Returns True if every input converted."""
    if stdin is None:
        stdin = sys.stdin.buffer
    if stdout is None:
        stdout = sys.stdout
    if stderr is None:
        stderr = sys.stderr

    iformat = new_format(args.i)
    oformat = new_format(args.o)
    L.debug("input format %r, output format %r", iformat, oformat)

    if not args.timestamps:
        print(oformat.render(Instant.now()), file=stdout)
        return True

    if args.timestamps == ["-"]:
        ok = True
        try:
            for s in read_lines(stdin):
                if not print_timestamp(s, iformat, oformat, stdout, stderr):
                    ok = False
        except OSError as e:
            print(e, file=stderr)
            ok = False
        return ok

    ok = True
    for s in args.timestamps:
        if not print_timestamp(s, iformat, oformat, stdout, stderr):
            ok = False
    return ok


def configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(format='{levelname:.1s}: {message:s}', level=logging.DEBUG, style='{')
    else:
        logging.basicConfig(format='{message:s}', level=logging.WARNING, style='{')


def run(argv=None) -> None:
    args = parse_args(argv)
    configure_logging(args.verbose)
    sys.exit(0 if main(args) else 1)


if __name__ == "__main__":
    run()
