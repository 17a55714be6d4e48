#!/usr/bin/env python

"""
CLI interface to httpdate_codec
"""

from configparser import ConfigParser
from argparse import ArgumentParser
import logging
import sys
from typing import Callable, List

from httpdate_codec import __version__, codec
from httpdate_codec.lint import parse_date
from httpdate_codec.note import NoteList

OUTPUT_FORMATS = [date_format.value for date_format in codec.DateFormat] + ["all"]

DEFAULT_CONFIG = {
    "two_digit_year_max": str(codec.TWO_DIGIT_YEAR_MAX),
    "output_format": codec.DateFormat.RFC1123.value,
}

log = logging.getLogger(__name__)


def main(argv: List[str] = None, out: Callable[[str], None] = None) -> int:
    out = out or output
    parser = ArgumentParser(description="Check and convert HTTP dates")
    parser.add_argument("dates", nargs="+", metavar="date", help="HTTP date to check")
    parser.add_argument(
        "-c",
        "--config",
        action="store",
        dest="config_file",
        help="configuration file",
    )
    parser.add_argument(
        "-o",
        "--output-format",
        action="store",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="output format",
    )
    parser.add_argument(
        "-f",
        "--field-name",
        action="store",
        dest="field_name",
        default="Date",
        help="header field the dates came from",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        dest="debug",
        help="log debugging information to STDERR",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config_parser = ConfigParser()
    config_parser.read_dict({"httpdate": DEFAULT_CONFIG})
    if args.config_file:
        if not config_parser.read(args.config_file):
            parser.error(f"Can't read configuration file {args.config_file}")
        log.debug("Read configuration from %s", args.config_file)
    config = config_parser["httpdate"]

    try:
        two_digit_year_max = config.getint("two_digit_year_max")
    except ValueError:
        parser.error("two_digit_year_max must be an integer")
    output_format = args.output_format or config["output_format"]
    if output_format not in OUTPUT_FORMATS:
        parser.error(f"Unknown output_format {output_format}")

    status = 0
    for value in args.dates:
        if not check_date(value, args.field_name, two_digit_year_max, output_format, out):
            status = 1
    return status


def check_date(
    value: str,
    field_name: str,
    two_digit_year_max: int,
    output_format: str,
    out: Callable[[str], None],
) -> bool:
    "Write what we know about a single date. Returns False if it didn't parse."
    notes = NoteList(f"header-{field_name.lower()}")
    out(f"{value}\n")
    try:
        seconds = parse_date(value, notes, field_name, two_digit_year_max)
    except ValueError:
        parsed_ok = False
    else:
        parsed_ok = True
        timestamp = codec.from_timestamp(seconds)
        if output_format == "all":
            formats = list(codec.DateFormat)
        else:
            formats = [codec.DateFormat(output_format)]
        for date_format in formats:
            out(f"  {date_format.value}: {codec.FORMATTERS[date_format](timestamp)}\n")
    for note in notes:
        out(f"  * [{note.level.value}] {note.show_plain_summary()}\n")
    return parsed_ok


def output(out: str) -> None:
    sys.stdout.write(out)


if __name__ == "__main__":
    sys.exit(main())
