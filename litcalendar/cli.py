# =============================================================================
# Command line
#
# To execute in terminal:
#   python -m litcalendar --date 2026-03-15
#   python -m litcalendar --year 2026 -o
#
# The first form prints the liturgical designation of a day, the countdown to
# the next major feast and how far through the year the day is. The second
# writes the whole year to `2026-liturgical-calendar.csv` (or to the file named
# after `-o`).
# =============================================================================

import argparse
import logging
from datetime import date

from .countdown import next_major_feast, year_progress
from .dates import as_date
from .easter import liturgical_cycle
from .resolver import LiturgicalCalendar
from .tables import FeastTableError, load_fixed_feasts, load_movable_feasts
from .yeartable import default_outfile, write_year_table

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def build_parser():
    parser = argparse.ArgumentParser(
        description='Liturgical designation of a date in the Roman calendar.',
        prog='litcalendar',
        usage='%(prog)s [arguments]')
    when = parser.add_mutually_exclusive_group()
    when.add_argument('--date', metavar='date', type=str,
                      help='Date formatted `YYYY-MM-DD` (default: today)')
    when.add_argument('--year', metavar='year', type=int,
                      help='Write the liturgical calendar of this civil year as CSV')
    parser.add_argument('-o', '--outfile', nargs='?', type=str, const='',
                        help='Name and directory of csv file to write (with --year)')
    parser.add_argument('--fixed', metavar='path', type=str,
                        help='JSON table of fixed feasts keyed by `MM-DD`')
    parser.add_argument('--movable', metavar='path', type=str,
                        help='JSON table of feasts anchored on Easter or Advent')
    parser.add_argument('--no-default-tables', action='store_true',
                        help='Do not fall back to the bundled feast tables; '
                             'classify by season only unless --fixed/--movable are given.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log debugging output.')
    return parser


def load_calendar(args):
    """Build a `LiturgicalCalendar` from the table options in `args`."""
    if args.no_default_tables:
        fixed = load_fixed_feasts(args.fixed) if args.fixed else None
        movable = load_movable_feasts(args.movable) if args.movable else None
        return LiturgicalCalendar(fixed, movable)
    return LiturgicalCalendar.from_files(args.fixed, args.movable)


def describe_day(calendar, day):
    """Lines printed for a single day."""
    info = calendar.info(day)
    countdown = next_major_feast(day)
    return [
        day.strftime('%A, %B %d, %Y').replace(' 0', ' '),
        f'Season:     {info.season} (Year {liturgical_cycle(day)})',
        f'Day:        {info.name or "-"}',
        f'Color:      {info.color.value}',
        f'Next feast: {countdown.name} in {countdown.days_until} days',
        f'Year:       {year_progress(day)}% complete',
    ]


def main(argv=None):

    # Parse args
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.outfile is not None and args.year is None:
        parser.error('-o/--outfile only applies together with --year')

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=LOG_FORMAT)

    try:
        calendar = load_calendar(args)
    except FeastTableError as exc:
        parser.error(str(exc))

    # -------------------------------------------------------------------------
    # Whole year to CSV
    # -------------------------------------------------------------------------
    if args.year is not None:
        df = calendar.year_table(args.year)
        outfile = args.outfile or default_outfile(args.year)
        write_year_table(df, outfile)
        print(outfile)
        return 0

    # -------------------------------------------------------------------------
    # Single day
    # -------------------------------------------------------------------------
    try:
        day = as_date(args.date) if args.date else date.today()
    except ValueError:
        parser.error(f'--date must be formatted YYYY-MM-DD, got {args.date!r}')

    for line in describe_day(calendar, day):
        print(line)
    return 0
