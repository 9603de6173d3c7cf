# =============================================================================
# A whole civil year, one row per day
#
# Every day from January 1 through December 31 is classified and laid out in a
# dataframe indexed by date, which can be written to CSV for a parish
# calendar or a spreadsheet. The default file name is
# `YYYY-liturgical-calendar.csv` in the current working directory.
# =============================================================================

import logging

import pandas as pd

from .easter import liturgical_cycle
from .resolver import get_liturgical_info

logger = logging.getLogger(__name__)

WEEKDAYS = {
    0: 'Mon',
    1: 'Tues',
    2: 'Wed',
    3: 'Thurs',
    4: 'Fri',
    5: 'Sat',
    6: 'Sun'
}

COLUMNS = ['weekday', 'season', 'name', 'color', 'cycle',
           'year', 'month', 'day', 'dayofweek']


def build_year_table(year, fixed_feasts=None, movable_feasts=None, resolve=None):
    """Classify every day of civil year `year`.

    Arguments
    ---------
    `year` : int
        Civil year to lay out.
    `fixed_feasts`, `movable_feasts`
        Feast tables, as for `get_liturgical_info`.
    `resolve` : callable
        Optional replacement for `get_liturgical_info`, called with the date
        only (e.g. a cached `LiturgicalCalendar.info`).

    Returns
    -------
        A dataframe indexed by `date` with columns `weekday`, `season`,
        `name`, `color`, `cycle`, `year`, `month`, `day` and `dayofweek`.
        `name` is empty on days with nothing to name.
    """
    if resolve is None:
        def resolve(day):
            return get_liturgical_info(day, fixed_feasts, movable_feasts)

    days = pd.date_range(f'{year}-01-01', f'{year}-12-31', freq='D', name='date')
    infos = [resolve(d.date()) for d in days]

    df = pd.DataFrame({
        'season': [i.season for i in infos],
        'name': [i.name for i in infos],
        'color': [i.color.value for i in infos],
        'cycle': [liturgical_cycle(d.date()) for d in days],
    }, index=days)

    # Split the date into year, month, and day columns
    df['year'] = df.index.year
    df['month'] = df.index.month
    df['day'] = df.index.day
    df['dayofweek'] = df.index.dayofweek
    # Add day names for human readability
    df['weekday'] = df.dayofweek.map(WEEKDAYS)

    logger.info("Built liturgical calendar for %d: %d named days", year,
                int(df['name'].notna().sum()))
    # Reorder columns for convenience
    return df[COLUMNS]


def default_outfile(year):
    return f'{year}-liturgical-calendar.csv'


def write_year_table(df, outfile):
    """Write year table `df` to CSV file `outfile` and return the path."""
    df.to_csv(outfile)
    logger.info("Wrote %d rows to %s", len(df), outfile)
    return outfile
