# *-* coding: utf-8 *-*
"""
    Dates
    ~~~~~
    Locale aware rendering of the caption timestamp. Only the two locales the
    caption is offered in are known, so the weekday and month names are fixed
    here instead of relying on the process wide C locale.
"""
import datetime

import pytz

ENGLISH = 'en'
PORTUGUESE = 'pt'

ENGLISH_PATTERN = 'Date and Time: %A, %d %B %Y, %H:%M:%S.'
PORTUGUESE_PATTERN = 'Data e hora: %A, %d de %B de %Y, %H:%M:%S.'

# Monday first, as datetime.weekday()
DAY_NAMES = {
    ENGLISH: (
        'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday', 'Sunday',
    ),
    PORTUGUESE: (
        'segunda-feira', 'terça-feira', 'quarta-feira', 'quinta-feira',
        'sexta-feira', 'sábado', 'domingo',
    ),
}

MONTH_NAMES = {
    ENGLISH: (
        'January', 'February', 'March', 'April', 'May', 'June', 'July',
        'August', 'September', 'October', 'November', 'December',
    ),
    PORTUGUESE: (
        'janeiro', 'fevereiro', 'março', 'abril', 'maio', 'junho', 'julho',
        'agosto', 'setembro', 'outubro', 'novembro', 'dezembro',
    ),
}


class DateFormatter:
    def format(self, when: datetime.datetime, pattern: str, locale: str) -> str:
        if locale not in DAY_NAMES:
            raise ValueError('Unknown locale: {}'.format(locale))
        pattern = pattern.replace('%A', DAY_NAMES[locale][when.weekday()])
        pattern = pattern.replace('%B', MONTH_NAMES[locale][when.month - 1])
        return when.strftime(pattern)


def clock(timezone):
    """Return a callable giving the current time in ``timezone``."""
    tz = pytz.timezone(timezone)

    def now():
        return datetime.datetime.now(tz)
    return now
