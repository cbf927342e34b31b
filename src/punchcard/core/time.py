import collections


MINUTES_PER_HOUR = 60
MINUTES_PER_DAY = 24 * MINUTES_PER_HOUR
QUARTER_HOUR = 15


class ClockTime(collections.namedtuple('ClockTime', 'hour minute meridiem')):
    """A 12-hour wall clock time.

    ``hour`` is 1..12, ``minute`` is 0..59 and ``meridiem`` is the first
    letter of the meridiem indicator, lowercased ('a' or 'p').
    """

    __slots__ = ()

    def __str__(self):
        return '%02d:%02d%sm' % (self.hour, self.minute, self.meridiem)


class DailyTotal(collections.namedtuple('DailyTotal', 'hours minutes')):
    """Time worked during a day, in whole hours and leftover minutes."""

    __slots__ = ()

    def as_minutes(self):
        return self.hours * MINUTES_PER_HOUR + self.minutes


ZERO = DailyTotal(0, 0)


def military(time):
    """Convert a ClockTime to the number of minutes since midnight.

    12 am is midnight (0) and 12 pm is noon (720); every other pm hour is
    shifted by twelve hours.
    """
    hour = time.hour
    if hour == 12:
        if time.meridiem == 'a':
            hour = 0
    elif time.meridiem == 'p':
        hour += 12
    return hour * MINUTES_PER_HOUR + time.minute


def duration(start, end):
    """Return the minutes elapsed going forward from start to end.

    Both arguments are minutes since midnight.  An end earlier than the
    start means the interval wraps past midnight, so the result is always
    in 0..1439.
    """
    return ((end - start) % MINUTES_PER_DAY + MINUTES_PER_DAY) % MINUTES_PER_DAY


def accumulate(total, delta_minutes):
    """Add delta_minutes to a DailyTotal, carrying whole hours."""
    hours, minutes = divmod(total.minutes + delta_minutes, MINUTES_PER_HOUR)
    return DailyTotal(total.hours + hours, minutes)


def round_to_quarter_hour(total):
    """Round a DailyTotal to the nearest quarter hour.

    The cutoff is fixed by policy: 7 minutes past a quarter rounds down,
    8 minutes rounds up.  Rounding up to a full hour carries into hours.
    """
    minutes = (total.minutes + 7) // QUARTER_HOUR * QUARTER_HOUR
    if minutes == MINUTES_PER_HOUR:
        return DailyTotal(total.hours + 1, 0)
    return DailyTotal(total.hours, minutes)
