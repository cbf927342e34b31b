from punchcard.core.time import MINUTES_PER_HOUR, DailyTotal


def as_total(minutes):
    """Convert an integer number of minutes to a DailyTotal."""
    return DailyTotal(*divmod(minutes, MINUTES_PER_HOUR))


def as_hours(total):
    """Convert a DailyTotal to a float number of hours."""
    return total.hours + total.minutes / float(MINUTES_PER_HOUR)


def format_duration(total):
    """Format a DailyTotal with minute precision."""
    return '%02d hours and %02d minutes' % (total.hours, total.minutes)


def format_hours(total):
    """Format a DailyTotal as decimal hours."""
    return '%.2f hours' % as_hours(total)
