"""
Reading HH:MMcc times from a character stream.
"""

import collections
import logging
import string

from punchcard.core.time import ClockTime


log = logging.getLogger('punchcard')


# What InputCursor.skip_until() stopped at
DELIMITER = 'delimiter'
LINE_END = 'line end'
END_OF_INPUT = 'end of input'

BLANKS = ' \t\r\f\v'

HOUR_MISSING = 'HOUR MISSING'
HOUR_TOO_SMALL = 'HOUR TOO SMALL'
HOUR_TOO_BIG = 'HOUR TOO BIG'
MINUTE_MISSING = 'MINUTE MISSING'
MINUTE_TOO_SMALL = 'MINUTE TOO SMALL'
MINUTE_TOO_BIG = 'MINUTE TOO BIG'
BAD_MERIDIEM = 'UNRECOGNIZED MERIDIEM'

HINTS = {
    HOUR_MISSING: 'should be a number from 1 to 12.',
    HOUR_TOO_SMALL: 'should be greater than 0.',
    HOUR_TOO_BIG: 'should be less than 13.',
    MINUTE_MISSING: 'should be a number from 0 to 59.',
    MINUTE_TOO_SMALL: 'should be greater than -1.',
    MINUTE_TOO_BIG: 'should be less than 60.',
    BAD_MERIDIEM: 'should be "am" or "pm".',
}


class Diagnostic(collections.namedtuple('Diagnostic', 'kind value')):
    """A constraint violated by a time entry.

    ``value`` is the offending hour, minute or meridiem letter; it is None
    for the *_MISSING kinds.
    """

    __slots__ = ()

    @property
    def message(self):
        if self.value is None:
            return '%s: %s' % (self.kind, HINTS[self.kind])
        value = self.value
        if self.kind == BAD_MERIDIEM and value:
            value += 'm'
        return '%s: "%s", %s' % (self.kind, value, HINTS[self.kind])


class InvalidTime(ValueError):
    """A time entry failed validation.

    The violated constraints are listed in ``diagnostics``.
    """

    def __init__(self, diagnostics):
        super(InvalidTime, self).__init__(
            '; '.join(d.message for d in diagnostics))
        self.diagnostics = diagnostics


class EndOfInput(EOFError):
    """The input ran out before another time entry started."""


class InputCursor(object):
    """A forward-only cursor over a text stream.

    Characters are pulled one at a time with a single character of
    lookahead, so an interactive stdin is never read past the line the
    user just typed.  End of input is sticky: once the stream returns an
    empty read, it is never asked again.
    """

    def __init__(self, stream):
        self.stream = stream
        self._lookahead = None

    def peek(self):
        """Return the next character without consuming it ('' at the end)."""
        if self._lookahead is None:
            self._lookahead = self.stream.read(1)
        return self._lookahead

    def read(self):
        """Consume and return the next character ('' at the end)."""
        char = self.peek()
        if char:
            self._lookahead = None
        return char

    def skip_whitespace(self):
        while self.peek() and self.peek().isspace():
            self.read()

    def skip_blanks(self):
        """Skip whitespace, but stop at a newline."""
        while self.peek() and self.peek() in BLANKS:
            self.read()

    def read_int(self):
        """Read an optionally signed decimal integer.

        Returns None if there are no digits at the cursor.
        """
        sign = 1
        if self.peek() in ('+', '-'):
            if self.read() == '-':
                sign = -1
        digits = []
        while self.peek() and self.peek() in string.digits:
            digits.append(self.read())
        if not digits:
            return None
        return sign * int(''.join(digits))

    def read_letter(self):
        """Consume and return a letter, or None if there isn't one."""
        if self.peek().isalpha():
            return self.read()
        return None

    def skip_until(self, delimiter=None):
        """Consume characters through the next delimiter or newline.

        Returns DELIMITER, LINE_END or END_OF_INPUT depending on which one
        was found first.
        """
        while True:
            char = self.read()
            if not char:
                return END_OF_INPUT
            if char == '\n':
                return LINE_END
            if char == delimiter:
                return DELIMITER

    def discard_line(self):
        """Throw away the rest of the current line."""
        return self.skip_until()


def diagnose(hour, minute, meridiem):
    """Check the fields of a time entry.

    Returns a list of Diagnostics, empty if the time is valid.  The checks
    are independent, so a single entry can violate several of them.  A
    field of None means it could not be read; the fields after it were not
    read either and are not checked.
    """
    diagnostics = []
    if hour is None:
        diagnostics.append(Diagnostic(HOUR_MISSING, None))
        return diagnostics
    if hour <= 0:
        diagnostics.append(Diagnostic(HOUR_TOO_SMALL, hour))
    if hour >= 13:
        diagnostics.append(Diagnostic(HOUR_TOO_BIG, hour))
    if minute is None:
        diagnostics.append(Diagnostic(MINUTE_MISSING, None))
        return diagnostics
    if minute <= -1:
        diagnostics.append(Diagnostic(MINUTE_TOO_SMALL, minute))
    if minute >= 60:
        diagnostics.append(Diagnostic(MINUTE_TOO_BIG, minute))
    if meridiem not in ('a', 'p'):
        diagnostics.append(Diagnostic(BAD_MERIDIEM, meridiem or ''))
    return diagnostics


def read_time(cursor):
    """Read a time in HH:MMcc format from an InputCursor.

    Leading whitespace is skipped.  The colon is optional and may be
    surrounded by blanks.  Only the first letter of the meridiem indicator
    counts and it is case insensitive; a second letter (the 'm') is
    consumed and ignored.

    Returns a ClockTime.  Raises InvalidTime if the entry is malformed, and
    EndOfInput if the stream ends before an entry starts.  The rest of the
    line is left for the caller to deal with.
    """
    cursor.skip_whitespace()
    if not cursor.peek():
        raise EndOfInput()
    hour = cursor.read_int()
    minute = meridiem = None
    if hour is not None:
        cursor.skip_blanks()
        if cursor.peek() == ':':
            cursor.read()
            cursor.skip_blanks()
        minute = cursor.read_int()
    if minute is not None:
        cursor.skip_blanks()
        meridiem = cursor.read_letter()
    if meridiem is not None:
        meridiem = meridiem.lower()
        cursor.read_letter()
    diagnostics = diagnose(hour, minute, meridiem)
    if diagnostics:
        log.debug('Rejected time entry %r:%r%r', hour, minute, meridiem)
        raise InvalidTime(diagnostics)
    time = ClockTime(hour, minute, meridiem)
    log.debug('Read time entry %s', time)
    return time
