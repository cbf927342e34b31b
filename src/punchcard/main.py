"""A calculator for rounding your work hours to the quarter hour."""
import argparse
import logging
import signal
import sys

from punchcard import DEBUG, __version__
from punchcard.core.parser import (
    DELIMITER,
    END_OF_INPUT,
    LINE_END,
    EndOfInput,
    InputCursor,
    InvalidTime,
    read_time,
)
from punchcard.core.time import (
    ZERO,
    accumulate,
    duration,
    military,
    round_to_quarter_hour,
)
from punchcard.core.utils import as_total, format_duration, format_hours


log = logging.getLogger('punchcard')


BANNER = '''
Welcome to PUNCHCARD! This program is meant to help you record your work hours
as an employee. To get started, just enter your start time and end time, in the
format HH:MMcc-HH:MMcc. For example, if you worked from noon to 3pm today, you'd
enter 12:00pm-3:00pm. If you worked several shifts in one day, separate them
with commas, as in 9:00am-1:00pm, 2:00pm-5:30pm. You can quit the program by
pressing Ctrl + C, ending the input, or entering a start time and end time that
are identical (such as 1:00pm-1:00pm).
'''

PROMPT_DAY = 'prompt day'
READ_INTERVAL = 'read interval'
REPORT_DAY = 'report day'
TERMINATE = 'terminate'


class Session(object):
    """An interactive punchcard session.

    Every input line is one day: one or more comma separated start-end
    intervals.  Each interval is echoed with its duration, and once the
    line is over the day's total is printed, both exact and rounded to the
    quarter hour.

    The session is a small state machine.  Each transition takes the day's
    running total and whether the session should keep going after this day,
    and returns the next state together with the updated values.
    """

    prompt = 'Enter your times:'

    def __init__(self, stdin=None, stdout=None, banner=True):
        if stdin is None:
            stdin = sys.stdin
        if stdout is None:
            stdout = sys.stdout
        self.cursor = InputCursor(stdin)
        self.stdout = stdout
        self.banner = banner
        self.transitions = {
            PROMPT_DAY: self.prompt_day,
            READ_INTERVAL: self.read_interval,
            REPORT_DAY: self.report_day,
        }

    def say(self, text=''):
        print(text, file=self.stdout)
        self.stdout.flush()

    def run(self):
        """Run until the input ends or a stop entry is given.

        Returns the process exit status.
        """
        if self.banner:
            self.say(BANNER)
        state, total, running = PROMPT_DAY, ZERO, True
        while state != TERMINATE:
            log.debug('%s (total %s, running %s)', state, format_duration(total), running)
            state, total, running = self.transitions[state](total, running)
        log.debug('Session terminated')
        return 0

    def prompt_day(self, total, running):
        self.say(self.prompt)
        return READ_INTERVAL, ZERO, running

    def read_interval(self, total, running):
        cursor = self.cursor
        try:
            start = read_time(cursor)
        except EndOfInput:
            return self.stop(total)
        except InvalidTime as e:
            return self.reject('start', e, running)

        found = cursor.skip_until('-')
        if found == END_OF_INPUT:
            return self.stop(total)
        if found == LINE_END:
            self.say('[ERROR]\tEND TIME MISSING: expected "-" after %s.' % (start,))
            self.say('Something was wrong with your given end time!')
            return PROMPT_DAY, ZERO, running

        try:
            end = read_time(cursor)
        except EndOfInput:
            return self.stop(total)
        except InvalidTime as e:
            return self.reject('end', e, running)

        if start == end:
            log.debug('Stop entry %s-%s', start, end)
            return self.stop(total)

        minutes = duration(military(start), military(end))
        self.say()
        self.say('START:\t%s' % (start,))
        self.say('END:\t%s' % (end,))
        self.say('INTERVAL:\t%s.' % format_duration(as_total(minutes)))
        total = accumulate(total, minutes)

        found = cursor.skip_until(',')
        if found == DELIMITER:
            # a trailing comma still ends the day at the newline
            cursor.skip_blanks()
            if cursor.peek() == '\n':
                cursor.read()
                return REPORT_DAY, total, running
            if not cursor.peek():
                return REPORT_DAY, total, False
            return READ_INTERVAL, total, running
        if found == LINE_END:
            return REPORT_DAY, total, running
        return REPORT_DAY, total, False

    def report_day(self, total, running):
        rounded = round_to_quarter_hour(total)
        log.debug('Rounded %d minutes to %s', total.as_minutes(), format_duration(rounded))
        self.say('ACTUAL TIME:\t%s.' % format_duration(total))
        self.say('ROUNDED TIME:\t%s.' % format_hours(rounded))
        self.say()
        if running:
            return PROMPT_DAY, ZERO, running
        return TERMINATE, ZERO, running

    def stop(self, total):
        """Wind down, reporting the intervals already read for this day."""
        if total == ZERO:
            return TERMINATE, total, False
        return REPORT_DAY, total, False

    def reject(self, which, error, running):
        """Report a malformed time and start the day over on the next line."""
        for diagnostic in error.diagnostics:
            self.say('[ERROR]\t%s' % diagnostic.message)
        self.say('Something was wrong with your given %s time!' % which)
        if self.cursor.discard_line() == END_OF_INPUT:
            return TERMINATE, ZERO, False
        return PROMPT_DAY, ZERO, running


parser = argparse.ArgumentParser(
    prog='punchcard',
    description="Add up the hours you worked and round them to the quarter hour.",
    epilog="Enter times as HH:MMcc-HH:MMcc, e.g. 8:00am-4:30pm, one day per line.")
parser.add_argument(
    "-q", "--quiet", action="store_true",
    help="don't print the welcome banner")
parser.add_argument(
    "--debug", action="store_true",
    help="show debug logging")
parser.add_argument(
    "--version", action="version", version="%(prog)s " + __version__)


def main(argv=None):
    args = parser.parse_args(argv)

    root_logger = logging.getLogger()
    root_logger.addHandler(logging.StreamHandler())
    if DEBUG or args.debug:
        root_logger.setLevel(logging.DEBUG)
    else:
        root_logger.setLevel(logging.INFO)

    # Make ^C terminate the process
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    session = Session(banner=not args.quiet)
    sys.exit(session.run())


if __name__ == '__main__':
    main()
