from io import StringIO

from punchcard.core.parser import InputCursor


def make_cursor(text=''):
    return InputCursor(StringIO(text))
