from io import StringIO

from punchcard.main import Session


class Mixins(object):

    def run_session(self, text):
        """Feed text to a quiet Session and return (exit status, output)."""
        stdout = StringIO()
        session = Session(StringIO(text), stdout, banner=False)
        status = session.run()
        return status, stdout.getvalue()
