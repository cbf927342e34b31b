"""Quarter-hour timecard calculator."""
import sys

__version__ = '1.1.0.dev0'
__author__ = 'Sam K'
__licence__ = 'GPL'

DEBUG = '--debug' in sys.argv
