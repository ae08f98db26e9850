import logging
import sys
import traceback

from .rational import (DivisionByZeroValueError, Rational, RationalError,
                       ZeroDenominatorError, gcd)


def handle_exception(type, value, tb):
    # Print stack trace.
    info = traceback.format_exception(type, value, tb)
    logging.error(''.join(info))

    if issubclass(type, RationalError):
        logging.error(f'Rational arithmetic aborted: {value}')

def register():
    sys.excepthook = handle_exception
