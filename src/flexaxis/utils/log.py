"""
Diagnostics

Everything that goes wrong but should not stop the layout from rendering is reported through `log_error`.
It logs the message and also appends it to `g["error_log"]` if that is set.
"""
import logging
from contextlib import contextmanager, redirect_stdout
from functools import cache

from flexaxis.config import g


@contextmanager
def clog_error():
    """
    yields a context to print to the error logfile
    """
    with open(g["error_log"], "a", encoding="utf-8") as file:
        with redirect_stdout(file):
            yield


def log_error(*args):
    message = " ".join(map(str, args))
    logging.error(message)
    if g["error_log"] is not None:
        with clog_error():
            print(message)


log_error_once = cache(log_error)
