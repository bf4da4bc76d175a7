######################### Regexes ##################################

import re

whitespace_re = re.compile(r"\s+")
digit_re = re.compile(r"[0-9]")  # ascii only


def split_value(s: str) -> list[str]:
    """
    Splits a value at its whitespace. Leading or trailing whitespace creates no empty strings.
    """
    return [x for x in whitespace_re.split(s) if x]


##########################################################################
