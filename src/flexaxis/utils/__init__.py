from .colors import to_hex
from .func import filter_dvals, find, make_default
from .log import log_error, log_error_once
from .regex import digit_re, split_value, whitespace_re
