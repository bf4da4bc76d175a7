"""
Parsing of a single axis spec

An axis spec describes the padding, the alignment and the gap of one axis:

```
"center"                alignment
"4px center"            padding, alignment
"4px center 4px"        padding, alignment, gap
"4px 5px center"        padding start and end, alignment
"4px 5px center 4px"    padding start and end, alignment, gap
"center 4px"            alignment, gap
"4px"                   gap
"4px 4px"               padding, gap
"4px 5px 4px"           padding start and end, gap
```

A token is a length if it contains a digit, otherwise it is a keyword.
"""
from __future__ import annotations

from dataclasses import dataclass

from flexaxis.config import default_length, g
from flexaxis.types import AxisSpec, BugError, Enum, Str2Tuple
from flexaxis.utils import digit_re, log_error, make_default, split_value


class UnparseableAxisSpec(ValueError):
    """The token types of an axis spec don't match any known pattern"""

    def __init__(self, value: str, types: str):
        super().__init__(f"Couldn't parse axis value: {value!r} ({types or 'no tokens'})")
        self.value = value
        self.types = types


class TokenType(Enum):
    LENGTH = "length"
    KEYWORD = "keyword"


class TokenPattern(Enum):
    ALIGNMENT = "keyword"
    PADDING_ALIGNMENT = "length keyword"
    PADDING_ALIGNMENT_GAP = "length keyword length"
    PADDINGS_ALIGNMENT = "length length keyword"
    PADDINGS_ALIGNMENT_GAP = "length length keyword length"
    ALIGNMENT_GAP = "keyword length"
    GAP = "length"
    PADDING_GAP = "length length"
    PADDINGS_GAP = "length length length"


@dataclass(frozen=True)
class Unrecognized:
    """The pattern of an axis spec that matches no TokenPattern"""

    value: str
    types: str


@dataclass(frozen=True)
class ParsedAxis:
    padding: Str2Tuple = (default_length, default_length)
    alignment: str | None = None
    gap: str | None = None


DEFAULT_AXIS = ParsedAxis()


def tokenize(value: str) -> list[str]:
    return split_value(value)


def get_token_type(token: str) -> TokenType:
    return TokenType.LENGTH if digit_re.search(token) else TokenType.KEYWORD


def classify(value: str) -> tuple[list[str], TokenPattern | Unrecognized]:
    """
    Tokenizes the value and finds the TokenPattern that matches the token types exactly
    """
    tokens = tokenize(value)
    types = " ".join(get_token_type(token).value for token in tokens)
    try:
        return tokens, TokenPattern(types)
    except ValueError:
        return tokens, Unrecognized(value, types)


def extract(pattern: TokenPattern, tokens: list[str]) -> ParsedAxis:
    """
    Destructures the tokens into the fields the pattern implies
    """
    match pattern, tokens:
        case TokenPattern.ALIGNMENT, [alignment]:
            return ParsedAxis(alignment=alignment)
        case TokenPattern.PADDING_ALIGNMENT, [padding, alignment]:
            return ParsedAxis((padding, padding), alignment)
        case TokenPattern.PADDING_ALIGNMENT_GAP, [padding, alignment, gap]:
            return ParsedAxis((padding, padding), alignment, gap)
        case TokenPattern.PADDINGS_ALIGNMENT, [start, end, alignment]:
            return ParsedAxis((start, end), alignment)
        case TokenPattern.PADDINGS_ALIGNMENT_GAP, [start, end, alignment, gap]:
            return ParsedAxis((start, end), alignment, gap)
        case TokenPattern.ALIGNMENT_GAP, [alignment, gap]:
            return ParsedAxis(alignment=alignment, gap=gap)
        case TokenPattern.GAP, [gap]:
            return ParsedAxis(gap=gap)
        case TokenPattern.PADDING_GAP, [padding, gap]:
            return ParsedAxis((padding, padding), gap=gap)
        case TokenPattern.PADDINGS_GAP, [start, end, gap]:
            return ParsedAxis((start, end), gap=gap)
    raise BugError(f"{pattern!r} doesn't fit the tokens {tokens}")


def parse_axis_spec(value: AxisSpec, strict: bool | None = None) -> ParsedAxis:
    """
    Parses an axis spec into a ParsedAxis.

    Anything that is not a str (None or the True sentinel) carries no shorthand data and gives the defaults.
    If the value can't be parsed the error is logged and the defaults are returned,
    unless `strict` (default: `g["strict"]`) is set, then UnparseableAxisSpec is raised.
    """
    if not isinstance(value, str):
        return DEFAULT_AXIS
    tokens, pattern = classify(value)
    match pattern:
        case Unrecognized(value=value, types=types):
            if make_default(strict, g["strict"]):
                raise UnparseableAxisSpec(value, types)
            log_error("Couldn't parse axis value:", repr(value))
            return DEFAULT_AXIS
        case _:
            return extract(pattern, tokens)
