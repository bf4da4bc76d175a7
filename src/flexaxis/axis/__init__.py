from .Parser import (DEFAULT_AXIS, ParsedAxis, TokenPattern, TokenType,
                     Unrecognized, UnparseableAxisSpec, parse_axis_spec)
from .Resolver import BoxLayoutDescriptor, primary_axis, resolve, resolve_props
