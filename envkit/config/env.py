"""Environment accessor parsing constants.

Quote cut-sets, list syntax and the fixed-format failure messages shared by
the accessor functions.
"""

# Separator used by get_array when the caller passes an empty one
DEFAULT_ARRAY_SEPARATOR = ","

# must_get trims runs of either quote character from both ends
MUST_GET_QUOTE_CHARS = "\"'"
# Nested quoting from templated configs has been seen two levels deep
MUST_GET_QUOTE_PASSES = 3

# get_or and array elements only trim double quotes
DEFAULT_QUOTE_CHARS = '"'

ARRAY_BRACKET_CHARS = "[]"

# Unicode White_Space, the set trimmed around values and list elements.
# Narrower than str.strip(), which also trims \x1c-\x1f.
WHITESPACE_CHARS = (
    "\t\n\v\f\r "
    "\u0085\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

UINT32_MAX = 2**32 - 1

MISSING_ENV_MESSAGE = "missing env var - %s"
EMPTY_ARRAY_ENV_MESSAGE = "missing env var (empty array) - %s"


__all__ = [
    "DEFAULT_ARRAY_SEPARATOR",
    "MUST_GET_QUOTE_CHARS",
    "MUST_GET_QUOTE_PASSES",
    "DEFAULT_QUOTE_CHARS",
    "ARRAY_BRACKET_CHARS",
    "WHITESPACE_CHARS",
    "UINT32_MAX",
    "MISSING_ENV_MESSAGE",
    "EMPTY_ARRAY_ENV_MESSAGE",
]
