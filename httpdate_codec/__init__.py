"""
Parsing and formatting of HTTP dates (RFC2616 section 3.3.1).
"""

__version__ = "1.0.0"

from httpdate_codec.codec import (
    DateFormat,
    detect_format,
    format,
    format_asctime,
    format_rfc850,
    format_rfc1123,
    from_timestamp,
    parse_with_format,
    to_timestamp,
    try_parse,
)
