"""
Checking HTTP date header values, with notes about what's wrong with them.
"""

from httpdate_codec import codec
from httpdate_codec.note import BAD_DATE_SYNTAX, DATE_OBSOLETE, DATE_TWO_DIGIT_YEAR
from httpdate_codec.type import AddNoteMethodType


def parse_date(
    value: str,
    add_note: AddNoteMethodType,
    field_name: str = "Date",
    two_digit_year_max: int = codec.TWO_DIGIT_YEAR_MAX,
) -> int:
    """Parse a HTTP date into seconds since the epoch. Raises ValueError if it's bad."""
    result = codec.parse_with_format(value, two_digit_year_max)
    if result is None:
        add_note(BAD_DATE_SYNTAX, field_name=field_name)
        raise ValueError(f"{field_name} isn't a HTTP date: {value!r}")
    date_format, parsed = result
    if date_format is not codec.DateFormat.RFC1123:
        add_note(
            DATE_OBSOLETE,
            field_name=field_name,
            date_format=date_format.value,
            preferred=codec.format_rfc1123(parsed),
        )
    if date_format is codec.DateFormat.RFC850:
        add_note(
            DATE_TWO_DIGIT_YEAR,
            field_name=field_name,
            year=parsed.year,
            two_digit_year_max=two_digit_year_max,
        )
    return codec.to_timestamp(parsed)
