"""
Notes that can be emitted about HTTP date values.

PLEASE NOTE: the summary field is automatically HTML escaped, so it can contain arbitrary text (as
long as it's unicode).

However, the longer text field IS NOT ESCAPED, and therefore all variables to be interpolated into
it need to be escaped to be safe for use in HTML.
"""

from enum import Enum
from typing import Any, Dict, List, Type, Union

from markdown import markdown
from markupsafe import Markup, escape


class categories(Enum):
    "Note classifications."
    GENERAL = "General"
    CACHING = "Caching"


class levels(Enum):
    "Note levels."
    WARN = "warning"
    BAD = "bad"
    INFO = "info"


class Note:
    """
    A note about a HTTP date value.
    """

    category = None  # type: categories
    level = None  # type: levels
    summary = ""
    text = ""

    def __init__(self, subject: str, vrs: Dict[str, Union[str, int]] = None) -> None:
        self.subject = subject
        self.vars = vrs or {}

    def __eq__(self, other: Any) -> bool:
        return bool(
            self.__class__ == other.__class__
            and self.vars == other.vars
            and self.subject == other.subject
        )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.subject} {self.vars!r}>"

    def show_summary(self) -> Markup:
        """
        Output a textual summary of the message as a Unicode string.

        Variables are HTML-escaped as they're interpolated.
        """
        return Markup(self.summary) % self.vars

    def show_plain_summary(self) -> str:
        "The summary for plain-text output, without HTML escaping."
        return self.summary % self.vars

    def show_text(self) -> Markup:
        """
        Show the HTML text for the message as a Unicode string.

        The resulting string is already HTML-encoded.
        """
        return Markup(
            markdown(
                self.text % {k: escape(str(v)) for k, v in self.vars.items()},
                output_format="html",
            )
        )


class NoteList(List[Note]):
    """
    Collects notes; pass an instance wherever an add_note method is wanted.
    """

    def __init__(self, subject: str = "date") -> None:
        super().__init__()
        self.subject = subject

    def __call__(self, note_cls: Type[Note], **vrs: Union[str, int]) -> None:
        self.append(note_cls(self.subject, vrs))

    @property
    def note_classes(self) -> List[str]:
        return [note.__class__.__name__ for note in self]


class BAD_DATE_SYNTAX(Note):
    category = categories.GENERAL
    level = levels.BAD
    summary = "The %(field_name)s header's value isn't a valid date."
    text = """\
HTTP dates have very specific syntax, and sending an invalid date can cause a number of problems,
especially around caching. Common problems include sending "1 May" instead of "01 May" (the month
is a fixed-width field), and sending a date in a timezone other than GMT. See [the HTTP
specification](http://www.w3.org/Protocols/rfc2616/rfc2616-sec3.html#sec3.3) for more
information."""


class DATE_OBSOLETE(Note):
    category = categories.GENERAL
    level = levels.WARN
    summary = "The %(field_name)s header's value uses an obsolete format (%(date_format)s)."
    text = """\
HTTP has a number of defined date formats for historical reasons. This header is using an old
format that is now obsolete; recipients have to accept it, but senders should use the RFC 1123
format, e.g., `%(preferred)s`. See [the
specification](http://www.w3.org/Protocols/rfc2616/rfc2616-sec3.html#sec3.3.1) for more
information."""


class DATE_TWO_DIGIT_YEAR(Note):
    category = categories.CACHING
    level = levels.INFO
    summary = "The %(field_name)s header's two-digit year was read as %(year)s."
    text = """\
The RFC 850 date format only carries the last two digits of the year, so the century has to be
guessed. It is taken to be in the hundred years ending with %(two_digit_year_max)s. If the guess is
wrong, caches can consider the response fresh or stale for far longer than intended."""
