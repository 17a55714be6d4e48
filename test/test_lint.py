#!/usr/bin/env python3

import unittest

from httpdate_codec.lint import parse_date
from httpdate_codec.note import (
    BAD_DATE_SYNTAX,
    DATE_OBSOLETE,
    DATE_TWO_DIGIT_YEAR,
    NoteList,
)


class TestParseDate(unittest.TestCase):
    def setUp(self) -> None:
        self.notes = NoteList("header-date")

    def test_basic(self) -> None:
        self.assertEqual(1309770486, parse_date("Mon, 04 Jul 2011 09:08:06 GMT", self.notes))
        self.assertEqual([], self.notes.note_classes)

    def test_bad(self) -> None:
        for value in ["0", "", "Mon, 04 Jul 2011 09:08:06 PST"]:
            notes = NoteList("header-date")
            with self.assertRaises(ValueError):
                parse_date(value, notes)
            self.assertEqual(["BAD_DATE_SYNTAX"], notes.note_classes, value)
            self.assertEqual(BAD_DATE_SYNTAX("header-date", {"field_name": "Date"}), notes[0])

    def test_field_name(self) -> None:
        with self.assertRaises(ValueError):
            parse_date("tomorrow", self.notes, "Expires")
        self.assertEqual({"field_name": "Expires"}, self.notes[0].vars)

    def test_rfc850(self) -> None:
        self.assertEqual(784111777, parse_date("Sunday, 06-Nov-94 08:49:37 GMT", self.notes))
        self.assertEqual(["DATE_OBSOLETE", "DATE_TWO_DIGIT_YEAR"], self.notes.note_classes)
        self.assertEqual(
            DATE_OBSOLETE(
                "header-date",
                {
                    "field_name": "Date",
                    "date_format": "rfc850",
                    "preferred": "Sun, 06 Nov 1994 08:49:37 GMT",
                },
            ),
            self.notes[0],
        )
        self.assertEqual(
            DATE_TWO_DIGIT_YEAR(
                "header-date",
                {"field_name": "Date", "year": 1994, "two_digit_year_max": 2049},
            ),
            self.notes[1],
        )

    def test_rfc850_window(self) -> None:
        self.assertEqual(
            -1235574623,
            parse_date("Thursday, 06-Nov-30 08:49:37 GMT", self.notes, two_digit_year_max=2029),
        )
        self.assertEqual(1930, self.notes[1].vars["year"])

    def test_asctime(self) -> None:
        self.assertEqual(784111777, parse_date("Sun Nov  6 08:49:37 1994", self.notes))
        self.assertEqual(["DATE_OBSOLETE"], self.notes.note_classes)
        self.assertEqual("asctime", self.notes[0].vars["date_format"])


if __name__ == "__main__":
    unittest.main()
