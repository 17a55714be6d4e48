#!/usr/bin/env python3

import re
import unittest

from httpdate_codec import note
from httpdate_codec.note import Note, NoteList, categories, levels


def all_notes():
    return [
        getattr(note, name)
        for name in dir(note)
        if isinstance(getattr(note, name), type)
        and issubclass(getattr(note, name), Note)
        and getattr(note, name) is not Note
    ]


class TestNoteDefinitions(unittest.TestCase):
    def test_definitions(self) -> None:
        notes = all_notes()
        self.assertEqual(3, len(notes))
        for note_cls in notes:
            note_name = note_cls.__name__
            self.assertIsInstance(note_cls.category, categories, note_name)
            self.assertIsInstance(note_cls.level, levels, note_name)
            self.assertIsInstance(note_cls.summary, str, note_name)
            self.assertNotEqual("", note_cls.summary, note_name)
            self.assertIsNone(re.search(r"\s{2,}", note_cls.summary), note_name)
            self.assertIsInstance(note_cls.text, str, note_name)


class TestNoteOutput(unittest.TestCase):
    def test_summary_escaped(self) -> None:
        bad = note.BAD_DATE_SYNTAX("header-date", {"field_name": "<b>"})
        self.assertEqual(
            "The &lt;b&gt; header's value isn't a valid date.", str(bad.show_summary())
        )
        self.assertEqual(
            "The <b> header's value isn't a valid date.", bad.show_plain_summary()
        )

    def test_text(self) -> None:
        obsolete = note.DATE_OBSOLETE(
            "header-date",
            {
                "field_name": "Date",
                "date_format": "asctime",
                "preferred": "Sun, 06 Nov 1994 08:49:37 GMT",
            },
        )
        text = obsolete.show_text()
        self.assertTrue(text.startswith("<p>"))
        self.assertIn("<code>Sun, 06 Nov 1994 08:49:37 GMT</code>", text)
        self.assertIn(
            '<a href="http://www.w3.org/Protocols/rfc2616/rfc2616-sec3.html#sec3.3.1">', text
        )

    def test_equality(self) -> None:
        self.assertEqual(
            note.BAD_DATE_SYNTAX("header-date", {"field_name": "Date"}),
            note.BAD_DATE_SYNTAX("header-date", {"field_name": "Date"}),
        )
        self.assertNotEqual(
            note.BAD_DATE_SYNTAX("header-date", {"field_name": "Date"}),
            note.BAD_DATE_SYNTAX("header-expires", {"field_name": "Date"}),
        )
        self.assertNotEqual(
            note.BAD_DATE_SYNTAX("header-date", {"field_name": "Date"}),
            note.DATE_OBSOLETE("header-date", {"field_name": "Date"}),
        )


class TestNoteList(unittest.TestCase):
    def test_collects(self) -> None:
        notes = NoteList("header-expires")
        notes(note.BAD_DATE_SYNTAX, field_name="Expires")
        self.assertEqual(1, len(notes))
        self.assertEqual("header-expires", notes[0].subject)
        self.assertEqual({"field_name": "Expires"}, notes[0].vars)
        self.assertEqual(["BAD_DATE_SYNTAX"], notes.note_classes)


if __name__ == "__main__":
    unittest.main()
