import os
import tempfile
import unittest
from datetime import time, timedelta

import srt # type: ignore

from PySubRip import (
    DurationError,
    MalformedBlockError,
    SubRipFile,
    SubtitleError,
    SubtitleIOError,
    __version__,
    parse_file,
    parse_text,
)
from PySubRip.Helpers.Time import FormatTimecode, GetTime, GetTimeComponents
from PySubRip.Helpers.TestCases import LoggedTestCase, SAMPLE_SUBRIP, SAMPLE_SUBRIP_WITH_BOM

def _as_timedelta(value : time) -> timedelta:
    return timedelta(hours=value.hour, minutes=value.minute, seconds=value.second, microseconds=value.microsecond)

class TestPySubRip(LoggedTestCase):
    def test_version(self):
        self.assertLoggedTrue("version string", __version__.startswith("v"), input_value=__version__)

    def test_parse_text(self):
        subs = parse_text(SAMPLE_SUBRIP)
        self.assertLoggedIsInstance("parse_text result", subs, SubRipFile)
        self.assertLoggedEqual("subtitle count", 4, len(subs.subtitles))

    def test_parse_text_records_path(self):
        subs = parse_text(SAMPLE_SUBRIP, path="movie.srt")
        self.assertLoggedEqual("path", "movie.srt", subs.path)

    def test_parse_file(self):
        with tempfile.NamedTemporaryFile('w', delete=False, suffix='.srt', encoding='utf-8', newline='') as f:
            f.write(SAMPLE_SUBRIP_WITH_BOM)
            temp_path = f.name

        try:
            subs = parse_file(temp_path)
        finally:
            os.remove(temp_path)

        self.assertLoggedEqual("subtitle count", 4, len(subs.subtitles))
        self.assertLoggedEqual("source", SAMPLE_SUBRIP_WITH_BOM, subs.source)
        self.assertLoggedSequenceEqual("same as parsed text", parse_text(SAMPLE_SUBRIP).subtitles, subs.subtitles)

    def test_parse_file_missing(self):
        self.assertLoggedRaises("missing file", SubtitleIOError, parse_file, "no-such-file.srt")

    def test_errors_share_a_base_class(self):
        for text, expected_error in [ ("1\n00:00:01,000 --> 00:00:02,000\n", MalformedBlockError), ("1\nnot a time\nText\n", DurationError) ]:
            with self.subTest(text=text):
                error = self.assertLoggedRaises(text, expected_error, parse_text, text)
                self.assertLoggedIsInstance("base class", error, SubtitleError)
                self.assertLoggedTrue("error has a message", str(error))

    def test_matches_reference_parser(self):
        """ Well-formed input parses the same as with the srt library """
        expected = list(srt.parse(SAMPLE_SUBRIP))
        actual = parse_text(SAMPLE_SUBRIP).subtitles

        self.assertLoggedEqual("subtitle count", len(expected), len(actual))
        for reference, subtitle in zip(expected, actual):
            with self.subTest(index=reference.index):
                self.assertLoggedEqual("sequence number", reference.index, subtitle.sequence_number)
                self.assertLoggedEqual("start", reference.start, _as_timedelta(subtitle.start))
                self.assertLoggedEqual("end", reference.end, _as_timedelta(subtitle.end))
                # srt keeps the line break before a run of blank lines in the content
                self.assertLoggedEqual("text", reference.content.rstrip("\n"), subtitle.text)

    def test_subtitle_str(self):
        subtitle = parse_text(SAMPLE_SUBRIP).subtitles[1]
        expected = "#2 00:00:04,000 --> 00:00:06,250\n<i>Too long.</i>\n- Where have you been?"
        self.assertLoggedEqual("formatted subtitle", expected, str(subtitle))


class TestTimeHelpers(LoggedTestCase):
    def test_format_timecode(self):
        cases = [
            (time(0, 0, 0), "00:00:00,000"),
            (time(1, 2, 3, 4000), "01:02:03,004"),
            (time(23, 59, 59, 999000), "23:59:59,999"),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertLoggedEqual("timecode", expected, FormatTimecode(value), input_value=value)

    def test_get_time(self):
        self.assertLoggedEqual("time", time(1, 2, 3, 4000), GetTime(1, 2, 3, 4))
        self.assertLoggedEqual("components", (1, 2, 3, 4), GetTimeComponents(GetTime(1, 2, 3, 4)))

    def test_get_time_invalid(self):
        for components in [ (24, 0, 0, 0), (0, 60, 0, 0), (0, 0, 60, 0), (0, 0, 0, 1000) ]:
            with self.subTest(components=components):
                self.assertLoggedRaises(str(components), ValueError, GetTime, *components)

if __name__ == '__main__':
    unittest.main()
