"""
PySubRip - SubRip (.srt) Subtitle Parser

Parses SubRip subtitle files into an ordered sequence of subtitles,
each with a sequence number, start and end times and display text.

Basic Usage
-----------

# Parse a file
subs = parse_file("movie.srt")

for subtitle in subs.subtitles:
    print(subtitle.sequence_number, subtitle.start, subtitle.end, subtitle.text)

# Parse text that is already in memory
subs = parse_text("1\\n00:00:01,000 --> 00:00:02,500\\nHello world\\n")

Any malformed block aborts the parse with a SubtitleParseError describing the problem.
"""
from __future__ import annotations

import os

from PySubRip.BlockSegmenter import segment_blocks
from PySubRip.Grammar import parse_sequence_number, parse_sub_duration, parse_timecode
from PySubRip.SubRipFile import SubRipFile
from PySubRip.SubRipFileHandler import SubRipFileHandler
from PySubRip.Subtitle import Subtitle
from PySubRip.SubtitleAssembler import assemble_subtitle
from PySubRip.SubtitleError import (
    DurationError,
    GrammarMismatchError,
    MalformedBlockError,
    NumericRangeError,
    SequenceNumberError,
    SubtitleError,
    SubtitleIOError,
    SubtitleParseError,
    TimeConstructionError,
)
from PySubRip.version import __version__


def parse_file(path : str|os.PathLike) -> SubRipFile:
    """
    Read a SubRip file and parse it.

    Parameters
    ----------
    path : str or PathLike
        Path to the subtitle file.

    Returns
    -------
    SubRipFile
        The parsed subtitles, with the path and source text they came from.

    Raises
    ------
    SubtitleIOError
        If the file cannot be read as text.
    SubtitleParseError
        If any subtitle block cannot be parsed.
    """
    return SubRipFileHandler().load_file(path)

def parse_text(text : str, path : str|os.PathLike|None = None) -> SubRipFile:
    """
    Parse SubRip content that has already been loaded.

    Parameters
    ----------
    text : str
        The SubRip source text.
    path : str or PathLike, optional
        Where the text came from, recorded on the result but never read.

    Returns
    -------
    SubRipFile
        The parsed subtitles.

    Examples
    --------

    subs = parse_text("1\\n00:00:01,000 --> 00:00:02,500\\nHello world\\n")
    assert subs.subtitles[0].text == "Hello world"
    """
    return SubRipFileHandler().parse_string(text, path)


__all__ = [
    '__version__',
    'SubRipFile',
    'SubRipFileHandler',
    'Subtitle',
    'SubtitleError',
    'SubtitleIOError',
    'SubtitleParseError',
    'GrammarMismatchError',
    'NumericRangeError',
    'TimeConstructionError',
    'MalformedBlockError',
    'SequenceNumberError',
    'DurationError',
    'assemble_subtitle',
    'parse_file',
    'parse_text',
    'parse_sequence_number',
    'parse_sub_duration',
    'parse_timecode',
    'segment_blocks',
]
