from PySubRip.Grammar import parse_sequence_number, parse_sub_duration
from PySubRip.Helpers import SplitLines, Strip
from PySubRip.Subtitle import Subtitle
from PySubRip.SubtitleError import (
    DurationError,
    GrammarMismatchError,
    MalformedBlockError,
    NumericRangeError,
    SequenceNumberError,
    TimeConstructionError,
)

def assemble_subtitle(block : str) -> Subtitle:
    """
    Build a Subtitle from a block: a sequence number line, a timecode range line and one or more lines of text.

    Raises MalformedBlockError if the block has fewer than three lines,
    SequenceNumberError or DurationError if the first or second line cannot be parsed.
    """
    lines = SplitLines(block)
    if len(lines) < 3:
        raise MalformedBlockError(block, len(lines))

    try:
        sequence_number = parse_sequence_number(Strip(lines[0]))
    except (GrammarMismatchError, NumericRangeError) as e:
        raise SequenceNumberError(lines[0], e) from e

    try:
        start, end = parse_sub_duration(Strip(lines[1]))
    except (GrammarMismatchError, NumericRangeError, TimeConstructionError) as e:
        raise DurationError(lines[1], e) from e

    text = "\n".join(lines[2:])

    return Subtitle(sequence_number, start, end, text)
