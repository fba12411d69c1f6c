from __future__ import annotations

class SubtitleError(Exception):
    """
    Base class for all errors raised while loading or parsing SubRip files.

    Keeps a human-readable message and the underlying error (if any) that caused it.
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({self.error})" if self.message else str(self.error)
        return self.message or super().__str__()

class SubtitleIOError(SubtitleError):
    """
    The source text could not be obtained (missing, unreadable or undecodable file)
    """
    def __init__(self, path : str|None, error : Exception|None = None):
        super().__init__(f"Failed to read file as text: {path}", error)
        self.path : str|None = path

class SubtitleParseError(SubtitleError):
    """
    Base class for errors raised while parsing SubRip content
    """
    pass

class GrammarMismatchError(SubtitleParseError):
    """
    A line does not match the expected token shape
    """
    def __init__(self, line : str, rule : str):
        super().__init__(f"Line does not match {rule}: {line!r}")
        self.line : str = line
        self.rule : str = rule

class NumericRangeError(SubtitleParseError):
    """
    A matched number does not fit the range of the value it is narrowed to

    `value` is the parsed number, or the raw digits if they are too long to convert.
    """
    def __init__(self, component : str, value : int|str, bound : int, side : str|None = None):
        location = f"{side} {component}" if side else component
        super().__init__(f"Could not parse {location}: {value} is out of range 0-{bound}")
        self.component : str = component
        self.value : int|str = value
        self.bound : int = bound
        self.side : str|None = side

class TimeConstructionError(SubtitleParseError):
    """
    Narrowed time components do not form a valid time of day
    """
    def __init__(self, side : str, components : tuple[int, int, int, int], error : Exception|None = None):
        hours, minutes, seconds, milliseconds = components
        super().__init__(f"Could not parse {side} time {hours}:{minutes}:{seconds},{milliseconds}", error)
        self.side : str = side
        self.components : tuple[int, int, int, int] = components

class MalformedBlockError(SubtitleParseError):
    """
    A subtitle block is too short to hold a sequence number, a timecode and some text
    """
    def __init__(self, block : str, line_count : int):
        super().__init__(f"Invalid subtitle (length is {line_count}): {block!r}")
        self.block : str = block
        self.line_count : int = line_count

class SequenceNumberError(SubtitleParseError):
    """
    The first line of a block is not a valid sequence number
    """
    def __init__(self, line : str, error : SubtitleParseError):
        super().__init__(f"Could not parse a sequence number in the SRT file: {line!r}", error)
        self.line : str = line

class DurationError(SubtitleParseError):
    """
    The second line of a block is not a valid timecode range.

    `stage` tells which step failed: "grammar", "range" or "time".
    """
    STAGES : dict[type, str] = {
        GrammarMismatchError: "grammar",
        NumericRangeError: "range",
        TimeConstructionError: "time",
    }

    def __init__(self, line : str, error : SubtitleParseError):
        super().__init__(f"Could not parse a timecode in the SRT file: {line!r}", error)
        self.line : str = line
        self.stage : str = self.STAGES.get(type(error), "grammar")
