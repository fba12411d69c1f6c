"""
Grammar for the lines of a SubRip subtitle block that carry structured values.

Rules are composed from small regex fragments and always match the whole line:

    number          = [0-9]+
    whitespace      = [ \\t\\r\\n]*
    sequence_number = number whitespace
    time            = number ":" number ":" number "," number
    sub_duration    = time whitespace "-->" whitespace time
"""
from __future__ import annotations

from datetime import time

import regex

from PySubRip.Helpers.Time import GetTime
from PySubRip.SubtitleError import GrammarMismatchError, NumericRangeError, TimeConstructionError

U32_MAX = 0xFFFFFFFF
U16_MAX = 0xFFFF
U8_MAX = 0xFF

_NUMBER = r'[0-9]+'
_WHITESPACE = r'[ \t\r\n]*'

# (component name, bound) for each group of a time rule
_TIME_COMPONENTS : list[tuple[str, int]] = [
    ('hour', U8_MAX),
    ('minute', U8_MAX),
    ('second', U8_MAX),
    ('millisecond', U16_MAX),
]

def _number(name : str) -> str:
    return f'(?P<{name}>{_NUMBER})'

def _time(prefix : str) -> str:
    hours, minutes, seconds, milliseconds = [ f"{prefix}_{component}" for component, _ in _TIME_COMPONENTS ]
    return f'{_number(hours)}:{_number(minutes)}:{_number(seconds)},{_number(milliseconds)}'

_SEQUENCE_NUMBER_PATTERN = regex.compile(_number('number') + _WHITESPACE)
_TIMECODE_PATTERN = regex.compile(_time('start'))
_SUB_DURATION_PATTERN = regex.compile(_time('start') + _WHITESPACE + '-->' + _WHITESPACE + _time('end'))

def narrow(digits : str, bound : int, component : str, side : str|None = None) -> int:
    """
    Convert a run of decimal digits to an integer in 0..bound, raising NumericRangeError if it does not fit
    """
    significant = digits.lstrip('0')
    if len(significant) > len(str(bound)):
        # too long to be in range, and possibly too long to convert
        raise NumericRangeError(component, digits, bound, side)

    value = int(significant or '0')
    if value > bound:
        raise NumericRangeError(component, value, bound, side)
    return value

def parse_sequence_number(line : str) -> int:
    """
    Parse a subtitle sequence number: decimal digits, optionally followed by whitespace.

    Raises GrammarMismatchError if the line is not a number,
    NumericRangeError if the number does not fit in 32 bits.
    """
    match = _SEQUENCE_NUMBER_PATTERN.fullmatch(line)
    if not match:
        raise GrammarMismatchError(line, 'sequence_number')

    return narrow(match.group('number'), U32_MAX, 'sequence number')

def parse_timecode(text : str, side : str = 'start') -> time:
    """
    Parse a single HH:MM:SS,mmm timecode
    """
    match = _TIMECODE_PATTERN.fullmatch(text)
    if not match:
        raise GrammarMismatchError(text, 'time')

    return _build_time(match, 'start', side)

def parse_sub_duration(line : str) -> tuple[time, time]:
    """
    Parse a timecode range in the format HH:MM:SS,mmm --> HH:MM:SS,mmm.

    Hours, minutes and seconds are narrowed to 8 bits and milliseconds to 16 bits
    before the start and end times are constructed, start first.

    Raises GrammarMismatchError if the line does not have the shape of a timecode range,
    NumericRangeError if a component is out of range and
    TimeConstructionError if the components are not a valid time of day.
    """
    match = _SUB_DURATION_PATTERN.fullmatch(line)
    if not match:
        raise GrammarMismatchError(line, 'sub_duration')

    start = _build_time(match, 'start', 'start')
    end = _build_time(match, 'end', 'end')
    return start, end

def _build_time(match : regex.Match, prefix : str, side : str) -> time:
    hours, minutes, seconds, milliseconds = [
        narrow(match.group(f"{prefix}_{component}"), bound, component, side)
        for component, bound in _TIME_COMPONENTS
    ]

    try:
        return GetTime(hours, minutes, seconds, milliseconds)
    except ValueError as e:
        raise TimeConstructionError(side, (hours, minutes, seconds, milliseconds), e) from e
