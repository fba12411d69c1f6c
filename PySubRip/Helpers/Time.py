from datetime import time

def GetTime(hours : int, minutes : int, seconds : int, milliseconds : int) -> time:
    """
    Construct a time of day from hour, minute, second and millisecond components.

    Raises ValueError if the components do not form a valid time
    (hour 0-23, minute 0-59, second 0-59, millisecond 0-999).
    """
    if not 0 <= milliseconds <= 999:
        raise ValueError(f"millisecond must be in 0..999, not {milliseconds}")

    return time(hours, minutes, seconds, milliseconds * 1000)

def GetTimeComponents(value : time) -> tuple[int, int, int, int]:
    """
    Split a time of day into (hours, minutes, seconds, milliseconds)
    """
    return value.hour, value.minute, value.second, value.microsecond // 1000

def FormatTimecode(value : time) -> str:
    """
    Format a time as an SRT timecode (HH:MM:SS,mmm)
    """
    hours, minutes, seconds, milliseconds = GetTimeComponents(value)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{milliseconds:03d}"
