import os

import regex

_BLANK_PATTERN = regex.compile(r"\p{White_Space}*")
_TRIM_PATTERN = regex.compile(r"\A\p{White_Space}+|\p{White_Space}+\Z")

def GetInputPath(filepath : str|os.PathLike|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    Args:
        filepath: Input file path

    Returns:
        str: Normalized path preserving original extension
        None: If filepath is None
    """
    if not filepath:
        return None
    return os.path.normpath(os.fspath(filepath))

def SplitLines(text : str) -> list[str]:
    """
    Split text into lines on line feeds, dropping a carriage return at the end of each line.

    A line break at the very end of the text does not start another line.
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()

    return [ line[:-1] if line.endswith('\r') else line for line in lines ]

def IsBlank(text : str) -> bool:
    """
    True if the text is empty or contains only Unicode White_Space characters
    """
    return _BLANK_PATTERN.fullmatch(text) is not None

def Strip(text : str) -> str:
    """
    Remove leading and trailing Unicode White_Space characters.

    Unlike str.strip, information separator controls (U+001C to U+001F) are kept.
    """
    return _TRIM_PATTERN.sub("", text)
