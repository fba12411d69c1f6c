import logging

from PySubRip.Helpers import IsBlank, SplitLines, Strip

BYTE_ORDER_MARK = '\ufeff'

def segment_blocks(source : str) -> list[str]:
    """
    Split SubRip source text into blocks of contiguous non-blank lines.

    Byte-order-marks are removed wherever they occur. Runs of blank lines act as a single
    separator and never produce empty blocks. Blocks are returned in source order with their
    lines joined by line feeds, stripped of surrounding whitespace as lines are merged in.
    """
    blocks : list[str] = []
    accumulated : str|None = None

    for line in SplitLines(source):
        line = line.replace(BYTE_ORDER_MARK, '')

        if accumulated is None:
            accumulated = line
        elif IsBlank(line):
            blocks.append(accumulated)
            accumulated = line
        else:
            accumulated = Strip(f"{accumulated}\n{line}")

    if accumulated is not None:
        blocks.append(accumulated)

    blocks = [ block for block in blocks if not IsBlank(block) ]

    logging.debug(f"Found {len(blocks)} subtitle blocks")
    return blocks

def join_blocks(blocks : list[str]) -> str:
    """
    Join blocks back into SubRip text, separated by blank lines
    """
    return "\n\n".join(blocks) + "\n" if blocks else ""
