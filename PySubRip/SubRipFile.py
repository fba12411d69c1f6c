from __future__ import annotations

import logging
import os
from collections.abc import Iterator

from PySubRip.BlockSegmenter import segment_blocks
from PySubRip.Helpers import GetInputPath
from PySubRip.Subtitle import Subtitle
from PySubRip.SubtitleAssembler import assemble_subtitle

class SubRipFile:
    """
    The subtitles parsed from a SubRip file, together with the source text they were parsed from.

    The whole source is parsed on construction. If any block cannot be parsed the first error
    is raised and no SubRipFile is created.
    """
    def __init__(self, source : str, path : str|os.PathLike|None = None) -> None:
        self._path : str|None = GetInputPath(path)
        self._source : str = source
        self._subtitles : tuple[Subtitle, ...] = tuple(assemble_subtitle(block) for block in segment_blocks(source))

        logging.debug(f"Parsed {len(self._subtitles)} subtitles from {self._path or 'source text'}")

    @property
    def path(self) -> str|None:
        """ The path the source was read from, if any """
        return self._path

    @property
    def source(self) -> str:
        """ The source text, verbatim """
        return self._source

    @property
    def subtitles(self) -> tuple[Subtitle, ...]:
        """ The subtitles in the order they appear in the source """
        return self._subtitles

    def __len__(self) -> int:
        return len(self._subtitles)

    def __iter__(self) -> Iterator[Subtitle]:
        return iter(self._subtitles)

    def __repr__(self) -> str:
        return f"SubRipFile(path={self._path!r}, subtitles={len(self._subtitles)})"
