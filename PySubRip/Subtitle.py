from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from PySubRip.Helpers.Time import FormatTimecode

@dataclass(frozen=True)
class Subtitle:
    """
    A single subtitle parsed from a SubRip block
    """
    sequence_number : int
    start : time
    end : time
    text : str

    @property
    def srt_duration(self) -> str:
        """ The display interval in SRT notation """
        return f"{FormatTimecode(self.start)} --> {FormatTimecode(self.end)}"

    def __str__(self) -> str:
        return f"#{self.sequence_number} {self.srt_duration}\n{self.text}"
