from __future__ import annotations

import logging
import os
from typing import TextIO

from PySubRip.Helpers import GetInputPath
from PySubRip.SubRipFile import SubRipFile
from PySubRip.SubtitleError import SubtitleIOError

# Encodings for reading subtitle files. No fallback unless one is configured.
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING') or None

class SubRipFileHandler:
    """
    Reads SubRip files from disk or from open text streams and parses them.
    """
    SUPPORTED_EXTENSIONS : list[str] = ['.srt']

    def __init__(self, encoding : str|None = None, fallback : str|None = None) -> None:
        self.encoding : str = encoding or default_encoding
        self.fallback : str|None = fallback or fallback_encoding

    def load_file(self, path : str|os.PathLike) -> SubRipFile:
        """
        Open a SubRip file and parse it.

        Raises:
            SubtitleIOError: If the file cannot be read or decoded
            SubtitleParseError: If the content cannot be parsed
        """
        filepath = GetInputPath(path)
        if not filepath:
            raise SubtitleIOError(filepath, ValueError("No file path provided"))

        try:
            source = self._read_text(filepath, self.encoding)
        except UnicodeDecodeError as e:
            if not self.fallback:
                raise SubtitleIOError(filepath, e) from e

            logging.warning(f"Unable to decode {filepath} as {self.encoding}, retrying with {self.fallback}")
            try:
                source = self._read_text(filepath, self.fallback)
            except (OSError, UnicodeError, LookupError) as fallback_error:
                raise SubtitleIOError(filepath, fallback_error) from fallback_error

        except (OSError, LookupError) as e:
            raise SubtitleIOError(filepath, e) from e

        logging.debug(f"Loaded {len(source)} characters from {filepath}")
        return self.parse_string(source, filepath)

    def parse_file(self, file_obj : TextIO, path : str|os.PathLike|None = None) -> SubRipFile:
        """
        Parse SubRip content from an open text stream.
        """
        try:
            source = file_obj.read()
        except (OSError, UnicodeError) as e:
            raise SubtitleIOError(GetInputPath(path), e) from e

        return self.parse_string(source, path)

    def parse_string(self, content : str, path : str|os.PathLike|None = None) -> SubRipFile:
        """
        Parse SubRip string content.
        """
        return SubRipFile(content, path)

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS)

    def _read_text(self, path : str, encoding : str) -> str:
        with open(path, 'r', encoding=encoding, newline='') as f:
            return f.read()
