import os
import logging

from argparse import ArgumentParser
from dataclasses import dataclass

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str|None

def InitLogger(logfilename: str, debug: bool = False, log_dir: str|None = None) -> LoggerOptions:
    """ Initialise the console logger, and a file handler if a log directory is given """
    file_handler = None
    log_path = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'INFO').upper()
        logging_level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)

    if debug:
        logging.debug("Debug logging enabled")

    if log_dir:
        log_path = os.path.join(log_dir, f"{logfilename}.log")
        try:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
            file_handler.setLevel(logging_level)
            file_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
            logging.getLogger('').addHandler(file_handler)
        except OSError as e:
            logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create an arg parser with the arguments shared by the scripts
    """
    parser = ArgumentParser(description=description)
    parser.add_argument('input', help="Path to a SubRip (.srt) subtitle file")
    parser.add_argument('--debug', action='store_true', help="Run with DEBUG log level")
    parser.add_argument('--logdir', type=str, default=None, help="Directory to write a log file to")
    return parser
