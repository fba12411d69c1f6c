import os
import sys
import logging

base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, base_path)

from scripts.subrip_common import InitLogger, CreateArgParser

from PySubRip import parse_file
from PySubRip.SubRipFileHandler import SubRipFileHandler
from PySubRip.SubtitleError import SubtitleError

parser = CreateArgParser("Parses a SubRip file and prints its subtitles")
parser.add_argument('--count', action='store_true', help="Only print the number of subtitles")
args = parser.parse_args()

logger_options = InitLogger("srt-dump", args.debug, args.logdir)

extension = os.path.splitext(args.input)[1].lower()
if extension not in SubRipFileHandler.SUPPORTED_EXTENSIONS:
    logging.warning(f"{args.input} does not have a SubRip file extension, parsing anyway")

exit_code = 0

try:
    subs = parse_file(args.input)

    logging.info(f"Parsed {len(subs.subtitles)} subtitles from {subs.path}")

    if args.count:
        print(len(subs.subtitles))
    else:
        for subtitle in subs.subtitles:
            print(subtitle)
            print()

except SubtitleError as e:
    logging.error(str(e))
    print("Error:", e)
    exit_code = 1

finally:
    if logger_options.file_handler:
        logging.getLogger('').removeHandler(logger_options.file_handler)
        logger_options.file_handler.close()

sys.exit(exit_code)
