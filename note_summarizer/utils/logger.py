import os
import sys
import logging

from note_summarizer.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(str(config.BASE_DIR), "logs")
loging_path = os.path.join(logging_dir, "notesummarizer.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
logging.basicConfig(
    level=config.LOG_LEVEL,
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

logging = logging.getLogger('notesummarizer')
