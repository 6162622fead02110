import os
import sys
import logging

from app.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = os.path.join(config.BASE_DIR, "logs")
logging_path = os.path.join(logging_dir, "ytnotionsummarizer.log")
os.makedirs(logging_dir, exist_ok=True)

logging.basicConfig(
    level=getattr(config, "LOG_LEVEL", "INFO").upper(),
    format=logging_str,
    handlers=[
        logging.FileHandler(logging_path),
        logging.StreamHandler(sys.stdout)
    ]
)

# Quiet the SDKs' per-request chatter unless debugging.
for noisy in ("httpx", "urllib3", "notion_client"):
    logging.getLogger(noisy).setLevel(logging.WARNING)

logging = logging.getLogger('ytnotionsummarizer')
