import os
import sys
import logging

from transcript_pro.config import config

logging_str = "[%(asctime)s] {%(pathname)s:%(lineno)d} %(levelname)s - %(message)s"
logging_dir = str(config.LOGS_DIR)
loging_path = os.path.join(logging_dir, "transcriptpro.log")
if not os.path.exists(logging_dir):
    os.makedirs(logging_dir)
if not os.path.exists(loging_path):
    with open(loging_path, "w") as f:
        pass
# stdout carries JSON-RPC frames, so console output goes to stderr
logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format=logging_str,
    handlers=[
        logging.FileHandler(loging_path),
        logging.StreamHandler(sys.stderr)
    ]
)

logging = logging.getLogger('transcriptpro')
