"""
Line-oriented JSON-RPC loop over stdin/stdout.

One request per line in, one response per line out. Logging goes to
stderr so stdout only ever carries JSON-RPC frames.
"""

import json
import sys
from typing import Optional, TextIO

from transcript_pro.api.rpc import handle_line
from transcript_pro.config import config
from transcript_pro.utils.logger import logging


def serve_stdio(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> None:
    """Serve JSON-RPC requests until stdin is closed."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    logging.info(f"{config.SERVER_NAME} v{config.APP_VERSION} listening for JSON-RPC requests on stdin")

    for line in stdin:
        line = line.strip()
        if not line:
            continue

        response = handle_line(line)
        if response is None:
            continue

        stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
        stdout.flush()

    logging.info("stdin closed, shutting down")
