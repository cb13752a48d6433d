# utils/logger.py
import datetime
import os
import sys

QUIET_ENV = "HTMLBLOCKS_QUIET"


def log(msg: str):
    # stdout belongs to the CLI output (augmented HTML, block JSON)
    if os.getenv(QUIET_ENV, "") not in ("", "0"):
        return
    ts = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{ts}] {msg}", file=sys.stderr)
