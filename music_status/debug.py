# music_status/debug.py
import os
import sys
import time
from pathlib import Path


# Console.app picks up anything under ~/Library/Logs.
LOG_PATH = Path.home() / "Library" / "Logs" / "music-status.log"


def debug_enabled() -> bool:
    return os.getenv("MUSIC_STATUS_DEBUG", "").strip() in {"1", "true", "yes", "on"}


def debug_log(message: str) -> None:
    if not debug_enabled():
        return

    line = f"[{time.strftime('%Y-%m-%d %H:%M:%S')}] {message}"

    # stdout carries the JSON payload
    print(f"[DEBUG] {message}", file=sys.stderr)

    try:
        LOG_PATH.parent.mkdir(parents=True, exist_ok=True)
        with LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError:
        pass
