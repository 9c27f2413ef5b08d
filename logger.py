import json
import os
import sys
from datetime import datetime, timezone

DEFAULT_LOG_PATH = "logs/events.log"


def get_log_path():
    return os.getenv("PWTIER_LOG_PATH", DEFAULT_LOG_PATH)


def logging_enabled():
    return os.getenv("PWTIER_LOG", "1").strip().lower() not in ("0", "false", "no", "off")


def write_log(action, level, length, source, **extra):
    # JSON line format. Never pass the password itself in here.
    if not logging_enabled():
        return None

    entry = {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "action": action,
        "level": getattr(level, "value", level),
        "length": length,
        "source": source,
    }
    entry.update(extra)

    path = get_log_path()
    directory = os.path.dirname(path)
    try:
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(path, "a", encoding="utf-8") as f:
            f.write(json.dumps(entry, ensure_ascii=False) + "\n")
    except OSError as e:
        print(f"[!] Warning: could not write log: {e}", file=sys.stderr)
        return None
    return entry
