import time
import json
import threading
import numpy as np

_lock = threading.Lock()
LOG_FILE = "hexagon_bounce_log.txt"


def _jsonable(value):
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    return str(value)


def console_log(message, data=None, to_file=True):
    """Timestamped debug print for the simulation.

    `data` is any JSON-serializable value; numpy arrays and scalars are
    converted on the way out. With `to_file` the entry is also appended as one
    JSON line to `LOG_FILE`.
    """
    ts = time.strftime("%Y-%m-%d %H:%M:%S")
    if data is None:
        print(f"[CONSOLE_LOG {ts}] {message}")
    else:
        print(f"[CONSOLE_LOG {ts}] {message} | {json.dumps(data, default=_jsonable)}")

    if to_file:
        entry = {"ts": ts, "message": message, "data": data}
        try:
            with _lock:
                with open(LOG_FILE, "a", encoding="utf-8") as f:
                    f.write(json.dumps(entry, default=_jsonable) + "\n")
        except OSError as e:
            # A full disk or read-only cwd must not stop the simulation
            print(f"Warning: Could not write {LOG_FILE}. ({e})")
