"""
passforge.storage
Atomic file helpers and JSON byte encoding for on-disk settings.
"""

import os
import json
from typing import Any, Dict


def ensure_dir_exists(path: str) -> None:
    d = os.path.dirname(path)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)

def atomic_write_bytes(path: str, data: bytes) -> None:
    """
    Atomically write bytes to 'path' by writing to a temp file and renaming.
    """
    ensure_dir_exists(path)
    tmp = path + ".tmp"
    with open(tmp, "wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())
    # atomic replace
    os.replace(tmp, path)

def atomic_read_bytes(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()

def app_dir() -> str:
    """
    %APPDATA%/PassForge on Windows; ~/.passforge elsewhere.
    """
    appdata = os.getenv("APPDATA")
    if appdata:
        return os.path.join(appdata, "PassForge")
    return os.path.join(os.path.expanduser("~"), ".passforge")

def default_settings_path() -> str:
    return os.path.join(app_dir(), "settings.json")

def read_json_bytes(b: bytes) -> Dict[str, Any]:
    return json.loads(b.decode("utf-8"))

def dump_json_bytes(obj: Dict[str, Any]) -> bytes:
    return json.dumps(obj, ensure_ascii=False, indent=2).encode("utf-8")
