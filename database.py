"""
Flat-file document store for the Creature Points tracker.

Each collection is a JSON array persisted as its own file inside DATA_DIR.
Every call reads from disk; there is no in-memory cache.
"""
import json
import logging
import os
import time
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DATA_DIR = Path(os.getenv("DATA_DIR", "./data")).expanduser().resolve()

STUDENTS = "students.json"
CREATED_ACTIVITIES = "created-activities.json"
ACTIVITIES = "activities.json"


def collection_path(collection: str) -> Path:
    return Path(DATA_DIR) / collection


def ensure_data_dir() -> Path:
    """Create the data directory if missing. Errors propagate to abort startup."""
    data_dir = Path(DATA_DIR)
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def load(path: Path, default: Any = None) -> Any:
    """Return the parsed document at path, or default if it is missing or unparsable."""
    if default is None:
        default = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return default
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {path}, using default: {e}")
        return default


def save(path: Path, value: Any) -> None:
    """Overwrite the whole document. I/O errors propagate."""
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    with open(tmp, "w", encoding="utf-8") as f:
        json.dump(value, f, ensure_ascii=False, indent=2)
    os.replace(tmp, path)


def get_documents(collection: str) -> list[dict[str, Any]]:
    docs = load(collection_path(collection), [])
    if not isinstance(docs, list):
        logger.warning(f"{collection} does not hold an array, ignoring its contents")
        return []
    return docs


def save_documents(collection: str, documents: list[dict[str, Any]]) -> None:
    save(collection_path(collection), documents)


def next_id(documents: list[dict[str, Any]]) -> int:
    """Time-based integer id, bumped past the largest id already in the collection."""
    now_ms = int(time.time() * 1000)
    ids = [d["id"] for d in documents if isinstance(d.get("id"), int)]
    return max([now_ms] + [i + 1 for i in ids])
