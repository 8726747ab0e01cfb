"""
Disk-backed cache for the File Search store name.

Stores a single JSON object at .file-search-cache.json (project root):
{"fileSearchStoreName": "fileSearchStores/..."}. Missing or unreadable content
is a cache miss; the next successful indexing run overwrites it.
"""

import json
import logging
import os
from pathlib import Path

from file_search_qa.core.config import CACHE_FILE, CACHE_KEY
from file_search_qa.core.errors import StoreCacheWriteError

logger = logging.getLogger(__name__)


def read_cached_store_name(path: Path = CACHE_FILE) -> str | None:
    """Return the cached store name, or None when there is no usable cache entry."""
    path = Path(path)
    if not path.is_file():
        logger.info("[store_cache] miss: no cache file at %s", path)
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("[store_cache] cache file corrupted, ignoring %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("[store_cache] cache file corrupted, expected object in %s", path)
        return None
    value = data.get(CACHE_KEY)
    if not isinstance(value, str) or not value.strip():
        logger.info("[store_cache] miss: no %s in %s", CACHE_KEY, path)
        return None
    logger.info("[store_cache] hit store=%s", value)
    return value.strip()


def save_cached_store_name(store_name: str, path: Path = CACHE_FILE) -> None:
    """
    Overwrite the cache file with the given store name.

    Writes a temp sibling then replaces, so a crash never leaves a half-written file.

    Raises:
        StoreCacheWriteError: If the directory or file cannot be written.
    """
    path = Path(path)
    tmp = path.with_name(path.name + ".tmp")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp.write_text(json.dumps({CACHE_KEY: store_name}, indent=2), encoding="utf-8")
        os.replace(tmp, path)
    except OSError as e:
        raise StoreCacheWriteError(path, str(e)) from e
    logger.info("[store_cache] saved store=%s path=%s", store_name, path)


def clear_cached_store_name(path: Path = CACHE_FILE) -> bool:
    """Delete the cache file. Returns True if a file was removed."""
    path = Path(path)
    if not path.is_file():
        return False
    path.unlink()
    logger.info("[store_cache] cleared %s", path)
    return True
