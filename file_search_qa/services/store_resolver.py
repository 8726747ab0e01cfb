"""
Store resolution: reuse the cached File Search store or build a new one.

Responsibility: Return a store name that is ready for questions. Warm path reads
the cache and makes no remote calls (unless verification is enabled). Cold path
creates a store, uploads the document, waits for indexing, then writes the cache.
A store created on a failed cold path is deleted before the error propagates.
"""

import logging
import math
import sys
import time
from pathlib import Path

from file_search_qa.core.config import (
    CACHE_FILE,
    FILE_DISPLAY_NAME,
    POLL_INTERVAL_SECONDS,
    POLL_TIMEOUT_SECONDS,
    STORE_DISPLAY_NAME,
    VERIFY_CACHED_STORE,
)
from file_search_qa.core.errors import DocumentNotFoundError, IndexingFailedError, IndexingTimeoutError
from file_search_qa.core.store_cache import read_cached_store_name, save_cached_store_name
from file_search_qa.services.file_search_client import FileSearchClient

logger = logging.getLogger(__name__)


def wait_for_operation(
    client: FileSearchClient,
    operation,
    interval: float = POLL_INTERVAL_SECONDS,
    timeout: float = POLL_TIMEOUT_SECONDS,
):
    """
    Poll an operation until it reports done. One progress dot per poll.

    Returns the finished operation.

    Raises:
        IndexingTimeoutError: After ceil(timeout / interval) polls without completion.
        IndexingFailedError: If the finished operation carries an error payload.
        ValueError: If interval is not positive.
    """
    if interval <= 0:
        raise ValueError(f"poll interval must be greater than 0, got {interval!r}")
    max_polls = max(1, math.ceil(timeout / interval))
    polls = 0
    while not operation.done:
        if polls >= max_polls:
            raise IndexingTimeoutError(operation.name, polls * interval)
        time.sleep(interval)
        operation = client.poll_operation(operation)
        polls += 1
        sys.stdout.write(".")
        sys.stdout.flush()
    logger.info("[resolver] operation=%s done after %d polls", operation.name, polls)
    if getattr(operation, "error", None):
        raise IndexingFailedError(operation.name, operation.error)
    return operation


def _discard_store(client: FileSearchClient, store_name: str) -> None:
    """Best-effort delete of a store left behind by a failed cold path."""
    try:
        client.delete_store(store_name)
    except Exception as e:
        logger.warning("[resolver] could not delete orphaned store=%s: %s", store_name, e)


def build_store(
    client: FileSearchClient,
    document_path: Path,
    cache_path: Path = CACHE_FILE,
    store_display_name: str = STORE_DISPLAY_NAME,
    file_display_name: str = FILE_DISPLAY_NAME,
    poll_interval: float = POLL_INTERVAL_SECONDS,
    poll_timeout: float = POLL_TIMEOUT_SECONDS,
) -> str:
    """Cold path: create, upload, wait for indexing, cache. Returns the new store name."""
    document_path = Path(document_path)
    if not document_path.is_file():
        raise DocumentNotFoundError(document_path)

    print("📦 Creating file search store...")
    store_name = client.create_store(store_display_name)
    print(f"✅ File search store created: {store_name}\n")

    try:
        print(f"📤 Uploading {document_path.name} to file search store...")
        operation = client.upload_document(store_name, document_path, file_display_name)

        print("⏳ Waiting for file indexing to complete...")
        wait_for_operation(client, operation, interval=poll_interval, timeout=poll_timeout)
        print("\n✅ File indexed successfully!\n")

        save_cached_store_name(store_name, cache_path)
    except BaseException:
        logger.warning("[resolver] cold path failed after creating store=%s; cleaning up", store_name)
        _discard_store(client, store_name)
        raise

    return store_name


def resolve_store(
    client: FileSearchClient,
    document_path: Path,
    cache_path: Path = CACHE_FILE,
    store_display_name: str = STORE_DISPLAY_NAME,
    file_display_name: str = FILE_DISPLAY_NAME,
    poll_interval: float = POLL_INTERVAL_SECONDS,
    poll_timeout: float = POLL_TIMEOUT_SECONDS,
    verify_cached: bool = VERIFY_CACHED_STORE,
) -> str:
    """
    Return a usable File Search store name for document_path.

    A cached name is trusted as-is unless verify_cached is set. Then the document must
    exist before the API is asked about the store, and a store the API
    no longer knows is rebuilt (with a warning) instead of failing.

    Raises:
        DocumentNotFoundError: Cold path or verified cache and the document does not exist.
            No remote call is made.
        IndexingTimeoutError / IndexingFailedError: Indexing did not complete.
        StoreCacheWriteError: Store built but the cache could not be written.
        google.genai.errors.APIError: Any remote failure, unmodified.
    """
    cached = read_cached_store_name(cache_path)
    if cached and not verify_cached:
        print("✅ Using cached file search store")
        print(f"📦 Store: {cached}\n")
        return cached

    if cached:
        # A failed verification leads to the cold path, which needs the document.
        if not Path(document_path).is_file():
            raise DocumentNotFoundError(document_path)
        if client.store_exists(cached):
            print("✅ Using cached file search store (verified)")
            print(f"📦 Store: {cached}\n")
            return cached
        logger.warning("[resolver] cached store=%s no longer exists; rebuilding", cached)

    return build_store(
        client,
        document_path,
        cache_path=cache_path,
        store_display_name=store_display_name,
        file_display_name=file_display_name,
        poll_interval=poll_interval,
        poll_timeout=poll_timeout,
    )
