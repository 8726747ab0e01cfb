# Run from project root: python -m file_search_qa.main (or the file-search-qa script)

import logging
import sys
import traceback

from file_search_qa.core.config import (
    CACHE_FILE,
    DOCUMENT_PATH,
    FILE_DISPLAY_NAME,
    GEMINI_MODEL,
    LOG_LEVEL,
    QUESTIONS,
    STORE_DISPLAY_NAME,
    VERIFY_CACHED_STORE,
    get_poll_settings,
)
from file_search_qa.services.file_search_client import build_client
from file_search_qa.services.question_runner import run_questions
from file_search_qa.services.store_resolver import resolve_store


def main() -> int:
    """Resolve the store, answer every question, return the process exit code."""
    logging.basicConfig(level=LOG_LEVEL)
    try:
        print("🚀 Starting Gemini File Search RAG implementation...\n")
        poll_interval, poll_timeout = get_poll_settings()
        client = build_client()
        store_name = resolve_store(
            client,
            DOCUMENT_PATH,
            cache_path=CACHE_FILE,
            store_display_name=STORE_DISPLAY_NAME,
            file_display_name=FILE_DISPLAY_NAME,
            poll_interval=poll_interval,
            poll_timeout=poll_timeout,
            verify_cached=VERIFY_CACHED_STORE,
        )
        run_questions(client, store_name, QUESTIONS, model=GEMINI_MODEL)
        print("\n✨ All questions answered successfully!")
    except Exception as e:
        message = getattr(e, "message", None) or str(e)
        print(f"❌ Error: {message}", file=sys.stderr)
        print(f"Stack trace:\n{traceback.format_exc()}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
