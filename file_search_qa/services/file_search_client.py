"""
Gemini File Search client: store management, document upload, operation polling,
and grounded answer generation.

Responsibility: The only module that talks to the google-genai SDK. Callers get an
explicit FileSearchClient handle (no module-level client) so tests can pass a fake.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from google import genai
from google.genai import errors, types

from file_search_qa.core.config import GEMINI_API_KEY
from file_search_qa.core.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class Answer:
    """Generated answer text plus a summary of its grounding metadata."""

    text: str
    has_grounding: bool = False
    chunk_count: int = 0


def _answer_from_response(response: Any) -> Answer:
    """Extract text and grounding chunk count from a generate_content response."""
    text = getattr(response, "text", None) or ""
    candidates = getattr(response, "candidates", None) or []
    metadata = getattr(candidates[0], "grounding_metadata", None) if candidates else None
    if metadata is None:
        return Answer(text=text)
    chunks = getattr(metadata, "grounding_chunks", None) or []
    return Answer(text=text, has_grounding=True, chunk_count=len(chunks))


class FileSearchClient:
    """Thin wrapper over genai.Client exposing the File Search operations this app uses."""

    def __init__(self, client: genai.Client) -> None:
        self._client = client

    def create_store(self, display_name: str) -> str:
        """Create a File Search store and return its resource name. Not idempotent."""
        store = self._client.file_search_stores.create(config={"display_name": display_name})
        logger.info("[file_search] created store=%s display_name=%s", store.name, display_name)
        return store.name

    def upload_document(self, store_name: str, file_path: str | Path, display_name: str) -> types.Operation:
        """Upload a file into the store; returns the long-running indexing operation."""
        operation = self._client.file_search_stores.upload_to_file_search_store(
            file=str(file_path),
            file_search_store_name=store_name,
            config={"display_name": display_name},
        )
        logger.info("[file_search] upload started store=%s operation=%s", store_name, operation.name)
        return operation

    def poll_operation(self, operation: types.Operation) -> types.Operation:
        """Fetch the latest state of an operation."""
        updated = self._client.operations.get(operation)
        logger.debug("[file_search] poll operation=%s done=%s", updated.name, updated.done)
        return updated

    def delete_store(self, store_name: str) -> None:
        """Delete a store and the documents in it."""
        self._client.file_search_stores.delete(name=store_name, config={"force": True})
        logger.info("[file_search] deleted store=%s", store_name)

    def store_exists(self, store_name: str) -> bool:
        """
        Return True if the store can be fetched, False if the API reports 404.

        Other API errors (auth, quota, network) propagate.
        """
        try:
            self._client.file_search_stores.get(name=store_name)
        except errors.ClientError as e:
            if e.code == 404:
                logger.info("[file_search] store not found store=%s", store_name)
                return False
            raise
        return True

    def generate_answer(self, store_name: str, question: str, model: str) -> Answer:
        """Answer a question with retrieval scoped to the given store."""
        logger.info("[file_search] IN  model=%s store=%s question=%r", model, store_name, question)
        response = self._client.models.generate_content(
            model=model,
            contents=question,
            config=types.GenerateContentConfig(
                tools=[
                    types.Tool(
                        file_search=types.FileSearch(file_search_store_names=[store_name])
                    )
                ]
            ),
        )
        answer = _answer_from_response(response)
        logger.info(
            "[file_search] OUT answer_len=%d grounding=%s chunks=%d",
            len(answer.text),
            answer.has_grounding,
            answer.chunk_count,
        )
        return answer


def build_client(api_key: str = GEMINI_API_KEY) -> FileSearchClient:
    """
    Build a FileSearchClient from the Gemini API key.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    if not api_key:
        raise ConfigurationError(
            "GEMINI_API_KEY must be set in .env. Get a key from https://aistudio.google.com/apikey"
        )
    return FileSearchClient(genai.Client(api_key=api_key))
