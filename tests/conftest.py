"""
Shared fixtures: a recording fake of FileSearchClient so tests can assert which
remote operations ran, and in what order, without touching the Gemini API.
"""

from types import SimpleNamespace

import pytest

from file_search_qa.services.file_search_client import Answer


class FakeFileSearchClient:
    """Records every call as (method, args) in self.calls."""

    def __init__(
        self,
        store_name: str = "fileSearchStores/new-store",
        poll_states: tuple[bool, ...] = (True,),
        existing_stores: tuple[str, ...] = (),
        answers: dict[str, Answer] | None = None,
    ) -> None:
        self.calls: list[tuple] = []
        self.store_name = store_name
        self.poll_states = list(poll_states)
        self.existing_stores = set(existing_stores)
        self.answers = answers or {}
        self.operation_error = None
        self.fail_on: dict[str, Exception] = {}
        self.on_poll = None

    def _record(self, method: str, *args) -> None:
        self.calls.append((method, *args))
        if method in self.fail_on:
            raise self.fail_on[method]

    @property
    def methods(self) -> list[str]:
        return [c[0] for c in self.calls]

    def create_store(self, display_name):
        self._record("create_store", display_name)
        return self.store_name

    def upload_document(self, store_name, file_path, display_name):
        self._record("upload_document", store_name, str(file_path), display_name)
        return SimpleNamespace(name="operations/upload-1", done=False, error=None)

    def poll_operation(self, operation):
        self._record("poll_operation", operation.name)
        if self.on_poll is not None:
            self.on_poll()
        done = self.poll_states.pop(0) if self.poll_states else False
        return SimpleNamespace(
            name=operation.name,
            done=done,
            error=self.operation_error if done else None,
        )

    def delete_store(self, store_name):
        self._record("delete_store", store_name)

    def store_exists(self, store_name):
        self._record("store_exists", store_name)
        return store_name in self.existing_stores

    def generate_answer(self, store_name, question, model):
        self._record("generate_answer", store_name, question, model)
        return self.answers.get(question, Answer(text=f"answer to {question}"))


@pytest.fixture
def fake_client() -> FakeFileSearchClient:
    return FakeFileSearchClient()


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "sample.txt"
    path.write_text("Supervised, unsupervised and reinforcement learning.", encoding="utf-8")
    return path


@pytest.fixture
def cache_path(tmp_path):
    return tmp_path / ".file-search-cache.json"
