"""
Unit tests for the question runner: sequential answering and answer rendering.
"""

import pytest

from conftest import FakeFileSearchClient
from file_search_qa.core.store_cache import save_cached_store_name
from file_search_qa.services.file_search_client import Answer
from file_search_qa.services.question_runner import render_answer, run_questions
from file_search_qa.services.store_resolver import resolve_store


class TestRunQuestions:
    """Tests for run_questions()."""

    def test_one_call_per_question_in_order(self, fake_client) -> None:
        questions = ["Q1?", "Q2?", "Q3?"]
        answers = run_questions(fake_client, "store-1", questions, model="gemini-test")
        assert fake_client.calls == [
            ("generate_answer", "store-1", "Q1?", "gemini-test"),
            ("generate_answer", "store-1", "Q2?", "gemini-test"),
            ("generate_answer", "store-1", "Q3?", "gemini-test"),
        ]
        assert [a.text for a in answers] == ["answer to Q1?", "answer to Q2?", "answer to Q3?"]

    def test_output_preserves_question_order(self, fake_client, capsys) -> None:
        run_questions(fake_client, "store-1", ["First?", "Second?"], model="m")
        out = capsys.readouterr().out
        assert out.index("Question: First?") < out.index("answer to First?")
        assert out.index("answer to First?") < out.index("Question: Second?")
        assert out.index("Question: Second?") < out.index("answer to Second?")

    def test_failure_aborts_remaining_questions(self, fake_client) -> None:
        fake_client.fail_on["generate_answer"] = RuntimeError("429 quota")
        with pytest.raises(RuntimeError, match="429 quota"):
            run_questions(fake_client, "store-1", ["Q1?", "Q2?"], model="m")
        assert len(fake_client.calls) == 1

    def test_empty_question_list_makes_no_calls(self, fake_client) -> None:
        assert run_questions(fake_client, "store-1", [], model="m") == []
        assert fake_client.calls == []

    def test_cached_store_end_to_end(self, document, cache_path, capsys) -> None:
        """Cached "store-123" and two questions: two generate calls, two answer blocks, nothing else."""
        client = FakeFileSearchClient(
            answers={
                "What is X?": Answer(text="X is a letter.", has_grounding=True, chunk_count=2),
                "What is Y?": Answer(text="Y is another letter."),
            }
        )
        save_cached_store_name("store-123", cache_path)

        store = resolve_store(client, document, cache_path=cache_path, verify_cached=False)
        run_questions(client, store, ["What is X?", "What is Y?"], model="gemini-2.5-flash")

        assert client.calls == [
            ("generate_answer", "store-123", "What is X?", "gemini-2.5-flash"),
            ("generate_answer", "store-123", "What is Y?", "gemini-2.5-flash"),
        ]
        out = capsys.readouterr().out
        assert out.count("💡 Answer:") == 2
        assert out.index("X is a letter.") < out.index("Y is another letter.")
        assert out.count("Found 2 relevant chunk(s)") == 1


class TestRenderAnswer:
    """Tests for render_answer()."""

    def test_plain_answer_has_no_citation_lines(self) -> None:
        rendered = render_answer(Answer(text="Plain."))
        assert "Plain." in rendered
        assert "Citations" not in rendered
        assert "chunk" not in rendered

    def test_grounded_answer_reports_chunk_count(self) -> None:
        rendered = render_answer(Answer(text="Grounded.", has_grounding=True, chunk_count=3))
        assert "Citations available in groundingMetadata" in rendered
        assert "Found 3 relevant chunk(s)" in rendered

    def test_grounding_without_chunks_renders_like_plain_answer(self) -> None:
        grounded = render_answer(Answer(text="Grounded.", has_grounding=True, chunk_count=0))
        assert grounded == render_answer(Answer(text="Grounded."))
        assert "Citations" not in grounded
