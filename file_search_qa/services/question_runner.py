"""
Question runner: ask each question against the resolved store and print the answers.

Questions run one at a time, in order. The first failure stops the loop and propagates.
"""

import logging
from collections.abc import Iterable

from file_search_qa.core.config import GEMINI_MODEL, RULE_WIDTH
from file_search_qa.services.file_search_client import Answer, FileSearchClient

logger = logging.getLogger(__name__)


def render_answer(answer: Answer) -> str:
    """Answer text, plus a citation summary when grounding referenced at least one chunk."""
    lines = [f"💡 Answer:\n{answer.text}\n"]
    if answer.chunk_count > 0:
        lines.append("📚 Citations available in groundingMetadata")
        lines.append(f"   Found {answer.chunk_count} relevant chunk(s)\n")
    return "\n".join(lines)


def run_questions(
    client: FileSearchClient,
    store_name: str,
    questions: Iterable[str],
    model: str = GEMINI_MODEL,
) -> list[Answer]:
    """Ask questions sequentially; returns answers in input order."""
    print(f"🤖 Asking questions using {model} model:\n")
    print("=" * RULE_WIDTH)

    answers: list[Answer] = []
    for question in questions:
        print(f"\n❓ Question: {question}\n")
        answer = client.generate_answer(store_name, question, model)
        print(render_answer(answer))
        print("-" * RULE_WIDTH)
        answers.append(answer)

    logger.info("[runner] answered %d questions store=%s", len(answers), store_name)
    return answers
