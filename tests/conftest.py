import io
import sys

import pytest


@pytest.fixture
def stdin(monkeypatch):
    """Replace stdin with the given bytes."""
    def _set(data: bytes) -> None:
        monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data)))
    return _set


@pytest.fixture
def scripted_prompt():
    """A prompt that replays answers in order and records what it asked."""
    def _make(*answers: str):
        replies = iter(answers)
        asked = []

        def prompt(text: str) -> str:
            asked.append(text)
            try:
                return next(replies)
            except StopIteration:
                raise EOFError from None

        prompt.asked = asked
        return prompt
    return _make
