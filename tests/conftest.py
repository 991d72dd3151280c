import pytest

from flashcards import CardStore
from flashcards.config import SessionConfig
from flashcards.console import Console
from flashcards.session import FlashcardSession


class ScriptedInput:
    """Stands in for input(): returns the given lines, then raises EOFError."""

    def __init__(self, lines):
        self.lines = list(lines)

    def __call__(self):
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


class FirstChoice:
    """Random source that always picks the first card."""

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def output():
    return []


@pytest.fixture
def make_console(output):
    def _make(*lines):
        return Console(input_func=ScriptedInput(lines), output_func=output.append)
    return _make


@pytest.fixture
def store():
    """Store whose quiz always picks the first card."""
    return CardStore(rng=FirstChoice())


@pytest.fixture
def make_session(store, make_console):
    def _make(*lines, config=None):
        return FlashcardSession(config or SessionConfig(), store=store, console=make_console(*lines))
    return _make
