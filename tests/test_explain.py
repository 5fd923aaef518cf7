"""
Tests for step explanations: prompt contents and graceful degradation.
"""

import logging

import pytest

from engine import EXPLANATION_UNAVAILABLE, ClaudeBackend, backend_from_config, explain_step, run_algorithm
from engine.explain import EXPLAIN_MAX_TOKENS, NOTHING_TO_EXPLAIN, build_prompt
from errors import CursorOutOfRangeError


@pytest.fixture
def log():
    return run_algorithm("bubblesort", [3, 1, 2])


def test_prompt_names_algorithm_and_step(log):
    prompt = build_prompt(log, 1)

    assert "Bubble Sort" in prompt
    assert "sorting" in prompt
    assert log[1].description in prompt
    assert "[0, 1]" in prompt


def test_backend_answer_is_returned(log):
    prompts = []

    def backend(prompt):
        prompts.append(prompt)
        return "  Two values trade places.  "

    assert explain_step(log, 0, backend) == "Two values trade places."
    assert len(prompts) == 1


def test_before_first_step_skips_backend(log):
    def backend(prompt):
        raise AssertionError("must not be called")

    assert explain_step(log, -1, backend) == NOTHING_TO_EXPLAIN


def test_failing_backend_degrades(log, caplog):
    def backend(prompt):
        raise ConnectionError("offline")

    with caplog.at_level(logging.WARNING, logger="engine.explain"):
        assert explain_step(log, 2, backend) == EXPLANATION_UNAVAILABLE
    assert any("failed" in r.getMessage() for r in caplog.records)


def test_blank_answer_degrades(log):
    assert explain_step(log, 2, lambda p: "   ") == EXPLANATION_UNAVAILABLE
    assert explain_step(log, 2, lambda p: None) == EXPLANATION_UNAVAILABLE


def test_explaining_leaves_log_alone(log):
    before = log.events
    explain_step(log, 3, lambda p: 1 / 0)
    assert log.events == before


def test_out_of_range_cursor_raises(log):
    with pytest.raises(CursorOutOfRangeError):
        explain_step(log, len(log), lambda p: "x")


# ---------------------------------------------------------------------------
# Claude backend
# ---------------------------------------------------------------------------
class FakeAnthropicResponse:
    """Mimics anthropic message response structure."""

    def __init__(self, text):
        self.content = [type("Block", (), {"text": text})()]


class FakeAnthropicClient:
    """Fake anthropic.Anthropic() for testing."""

    def __init__(self, text="Two values are compared."):
        self.messages = self
        self.last_call = {}
        self._text = text

    def create(self, **kwargs):
        self.last_call = kwargs
        return FakeAnthropicResponse(self._text)


def test_claude_backend_with_injected_client(log):
    fake = FakeAnthropicClient()
    backend = ClaudeBackend(model="test-model", client=fake)

    assert explain_step(log, 0, backend) == "Two values are compared."
    assert fake.last_call["model"] == "test-model"
    assert fake.last_call["max_tokens"] == EXPLAIN_MAX_TOKENS
    assert fake.last_call["messages"] == [{"role": "user", "content": build_prompt(log, 0)}]


def test_claude_backend_failure_degrades(log):
    class Broken:
        def __init__(self):
            self.messages = self

        def create(self, **kwargs):
            raise TimeoutError("slow")

    assert explain_step(log, 0, ClaudeBackend(client=Broken())) == EXPLANATION_UNAVAILABLE


def test_backend_from_config():
    assert backend_from_config("") is None
    assert isinstance(backend_from_config("claude", client=FakeAnthropicClient()), ClaudeBackend)
    with pytest.raises(ValueError):
        backend_from_config("parrot")
