"""
explain.py — Step Explanation
==============================
Turns the step under the cursor into a short natural-language prompt and
hands it to a pluggable text backend (any callable str → str).

The explanation is an extra.  Whatever the backend does (raise, time
out, return nothing) the caller gets a string back and playback carries
on; the log and the cursor are only ever read here.

ClaudeBackend is the one bundled backend.  It needs the anthropic SDK
(the `explain` extra) and is only built when asked for, so the rest of
the engine runs without it.
"""

import json
import logging
from typing import Any, Callable, Optional

from algorithms import get_algorithm
from config import EXPLAIN_MODEL
from engine.recorder import StepLog
from errors import CursorOutOfRangeError

logger = logging.getLogger(__name__)

Backend = Callable[[str], str]

EXPLANATION_UNAVAILABLE = "Explanation unavailable."
NOTHING_TO_EXPLAIN      = "Nothing to explain yet: step forward to start the run."
EXPLAIN_MAX_TOKENS      = 256


def build_prompt(log: StepLog, cursor: int) -> str:
    event = log[cursor]
    info = get_algorithm(log.algo_key)
    label = info.label if info else log.algo_key
    return (
        "Analyze this algorithm step for a technical visualization tool.\n"
        f"Algorithm: {label}\n"
        f"Type: {log.category}\n"
        f"Action: {event.description}\n"
        f"Targets: {json.dumps(list(event.targets))}\n"
        "Provide a concise 2-sentence technical explanation of what is "
        "happening in this specific state."
    )


def explain_step(log: StepLog, cursor: int, backend: Backend) -> str:
    """
    Explain step `cursor` of `log` using `backend`.

    Returns NOTHING_TO_EXPLAIN before step 0 (the backend is not called)
    and EXPLANATION_UNAVAILABLE when the backend fails or answers blank.
    An out-of-range cursor is a caller bug and still raises.
    """
    if cursor == -1:
        return NOTHING_TO_EXPLAIN
    if not 0 <= cursor < len(log):
        raise CursorOutOfRangeError(cursor, len(log))

    prompt = build_prompt(log, cursor)
    try:
        text = backend(prompt)
    except Exception:
        logger.warning("explanation backend failed for %s step %d", log.algo_key, cursor,
                       exc_info=True)
        return EXPLANATION_UNAVAILABLE

    if not isinstance(text, str) or not text.strip():
        logger.warning("explanation backend returned nothing for %s step %d", log.algo_key, cursor)
        return EXPLANATION_UNAVAILABLE
    return text.strip()


# ---------------------------------------------------------------------------
# Backends
# ---------------------------------------------------------------------------
class ClaudeBackend:
    """Wraps anthropic.Anthropic() with lazy import and DI."""

    _LAZY_IMPORT = object()

    def __init__(self, model: str = EXPLAIN_MODEL, client: Any = _LAZY_IMPORT):
        if client is ClaudeBackend._LAZY_IMPORT:
            import anthropic

            self._client = anthropic.Anthropic()
        else:
            self._client = client
        self._model = model

    def __call__(self, prompt: str) -> str:
        logger.debug("ClaudeBackend: model=%s", self._model)
        response = self._client.messages.create(
            model=self._model,
            max_tokens=EXPLAIN_MAX_TOKENS,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.content[0].text


def backend_from_config(
    name: str, model: str = EXPLAIN_MODEL, client: Any = None
) -> Optional[Backend]:
    """
    Backend for a VISUALIZER_EXPLAIN value: "" means none, "claude" the
    anthropic SDK.  `client` is a pre-built SDK client, mostly for tests.
    """
    if not name:
        return None
    if name == "claude":
        if client is not None:
            return ClaudeBackend(model, client=client)
        return ClaudeBackend(model)
    raise ValueError(f"Unknown explanation backend: {name!r}")
