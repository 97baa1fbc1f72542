"""Short-term conversation buffer implementing the `Memory` contract.

Purpose of this abstraction:
    Keep the active conversation as an in-process message buffer and expose it
    to prompts as a single transcript variable (`history` by default).

Save semantics:
    - Every value in `inputs` becomes a `user` message.
    - Every value in `outputs` becomes an `assistant` message.
    - Inputs are appended before outputs; within one side, mapping order is kept.
    A rephrase step saving `{"question": ...}` and an answer step saving
    `{"response": ...}` therefore interleave into one ordered transcript without
    overwriting each other.

Token budget:
    Usage is estimated with a `4 chars ~= 1 token` heuristic. When the running
    estimate exceeds `max_tokens`, the oldest messages are dropped until the
    buffer fits again (the newest message is always kept).

Concurrency:
    All buffer access goes through an instance lock. One instance represents one
    conversation; use separate instances for separate conversations.
"""

import logging
import threading
from typing import Any, Mapping


logger = logging.getLogger(__name__)


MAX_TOKENS = 6000

ROLE_LABELS = {
    "user": "Human",
    "assistant": "AI",
}


def estimate_tokens(text):
    """Estimate token usage for budget accounting.

    Returns `0` for empty input and at least `1` for non-empty input.
    """
    if not text:
        return 0
    return max(1, len(str(text)) // 4)


class ConversationBufferMemory:
    """Thread-safe conversation buffer rendering a transcript on `load`."""

    def __init__(self, memory_key: str = "history", max_tokens: int = MAX_TOKENS):
        self.memory_key = memory_key
        self.max_tokens = max_tokens
        self._messages: list[dict[str, str]] = []
        self._token_count = 0
        self._lock = threading.Lock()

    def load(self, query: Mapping[str, Any]) -> dict[str, str]:
        """Return `{memory_key: transcript}`; the query is not used for filtering."""
        with self._lock:
            lines = [
                f"{ROLE_LABELS.get(message['role'], message['role'])}: {message['content']}"
                for message in self._messages
            ]
        return {self.memory_key: "\n".join(lines)}

    def save(self, inputs: Mapping[str, Any], outputs: Mapping[str, Any]) -> None:
        """Append input values as user turns and output values as assistant turns.

        Empty values are skipped.
        """
        with self._lock:
            for value in inputs.values():
                self._append("user", value)
            for value in outputs.values():
                self._append("assistant", value)
            self._trim()

    def _append(self, role, content):
        if not content:
            return
        content = str(content)
        self._messages.append({"role": role, "content": content})
        self._token_count += estimate_tokens(content)

    def _trim(self):
        dropped = 0
        while self._token_count > self.max_tokens and len(self._messages) > 1:
            removed = self._messages.pop(0)
            self._token_count -= estimate_tokens(removed["content"])
            dropped += 1
        if dropped:
            logger.debug("Dropped %d oldest messages to stay within %d tokens", dropped, self.max_tokens)

    def get_recent_messages(self, limit=10):
        """Return up to `limit` trailing messages in chronological order."""
        with self._lock:
            if limit <= 0:
                return []
            return [dict(message) for message in self._messages[-limit:]]

    def clear(self) -> None:
        """Drop every buffered message."""
        with self._lock:
            self._messages = []
            self._token_count = 0
