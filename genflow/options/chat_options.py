"""Chat completion option record.

Every chat field is null-coalescing: a runtime value replaces the configured
default, and unset runtime fields inherit it.
"""

from dataclasses import dataclass
from typing import ClassVar, Mapping

from genflow.options.merger import MergePolicy


CHAT_MERGE_POLICIES: Mapping[str, MergePolicy] = {
    "model": MergePolicy.NULL_COALESCE,
    "temperature": MergePolicy.NULL_COALESCE,
    "top_p": MergePolicy.NULL_COALESCE,
    "presence_penalty": MergePolicy.NULL_COALESCE,
    "frequency_penalty": MergePolicy.NULL_COALESCE,
    "max_tokens": MergePolicy.NULL_COALESCE,
}


@dataclass(frozen=True)
class ChatOptions:
    merge_policies: ClassVar[Mapping[str, MergePolicy]] = CHAT_MERGE_POLICIES

    model: str | None = None
    temperature: float | None = None
    top_p: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    max_tokens: int | None = None

    def to_payload(self) -> dict:
        """Return the set fields as an OpenAI-style payload fragment."""
        return {
            key: value
            for key, value in (
                ("model", self.model),
                ("temperature", self.temperature),
                ("top_p", self.top_p),
                ("presence_penalty", self.presence_penalty),
                ("frequency_penalty", self.frequency_penalty),
                ("max_tokens", self.max_tokens),
            )
            if value is not None
        }
