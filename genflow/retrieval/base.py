"""Retriever contract and document type.

A retriever returns ranked documents for a text query. The sequence may be a
list or a one-shot iterator; callers consume it once, in order, per query.
"""

from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, runtime_checkable


@dataclass(frozen=True)
class Document:
    """Retrieved or ingested text unit.

    Attributes:
        content: Text exposed to prompts.
        metadata: Free-form attributes (`source`, `chunk`, `score`, ...).
        id: Optional stable identifier.
    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)
    id: str | None = None


@runtime_checkable
class Retriever(Protocol):
    def similarity_search(self, query: str) -> Iterable[Document]:
        """Return documents ranked by relevance to `query`, best first."""
        ...
