"""Shared test fixtures for genflow."""
import pytest

from genflow.core.model_types import Generation, GenerationResult
from genflow.retrieval.base import Document


class CallLog:
    """Ordered record of collaborator calls shared by the fakes."""

    def __init__(self):
        self.calls = []

    def add(self, name, *args):
        self.calls.append((name, *args))

    def names(self):
        return [call[0] for call in self.calls]


class FakeModel:
    def __init__(self, log, replies=("generated answer",), error=None):
        self.log = log
        self.replies = list(replies)
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        self.log.add("model.generate", prompt.contents)
        if self.error is not None:
            raise self.error
        text = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        return GenerationResult([Generation(text=text, metadata={"finish_reason": "stop"})])


class FakeMemory:
    def __init__(self, log, loaded=None):
        self.log = log
        self.loaded = loaded if loaded is not None else {"history": "H"}
        self.saved = []

    def load(self, query):
        self.log.add("memory.load", dict(query))
        return self.loaded

    def save(self, inputs, outputs):
        self.log.add("memory.save", dict(inputs), dict(outputs))
        self.saved.append((dict(inputs), dict(outputs)))


class FakeRetriever:
    def __init__(self, log, contents=("doc1", "doc2"), error=None):
        self.log = log
        self.contents = list(contents)
        self.error = error

    def similarity_search(self, query):
        self.log.add("retriever.similarity_search", query)
        if self.error is not None:
            raise self.error
        # one-shot iterator, like a streamed result set
        return iter(Document(content=c) for c in self.contents)


@pytest.fixture
def log():
    return CallLog()


@pytest.fixture
def model(log):
    return FakeModel(log)


@pytest.fixture
def memory(log):
    return FakeMemory(log)


@pytest.fixture
def retriever(log):
    return FakeRetriever(log)
