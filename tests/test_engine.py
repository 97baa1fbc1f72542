"""Tests for step composition."""
import pytest

from conftest import FakeModel, FakeRetriever
from genflow.core.engine import SequentialWorkflow, build_conversational_rag
from genflow.core.errors import CollaboratorFailure, InvalidConfiguration
from genflow.memory import ConversationBufferMemory


class TestSequentialWorkflow:
    def test_requires_steps(self):
        with pytest.raises(InvalidConfiguration):
            SequentialWorkflow([])

    def test_answer_of_first_step_feeds_second(self, log):
        model = FakeModel(log, replies=("  Standalone Q?  \n", "Final answer"))
        retriever = FakeRetriever(log)
        memory = ConversationBufferMemory()
        chain = build_conversational_rag(model, retriever, memory)

        result = chain.run("And Y?")

        assert result.first.text == "Final answer"
        assert ("retriever.similarity_search", "Standalone Q?") in log.calls
        assert "QUESTION:\nStandalone Q?\n" in model.prompts[1].contents

    def test_shared_memory_records_question_then_answer(self, log):
        model = FakeModel(log, replies=("rephrased", "answer one", "rephrased 2", "answer two"))
        memory = ConversationBufferMemory()
        chain = build_conversational_rag(model, FakeRetriever(log), memory)

        chain.run("first question")
        assert memory.load({}) == {"history": "Human: first question\nAI: answer one"}

        chain("second question")
        assert "Chat History:\nHuman: first question\nAI: answer one\n" in model.prompts[2].contents
        assert memory.get_recent_messages(limit=2) == [
            {"role": "user", "content": "second question"},
            {"role": "assistant", "content": "answer two"},
        ]

    def test_separate_rephrase_model(self, log):
        rephraser = FakeModel(log, replies=("rephrased",))
        answerer = FakeModel(log, replies=("answer",))
        chain = build_conversational_rag(
            answerer, FakeRetriever(log), ConversationBufferMemory(), rephrase_model=rephraser
        )
        chain.run("q")
        assert len(rephraser.prompts) == 1
        assert len(answerer.prompts) == 1

    def test_failing_step_aborts_run(self, log):
        model = FakeModel(log, error=ValueError("bad request"))
        memory = ConversationBufferMemory()
        chain = build_conversational_rag(model, FakeRetriever(log), memory)

        with pytest.raises(CollaboratorFailure):
            chain.run("q")

        assert memory.load({}) == {"history": ""}
        assert "retriever.similarity_search" not in log.names()
