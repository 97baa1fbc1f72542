"""Tests for shared model types and errors."""
import pytest

from genflow.core.errors import CollaboratorFailure, GenflowError, InvalidConfiguration
from genflow.core.model_types import Generation, GenerationResult, Message, Prompt


class TestPrompt:
    def test_string_becomes_single_user_message(self):
        prompt = Prompt("hello")
        assert prompt.instructions == (Message("hello"),)
        assert prompt.instructions[0].role == "user"
        assert prompt.options is None

    def test_contents_joins_messages(self):
        prompt = Prompt([Message("a", weight=1.0), Message("b", weight=-0.5)])
        assert prompt.contents == "a\nb"

    def test_equality(self):
        assert Prompt("x") == Prompt([Message("x")])
        assert Prompt("x") != Prompt("y")


class TestGenerationResult:
    def test_first(self):
        result = GenerationResult([Generation(text="a"), Generation(text="b")])
        assert result.first.text == "a"
        assert isinstance(result.generations, tuple)

    def test_first_on_empty_result(self):
        with pytest.raises(ValueError):
            GenerationResult([]).first


def test_collaborator_failure_message():
    err = CollaboratorFailure("rag", "model", TimeoutError("slow"))
    assert isinstance(err, GenflowError)
    assert isinstance(err, RuntimeError)
    assert str(err) == "rag: model call failed: TimeoutError: slow"


def test_invalid_configuration_is_value_error():
    assert issubclass(InvalidConfiguration, ValueError)
