"""Tests for the interactive CLI loop."""
from unittest.mock import MagicMock

from genflow.api import cli
from genflow.core.errors import CollaboratorFailure, InvalidConfiguration
from genflow.core.model_types import Generation, GenerationResult
from genflow.memory import ConversationBufferMemory


def run_cli(monkeypatch, lines, chain):
    memory = ConversationBufferMemory()
    monkeypatch.setattr(cli, "build_chain", lambda args: (chain, memory, 3))
    inputs = iter(lines)
    monkeypatch.setattr("builtins.input", lambda prompt="": next(inputs))
    return cli.main(["docs"]), memory


def test_parser_defaults():
    args = cli.build_parser().parse_args(["knowledge"])
    assert args.knowledge == "knowledge"
    assert args.top_k == 4
    assert args.max_words == 300


def test_answers_until_exit(monkeypatch, capsys):
    chain = MagicMock()
    chain.run.return_value = GenerationResult([Generation(text="42")])

    status, _ = run_cli(monkeypatch, ["", "what?", "exit"], chain)

    assert status == 0
    chain.run.assert_called_once_with("what?")
    assert "42" in capsys.readouterr().out


def test_clear_chat_and_failed_turn(monkeypatch, capsys):
    chain = MagicMock()
    chain.run.side_effect = CollaboratorFailure("rag", "model", TimeoutError("slow"))

    status, memory = run_cli(monkeypatch, ["clear chat", "q", "quit"], chain)

    assert status == 0
    out = capsys.readouterr().out
    assert "Chat cleared." in out
    assert "Request failed" in out


def test_startup_failure(monkeypatch, tmp_path, capsys):
    status = cli.main([str(tmp_path / "missing")])
    assert status == 1
    assert "Startup failed" in capsys.readouterr().err


def test_provider_error_fails_before_indexing(monkeypatch, tmp_path, capsys):
    loaded = []

    def bad_provider(provider):
        raise InvalidConfiguration(f"Unknown provider: {provider}")

    monkeypatch.setattr(cli, "ChatModel", bad_provider)
    monkeypatch.setattr(cli, "SentenceTransformerEmbedder", MagicMock())
    monkeypatch.setattr(cli, "load_documents", lambda *a, **kw: loaded.append(a) or [])

    status = cli.main([str(tmp_path), "--provider", "nope"])

    assert status == 1
    assert loaded == []
    assert "Unknown provider: nope" in capsys.readouterr().err
