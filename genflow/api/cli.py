"""
Interactive CLI entrypoint for genflow.

Architectural role:
- Builds the conversational RAG chain (standalone question -> RAG) from local
  text files, the configured chat provider and an in-process memory buffer.
- Provides a terminal loop over that chain.

Request lifecycle (per user turn):
1. Read a single line from stdin.
2. Handle local control commands (`exit`/`quit`, `empty chat`/`clear chat`).
3. Run the question through the chain.
4. Print the first candidate of the final result.

Error handling strategy:
- Startup configuration errors (missing knowledge path, unknown provider,
  missing key) print a message and exit with status 1.
- A failed turn prints the error and keeps the session running; memory only
  holds what the steps saved before the failure.
- EOF and keyboard interrupts terminate the loop without traceback output.
"""

import argparse
import logging
import os
import sys

from dotenv import load_dotenv

from genflow.core.engine import build_conversational_rag
from genflow.core.errors import GenflowError
from genflow.llm.client import ChatModel
from genflow.llm.provider_config import PROVIDER
from genflow.memory.conversation_buffer import ConversationBufferMemory
from genflow.retrieval.embedding_model import EMBED_MODEL, SentenceTransformerEmbedder
from genflow.retrieval.ingestion import load_documents
from genflow.retrieval.vector_store import DEFAULT_TOP_K, FaissVectorStore


logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        prog="genflow",
        description="Chat with a folder of text documents.",
    )
    parser.add_argument("knowledge", help="Text file or directory of .txt/.md files to index")
    parser.add_argument("--provider", default=PROVIDER, help="Chat provider (default: %(default)s)")
    parser.add_argument("--embed-model", default=EMBED_MODEL, help="SentenceTransformer model name")
    parser.add_argument("--top-k", type=int, default=DEFAULT_TOP_K, help="Documents per question")
    parser.add_argument("--max-words", type=int, default=300, help="Words per document chunk")
    return parser


def build_chain(args):
    """Index `args.knowledge` and assemble the chain plus its memory.

    The chat model is configured before any embedding or indexing work, so a
    bad provider setting fails without loading documents.
    """
    model = ChatModel(provider=args.provider)

    store = FaissVectorStore(SentenceTransformerEmbedder(args.embed_model), top_k=args.top_k)
    store.add_documents(load_documents(args.knowledge, max_words=args.max_words))

    memory = ConversationBufferMemory()
    chain = build_conversational_rag(model, store, memory)
    return chain, memory, len(store)


def main(argv=None):
    """Run the interactive terminal session."""
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("GENFLOW_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    args = build_parser().parse_args(argv)

    try:
        chain, memory, indexed = build_chain(args)
    except (GenflowError, FileNotFoundError) as err:
        print(f"Startup failed: {err}", file=sys.stderr)
        return 1

    print(f"genflow started with {indexed} document chunks. (Type 'exit' to quit)\n")
    print("-" * 60)

    while True:

        try:
            question = input("Question: ").strip()

        except EOFError:
            print()
            break

        except KeyboardInterrupt:
            print("\nInterrupted.")
            break

        if not question:
            continue

        if question.lower() in ("exit", "quit"):
            print("Shutting down.")
            break

        if question.lower() in ("empty chat", "clear chat"):
            memory.clear()
            print("Chat cleared.")
            continue

        try:
            result = chain.run(question)
        except GenflowError as err:
            logger.exception("Turn failed")
            print(f"\nRequest failed: {err}\n")
            continue

        print("\nResponse:\n")
        print(result.first.text)
        print("\n" + "-" * 60 + "\n")

    return 0


if __name__ == "__main__":
    sys.exit(main())
