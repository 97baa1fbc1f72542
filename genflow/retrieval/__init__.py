"""Retrieval package.

Architectural role:
    Provides the retriever contract consumed by the RAG workflow step and a
    FAISS-backed implementation with text ingestion helpers.

Scope:
    - `base`: `Document` and the `Retriever` protocol.
    - `vector_store`: in-process FAISS similarity search over documents.
    - `embedding_model`: shared `SentenceTransformer` embedder bootstrap.
    - `ingestion`: cleaning and chunking of text files into documents.
"""

from genflow.retrieval.base import Document, Retriever

__all__ = ["Document", "Retriever"]
