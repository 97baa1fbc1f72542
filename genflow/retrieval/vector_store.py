"""In-process FAISS vector store implementing the `Retriever` contract.

Architectural role:
    Gives the RAG step something concrete to query without an external
    database. Ranking is cosine similarity: embeddings are L2-normalized and
    searched with an inner-product `IndexFlatIP`.

Embedding:
    Vectors come from an injected callable `embed(texts, is_query)` returning
    one row per text. `genflow.retrieval.embedding_model.SentenceTransformerEmbedder`
    is the default used by the CLI; tests inject deterministic fakes.

Filtering:
    - `top_k` caps the FAISS neighbors inspected.
    - `min_score` drops hits below an absolute similarity.
    Returned documents are copies carrying their `score` in metadata.

Determinism and performance:
    Deterministic for fixed embeddings. Flat index search is linear in the
    number of stored vectors.
"""

import logging
from dataclasses import replace

import faiss
import numpy as np

from genflow.retrieval.base import Document


logger = logging.getLogger(__name__)


DEFAULT_TOP_K = 4


def _as_matrix(vectors) -> np.ndarray:
    matrix = np.ascontiguousarray(np.asarray(vectors, dtype="float32"))
    if matrix.ndim == 1:
        matrix = matrix.reshape(1, -1)
    faiss.normalize_L2(matrix)
    return matrix


class FaissVectorStore:
    """Flat inner-product FAISS index plus the documents it was built from."""

    def __init__(self, embed, top_k: int = DEFAULT_TOP_K, min_score: float | None = None):
        self.embed = embed
        self.top_k = top_k
        self.min_score = min_score
        self.index = None
        self.documents: list[Document] = []

    def __len__(self):
        return len(self.documents)

    def add_documents(self, documents) -> int:
        """Embed and index documents.

        Args:
            documents: Iterable of `Document`. Entries with blank content are skipped.

        Returns:
            Number of documents added.
        """
        batch = [doc for doc in documents if doc.content and doc.content.strip()]
        if not batch:
            return 0

        vectors = _as_matrix(self.embed([doc.content for doc in batch], False))

        if self.index is None:
            self.index = faiss.IndexFlatIP(vectors.shape[1])
        elif vectors.shape[1] != self.index.d:
            raise ValueError(
                f"Embedding dimension {vectors.shape[1]} does not match index dimension {self.index.d}"
            )

        self.index.add(vectors)
        self.documents.extend(batch)
        logger.info("Indexed %d documents (total %d)", len(batch), len(self.documents))
        return len(batch)

    def add_texts(self, texts, metadata=None) -> int:
        return self.add_documents(Document(content=text, metadata=dict(metadata or {})) for text in texts)

    def similarity_search(self, query: str, top_k: int | None = None) -> list[Document]:
        """Return up to `top_k` documents ranked by similarity, best first.

        Edge cases:
            - Empty store or blank query returns `[]`.
            - FAISS padding indices (`-1`) are skipped.
        """
        if self.index is None or self.index.ntotal == 0:
            return []
        if not query or not query.strip():
            return []

        k = min(top_k or self.top_k, self.index.ntotal)
        vector = _as_matrix(self.embed([query], True))
        scores, indices = self.index.search(vector, k)

        results = []
        for score, idx in zip(scores[0], indices[0]):
            if idx < 0 or idx >= len(self.documents):
                continue
            score = float(score)
            if self.min_score is not None and score < self.min_score:
                continue
            doc = self.documents[idx]
            results.append(replace(doc, metadata={**doc.metadata, "score": score}))

        logger.debug("Similarity search returned %d of %d candidates", len(results), k)
        return results
