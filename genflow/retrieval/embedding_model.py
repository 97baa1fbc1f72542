"""Embedding model bootstrap for the retrieval subsystem.

Architectural role:
    Provides a single shared `SentenceTransformer` instance and an embedder
    callable compatible with `FaissVectorStore`. The loader decides CPU vs CUDA
    execution once and reuses the initialized model across calls.

Design intent:
    - Keep embedding initialization centralized and lazy (importing this module
      does not load torch or the model).
    - Apply a conservative VRAM gate before enabling GPU execution.
"""

import logging
import os
import re


logger = logging.getLogger(__name__)


EMBED_MODEL = os.getenv("EMBED_MODEL", "intfloat/multilingual-e5-small")
_models = {}


def normalize_text(text: str) -> str:
    """Lowercase and collapse punctuation/whitespace before embedding."""
    if not text:
        return ""
    text = str(text).lower()
    text = re.sub(r"[^\w\s]", " ", text)
    text = re.sub(r"\s+", " ", text)
    return text.strip()


def has_enough_vram(min_required_mb: int = 800) -> bool:
    """Return whether CUDA is available with more than `min_required_mb` free."""
    import torch

    if not torch.cuda.is_available():
        return False

    free_mem, _total_mem = torch.cuda.mem_get_info()
    free_mb = free_mem / 1024 / 1024
    logger.info("Free VRAM: %.0f MB", free_mb)
    return free_mb > min_required_mb


def get_model(model_name: str = EMBED_MODEL):
    """Load and cache a `SentenceTransformer` instance.

    Behavior:
        - Caches one instance per model name.
        - Uses CUDA only when `has_enough_vram()` returns `True`.
    """
    if model_name in _models:
        return _models[model_name]

    try:
        use_gpu = has_enough_vram()
    except (ImportError, RuntimeError):
        logger.info("CUDA probe failed, using CPU for embeddings")
        use_gpu = False

    from sentence_transformers import SentenceTransformer

    device = "cuda" if use_gpu else "cpu"
    logger.info("Loading embedding model %s on %s", model_name, device.upper())

    _models[model_name] = SentenceTransformer(model_name, device=device)
    return _models[model_name]


class SentenceTransformerEmbedder:
    """`embed(texts, is_query)` callable backed by a shared model.

    E5-family models expect `query: ` / `passage: ` prefixes; set `use_prefixes`
    to `False` for models trained without them.
    """

    def __init__(self, model_name: str = EMBED_MODEL, use_prefixes: bool = True):
        self.model_name = model_name
        self.use_prefixes = use_prefixes

    def __call__(self, texts, is_query=False):
        prefix = ""
        if self.use_prefixes:
            prefix = "query: " if is_query else "passage: "
        prepared = [prefix + normalize_text(text) for text in texts]
        return get_model(self.model_name).encode(prepared)
