"""Text ingestion into retrievable documents.

Pipeline summary:
    1. Collect `.txt`/`.md` files from a path (file or directory tree).
    2. Normalize whitespace.
    3. Chunk into paragraph groups bounded by word count.
    4. Wrap each chunk in a `Document` with `source` and `chunk` metadata.

Retrieval/ranking relation:
    This module does not embed or rank. It only controls what becomes
    searchable once the documents are added to a vector store.

Determinism:
    Cleaning/chunking are deterministic; directory traversal is sorted.
"""

import logging
import os
import re

from genflow.retrieval.base import Document


logger = logging.getLogger(__name__)


SUPPORTED_EXTENSIONS = {".txt", ".md"}

IGNORE_DIRS = {
    ".git", "node_modules", "__pycache__", "venv",
    "build", "dist", ".idea"
}


def clean_text(text):
    """Collapse runs of spaces/tabs and 3+ blank lines; strip the result."""
    text = re.sub(r"[ \t]+", " ", text)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def semantic_chunk_text(text, max_words=300):
    """Chunk prose text into paragraph groups bounded by word count.

    Args:
        text: Cleaned prose text.
        max_words: Soft maximum words per chunk.

    Returns:
        List of chunk strings preserving paragraph order.

    Chunking strategy:
        Paragraph-first accumulation; when adding a paragraph would exceed the cap,
        a new chunk starts. A single paragraph longer than the cap forms its own
        chunk.
    """
    paragraphs = re.split(r"\n\s*\n", text)

    chunks = []
    current_chunk = []
    current_length = 0

    for para in paragraphs:
        word_count = len(para.split())

        if word_count == 0:
            continue

        if current_length + word_count <= max_words:
            current_chunk.append(para)
            current_length += word_count
        else:
            if current_chunk:
                chunks.append("\n\n".join(current_chunk))
            current_chunk = [para]
            current_length = word_count

    if current_chunk:
        chunks.append("\n\n".join(current_chunk))

    return chunks


def load_file(path, max_words=300):
    """Read one text file and return its chunks as documents."""
    with open(path, "r", encoding="utf-8") as f:
        text = clean_text(f.read())

    source = os.path.basename(path)
    return [
        Document(content=chunk, metadata={"source": source, "chunk": i}, id=f"{source}:{i}")
        for i, chunk in enumerate(semantic_chunk_text(text, max_words=max_words))
    ]


def iter_text_files(path):
    """Yield supported files under `path` in sorted order."""
    if os.path.isfile(path):
        yield path
        return

    for root, dirs, files in os.walk(path):
        dirs[:] = sorted(d for d in dirs if d not in IGNORE_DIRS)
        for name in sorted(files):
            if os.path.splitext(name)[1].lower() in SUPPORTED_EXTENSIONS:
                yield os.path.join(root, name)


def load_documents(path, max_words=300):
    """Load and chunk every supported file under `path`.

    Raises:
        FileNotFoundError: `path` does not exist.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(path)

    documents = []
    for filepath in iter_text_files(path):
        file_docs = load_file(filepath, max_words=max_words)
        logger.info("Loaded %d chunks from %s", len(file_docs), filepath)
        documents.extend(file_docs)
    return documents
