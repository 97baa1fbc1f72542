"""genflow: provider-agnostic orchestration for generative-AI calls.

Package layout:
    - `options`: option records and the per-field merge policy.
    - `prompting`: placeholder-based prompt template rendering.
    - `memory`: memory contract and the conversation buffer implementation.
    - `retrieval`: retriever contract, FAISS vector store, text ingestion.
    - `flow`: workflow steps (standalone question, retrieval-augmented answer).
    - `core`: shared model types, error taxonomy, step composition.
    - `llm` / `image`: concrete chat and image generation backends.
    - `api`: interactive CLI entrypoint.
"""

__version__ = "0.1.0"
