"""Workflow steps.

Each step is a callable `apply(question) -> GenerationResult` built once with
its collaborators:

    - `StandaloneQuestionStep`: memory load -> render -> model -> save question.
    - `RagStep`: retrieve -> render with documents -> model -> save response.

Steps own references to their collaborators, never their lifecycle.
"""

from genflow.flow.rag import RagStep
from genflow.flow.standalone_question import StandaloneQuestionStep

__all__ = ["RagStep", "StandaloneQuestionStep"]
