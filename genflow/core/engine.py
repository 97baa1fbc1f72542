"""Sequential composition of workflow steps.

Architectural role:
    Chains steps so that each step's answer becomes the next step's question.
    The canonical chain is standalone-question -> RAG over one shared memory.

Control-flow model:
    1. The caller's question enters the first step.
    2. After each step except the last, the first candidate's text is stripped
       and passed on.
    3. The last step's `GenerationResult` is returned unchanged.

Error handling strategy:
    A failing step aborts the run; its exception propagates as raised by the
    step. No partial result is returned.

Memory interaction:
    The engine itself never touches memory. With the canonical chain the
    rephrase step records `question` and the RAG step records `response`, two
    distinct keys, so a transcript memory sees question then answer.
"""

import logging

from genflow.core.errors import InvalidConfiguration
from genflow.core.model_types import GenerationResult
from genflow.flow.rag import RagStep
from genflow.flow.standalone_question import StandaloneQuestionStep
from genflow.prompting.prompts import RAG_TEMPLATE, STANDALONE_QUESTION_TEMPLATE


logger = logging.getLogger(__name__)


class SequentialWorkflow:
    """Run steps in order, feeding each answer into the next step."""

    def __init__(self, steps):
        self.steps = tuple(steps)
        if not self.steps:
            raise InvalidConfiguration("SequentialWorkflow requires at least one step")

    def run(self, question: str) -> GenerationResult:
        value = question
        result = None

        for position, step in enumerate(self.steps):
            step_name = getattr(step, "name", type(step).__name__)
            logger.debug("Running step %d/%d (%s)", position + 1, len(self.steps), step_name)

            result = step.apply(value)

            if position < len(self.steps) - 1:
                value = (result.first.text or "").strip()

        return result

    def __call__(self, question: str) -> GenerationResult:
        return self.run(question)


def build_conversational_rag(
    model,
    retriever,
    memory,
    rephrase_model=None,
    standalone_template: str = STANDALONE_QUESTION_TEMPLATE,
    rag_template: str = RAG_TEMPLATE,
) -> SequentialWorkflow:
    """Wire standalone-question -> RAG over one shared memory.

    Args:
        model: Backend answering the question.
        retriever: Similarity-search collaborator for the RAG step.
        memory: Memory shared by both steps. Required.
        rephrase_model: Optional separate backend for rephrasing; defaults to `model`.
        standalone_template: Rephrase prompt template.
        rag_template: Answer prompt template.
    """
    return SequentialWorkflow([
        StandaloneQuestionStep(rephrase_model or model, memory, template=standalone_template),
        RagStep(model, retriever, memory=memory, template=rag_template),
    ])
