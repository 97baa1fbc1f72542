"""Answer a question from retrieved documents.

Call order per `apply` (strict, synchronous):
    1. `retriever.similarity_search(question)`, consumed once in rank order.
    2. Each document becomes `content + "\\n"`.
    3. Variables `{"input": question, "documents": [...]}` are rendered and the
       prompt is trimmed.
    4. The model is called once.
    5. If a memory is configured, `memory.save({}, {"response": <first text>})`.

Memory is optional here: without it step 5 is skipped and no memory call is
made. The response is saved after the model call and only on success. A
result without candidates counts as a failed model call.
"""

import logging

from genflow.core.errors import InvalidConfiguration
from genflow.core.model_types import GenerationResult, Prompt
from genflow.flow.base import WorkflowStep, collaborator_call
from genflow.prompting.prompts import RAG_TEMPLATE
from genflow.prompting.template import render


logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


class RagStep(WorkflowStep):
    """Retrieval-augmented generation step.

    Args:
        model: Generation backend.
        retriever: Similarity-search collaborator. Required.
        memory: Optional memory receiving the generated response.
        template: Prompt template with `{input}` and `{documents}` placeholders.
    """

    name = "rag"

    def __init__(self, model, retriever, memory=None, template: str = RAG_TEMPLATE):
        if model is None:
            raise InvalidConfiguration(f"{self.name} requires a generation model")
        if retriever is None:
            raise InvalidConfiguration(f"{self.name} requires a retriever")
        self._model = model
        self._retriever = retriever
        self._memory = memory
        self._template = template

    @property
    def model(self):
        return self._model

    @property
    def retriever(self):
        return self._retriever

    @property
    def memory(self):
        return self._memory

    @property
    def template(self) -> str:
        return self._template

    def apply(self, question: str) -> GenerationResult:
        with collaborator_call(self.name, "retriever"):
            content_list = [
                doc.content + LINE_SEPARATOR
                for doc in self._retriever.similarity_search(question)
            ]
        logger.debug("%s: retrieved %d documents", self.name, len(content_list))

        variables = {"input": question, "documents": content_list}
        prompt = render(self._template, variables).strip()

        with collaborator_call(self.name, "model"):
            result = self._model.generate(Prompt(prompt))
            answer = result.first.text

        if self._memory is not None:
            with collaborator_call(self.name, "memory"):
                self._memory.save({}, {"response": answer})

        return result
