"""Rephrase a follow-up question into a standalone question.

Call order per `apply` (strict, synchronous):
    1. `memory.load({})` supplies the conversation variables (`history`).
    2. `input` is set to the incoming question (overriding any loaded `input`).
    3. The template is rendered.
    4. The model is called once.
    5. `memory.save({"question": question}, {})` records the question only.

The generated standalone question is not saved; the answering step downstream
records the real answer. If the model call fails, step 5 never runs.
"""

import logging

from genflow.core.errors import InvalidConfiguration
from genflow.core.model_types import GenerationResult, Prompt
from genflow.flow.base import WorkflowStep, collaborator_call
from genflow.prompting.prompts import STANDALONE_QUESTION_TEMPLATE
from genflow.prompting.template import render


logger = logging.getLogger(__name__)


class StandaloneQuestionStep(WorkflowStep):
    """Workflow step turning a follow-up into a self-contained question.

    Args:
        model: Generation backend.
        memory: Conversation memory. Required.
        template: Prompt template with `{history}` and `{input}` placeholders.

    Raises:
        InvalidConfiguration: `model` or `memory` is `None`.
    """

    name = "standalone_question"

    def __init__(self, model, memory, template: str = STANDALONE_QUESTION_TEMPLATE):
        if model is None:
            raise InvalidConfiguration(f"{self.name} requires a generation model")
        if memory is None:
            raise InvalidConfiguration(f"{self.name} requires a memory")
        self._model = model
        self._memory = memory
        self._template = template

    @property
    def model(self):
        return self._model

    @property
    def memory(self):
        return self._memory

    @property
    def template(self) -> str:
        return self._template

    def apply(self, question: str) -> GenerationResult:
        with collaborator_call(self.name, "memory"):
            recalled = self._memory.load({})

        variables = dict(recalled)
        variables["input"] = question

        prompt = render(self._template, variables)
        logger.debug("%s: rendered prompt (%d chars)", self.name, len(prompt))

        with collaborator_call(self.name, "model"):
            result = self._model.generate(Prompt(prompt))

        with collaborator_call(self.name, "memory"):
            self._memory.save({"question": question}, {})

        return result
