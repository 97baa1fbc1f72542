"""Shared plumbing for workflow steps.

Error handling strategy:
    Collaborator calls run inside `collaborator_call`, which re-raises any
    non-genflow exception as `CollaboratorFailure` tagged with the step and
    collaborator names. Nothing is retried and nothing is defaulted.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager

from genflow.core.errors import CollaboratorFailure, GenflowError


logger = logging.getLogger(__name__)


@contextmanager
def collaborator_call(step: str, collaborator: str):
    """Wrap a collaborator call so failures carry the step identity."""
    try:
        yield
    except GenflowError:
        raise
    except Exception as err:
        logger.warning("%s: %s call failed: %s", step, collaborator, err)
        raise CollaboratorFailure(step, collaborator, err) from err


class WorkflowStep(ABC):
    """Base class giving steps a name and call syntax."""

    name = "workflow_step"

    @abstractmethod
    def apply(self, question: str):
        """Run the step on one question and return its `GenerationResult`."""

    def __call__(self, question: str):
        return self.apply(question)
