"""Error taxonomy for the orchestration layer.

Propagation policy:
    Nothing in the core retries or recovers. Every failure surfaces to the
    immediate caller of `apply`, `merge_options` or `render`.

    - `InvalidConfiguration`: a mandatory collaborator is missing or a
      configuration value is unusable. Raised at construction time.
    - `MissingVariable`: a template placeholder has no matching variable.
    - `CollaboratorFailure`: a model, retriever or memory call raised. The
      original exception is chained as `__cause__`.
"""


class GenflowError(Exception):
    """Base class for all errors raised by genflow."""


class InvalidConfiguration(GenflowError, ValueError):
    """Raised when a component is built without a mandatory collaborator."""


class MissingVariable(GenflowError, KeyError):
    """Raised when a template placeholder cannot be resolved.

    Attributes:
        name: Placeholder name without braces.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"No value supplied for template variable '{self.name}'"


class CollaboratorFailure(GenflowError, RuntimeError):
    """Raised when a collaborator call made by a workflow step fails.

    Attributes:
        step: Name of the step that issued the call.
        collaborator: Which collaborator failed (`model`, `retriever`, `memory`).
    """

    def __init__(self, step: str, collaborator: str, cause: BaseException):
        self.step = step
        self.collaborator = collaborator
        super().__init__(
            f"{step}: {collaborator} call failed: {type(cause).__name__}: {cause}"
        )
