"""Modality-neutral request/response types and the generation model contract.

Architectural role:
    Workflow steps only ever see these types. Concrete backends (`genflow.llm` and `genflow.image`)
    translate them to and from provider payloads.

Type summary:
    - `Message`: one instruction segment with an optional weight.
    - `Prompt`: ordered instructions plus optional runtime options.
    - `Generation`: one candidate (text for chat, image payload for image).
    - `GenerationResult`: candidates plus response-level metadata.
    - `GenerationModel`: structural protocol with a single `generate` method.
"""

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Message:
    """Single prompt segment.

    Attributes:
        text: Instruction text.
        weight: Provider-specific emphasis (image backends); `None` when unset.
        role: Chat role label used by chat backends.
    """

    text: str
    weight: float | None = None
    role: str = "user"


class Prompt:
    """Ordered prompt instructions plus optional runtime options.

    A bare string is accepted and wrapped into a single user `Message`.
    """

    def __init__(self, instructions, options=None):
        if isinstance(instructions, str):
            instructions = [Message(instructions)]
        elif isinstance(instructions, Message):
            instructions = [instructions]
        self.instructions = tuple(instructions)
        self.options = options

    @property
    def contents(self) -> str:
        """Instruction texts joined by newlines."""
        return "\n".join(message.text for message in self.instructions)

    def __eq__(self, other):
        if not isinstance(other, Prompt):
            return NotImplemented
        return self.instructions == other.instructions and self.options == other.options

    def __repr__(self):
        return f"Prompt(instructions={self.instructions!r}, options={self.options!r})"


@dataclass(frozen=True)
class Generation:
    """One generated candidate.

    Chat backends fill `text`; image backends fill `b64_json` or `url`.
    `metadata` carries per-candidate values such as `finish_reason` and `seed`.
    """

    text: str | None = None
    b64_json: str | None = None
    url: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class GenerationResult:
    """Generated candidates plus response-level metadata (ids, model, usage)."""

    generations: tuple[Generation, ...]
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "generations", tuple(self.generations))

    @property
    def first(self) -> Generation:
        """Return the first candidate.

        Raises:
            ValueError: The backend returned no candidates.
        """
        if not self.generations:
            raise ValueError("Generation result contains no candidates")
        return self.generations[0]


@runtime_checkable
class GenerationModel(Protocol):
    """Backend that turns a normalized prompt into a normalized result."""

    def generate(self, prompt: Prompt) -> GenerationResult:
        """Run one inference call. Transport/provider errors propagate."""
        ...
