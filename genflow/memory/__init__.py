"""Memory subsystem package.

Architectural role:
    - `base`: the `Memory` contract consumed by workflow steps.
    - `conversation_buffer`: thread-safe short-term conversation buffer that
      renders a `history` transcript.

Workflow steps depend only on the contract. Which keys a step loads and saves
is part of the step's behavior; how entries are stored is the memory's.
"""

from genflow.memory.base import Memory
from genflow.memory.conversation_buffer import ConversationBufferMemory

__all__ = ["ConversationBufferMemory", "Memory"]
