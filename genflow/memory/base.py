"""Memory contract used by workflow steps.

Call semantics:
    - `load(query)` returns the variables a step merges into its prompt
      variables. The query is a mapping so implementations can scope lookups;
      workflow steps pass an empty mapping.
    - `save(inputs, outputs)` records one exchange. Either side may be empty.

Isolation:
    The orchestration core does no locking. An implementation shared across
    concurrent conversations must isolate or serialize per conversation itself.
"""

from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class Memory(Protocol):
    def load(self, query: Mapping[str, Any]) -> Mapping[str, Any]:
        ...

    def save(self, inputs: Mapping[str, Any], outputs: Mapping[str, Any]) -> None:
        ...
