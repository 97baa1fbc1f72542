"""Table-driven merge of runtime options over default options.

Architectural role:
    Every backend resolves the options it sends from two records: the defaults
    it was constructed with and the (optional) runtime options attached to a
    `Prompt`. This module owns that resolution so the rule for each field is
    declared once, as data, instead of being spelled out per backend.

Policies:
    - `NULL_COALESCE`: runtime value when not `None`, else default value.
    - `DEFAULT_WINS`: default value, runtime value ignored.
    - `RUNTIME_WINS`: runtime value, even when it is `None`.

Determinism:
    Pure and total. No I/O, no mutation of either input.
"""

import dataclasses
import logging
from enum import Enum
from typing import Mapping


logger = logging.getLogger(__name__)


class MergePolicy(str, Enum):
    """How a single option field is resolved during a merge."""

    NULL_COALESCE = "null_coalesce"
    DEFAULT_WINS = "default_wins"
    RUNTIME_WINS = "runtime_wins"


def resolve_field(policy: MergePolicy, runtime_value, default_value):
    """Apply one policy to one pair of values."""
    if policy is MergePolicy.DEFAULT_WINS:
        return default_value
    if policy is MergePolicy.RUNTIME_WINS:
        return runtime_value
    return runtime_value if runtime_value is not None else default_value


def merge_options(runtime, default, policies: Mapping[str, MergePolicy] | None = None):
    """Resolve effective options from runtime and default option records.

    Args:
        runtime: Runtime option record or `None`. May be a less specific record
            than `default` (for example portable `ImageOptions` against a
            `StabilityImageOptions` default); fields it does not define count
            as unset.
        default: Default option record. Must be a dataclass instance.
        policies: Field name to `MergePolicy`. When omitted, the table declared
            on the default record's class (`merge_policies`) is used. Fields
            absent from the table fall back to `NULL_COALESCE`.

    Returns:
        `default` itself when `runtime` is `None`, otherwise a new record of
        the same type as `default`.

    Edge cases:
        - Both values unset yields `None` for that field, never an error.
        - `RUNTIME_WINS` fields come back `None` when runtime left them unset,
          even if the default has a value.
    """
    if runtime is None:
        return default

    if not dataclasses.is_dataclass(default) or isinstance(default, type):
        raise TypeError(f"Default options must be a dataclass instance, got {type(default).__name__}")

    if policies is None:
        policies = getattr(default, "merge_policies", None) or {}

    resolved = {}
    for option_field in dataclasses.fields(default):
        name = option_field.name
        policy = policies.get(name, MergePolicy.NULL_COALESCE)
        resolved[name] = resolve_field(
            policy,
            getattr(runtime, name, None),
            getattr(default, name),
        )

    logger.debug("Merged %s options over %s defaults", type(runtime).__name__, type(default).__name__)
    return type(default)(**resolved)
