"""Placeholder substitution for prompt templates.

This module is intentionally narrow: it only turns a template string plus a
variable mapping into prompt text. Deciding which variables exist (memory,
retrieval, user input) happens in the workflow steps.

Template syntax:
    Placeholders are `{name}` where `name` is a Python identifier. Any other
    brace usage (JSON examples, `{ }`, `{1}`) is left untouched, so templates
    do not need brace escaping.

Value rendering:
    - `str` values are inserted as-is.
    - Other iterables (lists, tuples, generators, lazy retriever results) are
      concatenated element by element with no separator; callers that want one
      line per element append the line separator to each element themselves.
      Each placeholder value is consumed once per render, so a one-shot
      iterator used by a repeated placeholder renders the same text each time.
    - Mappings, `bytes` and scalars are inserted via `str()`.

Failure behavior:
    A placeholder without a matching variable raises `MissingVariable`.
    Extra variables that the template does not use are ignored.

Design constraints:
    - Deterministic rendering for identical inputs.
    - No mutation of the template or the variables mapping.
    - No whitespace trimming; callers trim when they need it.
"""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from genflow.core.errors import MissingVariable


PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _render_value(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Iterable) and not isinstance(value, (bytes, bytearray, Mapping)):
        return "".join(str(item) for item in value)
    return str(value)


def render(template: str, variables: Mapping[str, Any]) -> str:
    """Render `template` by substituting every `{name}` placeholder.

    Args:
        template: Template text.
        variables: Placeholder name to value.

    Returns:
        Rendered text. A template without placeholders is returned unchanged.

    Raises:
        MissingVariable: A placeholder has no entry in `variables`.
    """

    rendered = {}

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in rendered:
            if name not in variables:
                raise MissingVariable(name)
            rendered[name] = _render_value(variables[name])
        return rendered[name]

    return PLACEHOLDER_PATTERN.sub(substitute, template)


class PromptTemplate:
    """Reusable template bound to one template string."""

    def __init__(self, template: str):
        self.template = template

    @property
    def variable_names(self) -> list[str]:
        """Placeholder names in first-occurrence order, without duplicates."""
        names = []
        for name in PLACEHOLDER_PATTERN.findall(self.template):
            if name not in names:
                names.append(name)
        return names

    def render(self, variables: Mapping[str, Any] | None = None) -> str:
        return render(self.template, variables or {})

    def __repr__(self):
        return f"PromptTemplate({self.template!r})"
