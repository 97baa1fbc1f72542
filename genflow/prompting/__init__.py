"""Prompting package.

This package contains deterministic prompt-rendering helpers used by workflow
steps. It does not perform retrieval, memory access, or model invocation.
"""

from genflow.prompting.template import PromptTemplate, render

__all__ = ["PromptTemplate", "render"]
