"""genflow interface adapter package.

Architectural role:
- Defines the terminal interaction boundary (`cli`).
- Delegates all orchestration to `genflow.core.engine`.
"""
