"""Core orchestration package.

Architectural role:
    Holds the types shared by every layer (prompts, generation results, model
    contract), the error taxonomy, and the composition of workflow steps into
    a pipeline.

Composition:
    - `model_types`: `Prompt`, `Message`, `Generation`, `GenerationResult`,
      `GenerationModel`.
    - `errors`: `GenflowError` and its subclasses.
    - `engine`: `SequentialWorkflow` and the conversational RAG factory.

Determinism and side effects:
    Package import itself is deterministic and side-effect free.
"""
