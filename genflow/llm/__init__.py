"""LLM access package.

Architectural role:
    Provides provider configuration and the chat backend used by workflow steps
    as their `GenerationModel`.

Module split:
    - `provider_config`: environment-driven provider, model and default options.
    - `client`: `ChatModel`, provider-specific HTTP transport and reply parsing.
"""
