"""Image generation adapter package.

Scope:
    - `stability_model`: `StabilityImageModel`, the `GenerationModel` that merges
      options and maps requests/responses.
    - `client`: `StabilityApiClient`, the HTTP transport.

Non-goals:
    - No Base64 decoding and no file output.
    - No polling; the Stability text-to-image endpoint is synchronous.
"""
