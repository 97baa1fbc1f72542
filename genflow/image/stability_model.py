"""Stability AI image backend implementing `GenerationModel`.

Processing flow:
    1. Merge the prompt's runtime options over the model defaults using the
       Stability merge table (see `genflow.options.image_options`).
    2. Copy prompt messages and effective options into the request body.
    3. Call the transport.
    4. Map each returned artifact to a `Generation` (Base64 payload plus
       `finish_reason` and `seed` metadata).

Field mapping is 1:1; unset options are omitted so the provider applies its
own defaults.
"""

import logging

from genflow.core.errors import InvalidConfiguration
from genflow.core.model_types import Generation, GenerationResult, Prompt
from genflow.llm.provider_config import DEFAULT_STABILITY_OPTIONS, STABILITY_ENGINE
from genflow.options.merger import merge_options


logger = logging.getLogger(__name__)


def build_generate_request(prompt: Prompt, options) -> dict:
    """Build the Stability request body from a prompt and effective options.

    The style preset is read from `options.style_preset` only.
    """
    request = {
        "text_prompts": [
            {"text": message.text, "weight": message.weight}
            if message.weight is not None
            else {"text": message.text}
            for message in prompt.instructions
        ],
        "height": options.height,
        "width": options.width,
        "cfg_scale": options.cfg_scale,
        "clip_guidance_preset": options.clip_guidance_preset,
        "sampler": options.sampler,
        "samples": options.n,
        "seed": options.seed,
        "steps": options.steps,
        "style_preset": options.style_preset,
    }
    return {key: value for key, value in request.items() if value is not None}


def convert_response(response: dict) -> GenerationResult:
    """Map a Stability response body into a `GenerationResult`."""
    generations = [
        Generation(
            b64_json=artifact.get("base64"),
            metadata={
                "finish_reason": artifact.get("finishReason"),
                "seed": artifact.get("seed"),
            },
        )
        for artifact in response.get("artifacts", [])
    ]
    return GenerationResult(generations)


class StabilityImageModel:
    """Image generation backend for the Stability AI REST API.

    Args:
        api: Transport exposing `generate_image(engine, request) -> dict`.
        default_options: `StabilityImageOptions` applied to every call.
    """

    def __init__(self, api, default_options=DEFAULT_STABILITY_OPTIONS):
        if api is None:
            raise InvalidConfiguration("StabilityImageModel requires an API client")
        if default_options is None:
            raise InvalidConfiguration("StabilityImageModel requires default options")
        self.api = api
        self.default_options = default_options

    def generate(self, prompt: Prompt) -> GenerationResult:
        options = merge_options(prompt.options, self.default_options)
        request = build_generate_request(prompt, options)
        engine = options.model or STABILITY_ENGINE

        logger.debug("Requesting %s image(s) from %s", options.n or 1, engine)
        return convert_response(self.api.generate_image(engine, request))
