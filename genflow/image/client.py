"""Stability AI HTTP transport.

Processing flow:
    1. Resolve the API key from `STABILITY_API_KEY` or the configured key file.
    2. POST the JSON request body to `/v1/generation/{engine}/text-to-image`.
    3. Return the parsed JSON body or raise on non-200 status.

Base64:
    Artifacts are returned as Base64 strings untouched; nothing is decoded here.

Error handling strategy:
    - Missing API key -> `InvalidConfiguration`
    - Non-200 HTTP response -> `RuntimeError` carrying the provider body.

Security considerations:
    Exceptions may include upstream provider response bodies.
"""

import logging

import requests

from genflow.core.errors import InvalidConfiguration
from genflow.llm.provider_config import (
    REQUEST_TIMEOUT,
    STABILITY_API_HOST,
    STABILITY_KEY_FILE,
    load_key,
)


logger = logging.getLogger(__name__)


class StabilityApiClient:
    """Single-shot text-to-image transport."""

    def __init__(self, api_key=None, api_host=STABILITY_API_HOST, session=None, timeout=REQUEST_TIMEOUT):
        self.api_key = api_key or load_key(STABILITY_KEY_FILE)
        if not self.api_key:
            raise InvalidConfiguration(f"Stability API key missing (env STABILITY_API_KEY or {STABILITY_KEY_FILE})")
        self.api_host = api_host.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    def generate_image(self, engine: str, request: dict) -> dict:
        """Submit one text-to-image request.

        Args:
            engine: Engine id, for example `stable-diffusion-v1-6`.
            request: Request body built by `build_generate_request`.

        Returns:
            Parsed JSON response (`{"artifacts": [...]}`).
        """
        url = f"{self.api_host}/v1/generation/{engine}/text-to-image"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        response = self.session.post(url, json=request, headers=headers, timeout=self.timeout)

        if response.status_code != 200:
            raise RuntimeError(
                f"Image request failed with status {response.status_code}: {response.text}"
            )

        logger.debug("Stability engine %s responded", engine)
        return response.json()
