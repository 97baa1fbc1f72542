"""Provider-specific chat backend implementing `GenerationModel`.

Architectural role:
    Turns a `Prompt` into one HTTP request against the configured provider and
    maps the reply into a `GenerationResult`.

Model invocation flow:
    `ChatModel.generate(prompt)` -> `merge_options(prompt.options, defaults)` ->
    provider branch (OpenAI-compatible / Anthropic) -> parsed candidates.

Retry behavior:
    None. Each call is attempted once with the configured timeout.

Failure handling model:
    Missing credentials raise `InvalidConfiguration` at construction. HTTP and
    payload errors (`requests.HTTPError`, `KeyError` on malformed replies)
    propagate; workflow steps wrap them as `CollaboratorFailure`.
"""

import logging

import requests

from genflow.core.errors import InvalidConfiguration
from genflow.core.model_types import Generation, GenerationResult, Prompt
from genflow.llm.provider_config import (
    ANTHROPIC_DEFAULT_MAX_TOKENS,
    ANTHROPIC_VERSION,
    DEFAULT_CHAT_OPTIONS,
    PROVIDER,
    PROVIDERS,
    REQUEST_TIMEOUT,
    SYSTEM_MESSAGE,
    load_key,
)
from genflow.options.merger import merge_options


logger = logging.getLogger(__name__)


class ChatModel:
    """Chat completion backend for OpenAI-compatible providers and Anthropic.

    Args:
        provider: Key into `PROVIDERS`.
        default_options: `ChatOptions` used when a prompt carries none.
        system_message: Instruction sent ahead of the prompt; `None` to omit.
        session: Optional `requests.Session` (shared connection pool, tests).
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        provider: str = PROVIDER,
        default_options=DEFAULT_CHAT_OPTIONS,
        system_message: str | None = SYSTEM_MESSAGE,
        session=None,
        timeout: float = REQUEST_TIMEOUT,
    ):
        config = PROVIDERS.get(provider)
        if config is None:
            raise InvalidConfiguration(f"Unknown chat provider: {provider}")

        self.provider = provider
        self.url = config["url"]
        self.default_options = default_options
        self.system_message = system_message
        self.session = session or requests.Session()
        self.timeout = timeout

        self.api_key = None
        if config["key_file"]:
            self.api_key = load_key(config["key_file"])
            if not self.api_key:
                raise InvalidConfiguration(f"{provider.upper()} API key not found")

    def _messages(self, prompt: Prompt):
        messages = []
        if self.system_message:
            messages.append({"role": "system", "content": self.system_message})
        for message in prompt.instructions:
            messages.append({"role": message.role, "content": message.text})
        return messages

    def generate(self, prompt: Prompt) -> GenerationResult:
        options = merge_options(prompt.options, self.default_options)
        messages = self._messages(prompt)

        if self.provider == "anthropic":
            return self._generate_anthropic(messages, options)
        return self._generate_openai(messages, options)

    def _generate_openai(self, messages, options) -> GenerationResult:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {**options.to_payload(), "messages": messages, "stream": False}

        response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()

        generations = [
            Generation(
                text=(choice["message"]["content"] or "").strip(),
                metadata={"finish_reason": choice.get("finish_reason"), "index": choice.get("index")},
            )
            for choice in data["choices"]
        ]
        logger.debug("%s returned %d choices", self.provider, len(generations))

        return GenerationResult(
            generations,
            metadata={"id": data.get("id"), "model": data.get("model"), "usage": data.get("usage")},
        )

    def _generate_anthropic(self, messages, options) -> GenerationResult:
        headers = {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "Content-Type": "application/json",
        }

        system_prompt = None
        anthropic_messages = []
        for msg in messages:
            if msg["role"] == "system":
                if msg["content"].strip():
                    system_prompt = msg["content"].strip()
            elif msg["role"] in ["user", "assistant"]:
                anthropic_messages.append(msg)

        payload = {
            "model": options.model,
            "max_tokens": options.max_tokens or ANTHROPIC_DEFAULT_MAX_TOKENS,
            "messages": anthropic_messages,
        }
        if system_prompt:
            payload["system"] = system_prompt
        if options.temperature is not None:
            payload["temperature"] = options.temperature
        if options.top_p is not None:
            payload["top_p"] = options.top_p

        response = self.session.post(self.url, headers=headers, json=payload, timeout=self.timeout)
        response.raise_for_status()
        data = response.json()

        text = "".join(block.get("text", "") for block in data["content"] if block.get("type") == "text")
        return GenerationResult(
            [Generation(text=text.strip(), metadata={"finish_reason": data.get("stop_reason")})],
            metadata={"id": data.get("id"), "model": data.get("model"), "usage": data.get("usage")},
        )
