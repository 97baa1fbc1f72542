"""Provider/runtime configuration for the chat and image backends.

Architectural role:
    Centralizes model/provider selection, endpoint maps, default options and
    credential lookup for `genflow.llm.client` and `genflow.image`.

Determinism:
    Values are resolved from the process environment (plus `.env`, via
    python-dotenv) at import time. `load_key` reads key material at call time.

Failure behavior:
    Missing key material is represented as `None`; backends turn that into
    `InvalidConfiguration` when they need a key.
"""

import os

from dotenv import load_dotenv

from genflow.options.chat_options import ChatOptions
from genflow.options.image_options import StabilityImageOptions

load_dotenv()


# Primary chat routing controls.
PROVIDER = os.getenv("PROVIDER", "local")
MODEL_NAME = os.getenv("MODEL_NAME", "qwen2.5:3b")

# Seconds per HTTP call; backends never retry.
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "120"))

# OpenAI-compatible and provider-specific endpoint map.
PROVIDERS = {

    "local": {
        "url": "http://127.0.0.1:8080/v1/chat/completions",
        "key_file": None
    },

    "openai": {
        "url": "https://api.openai.com/v1/chat/completions",
        "key_file": "config/openai.key"
    },

    "groq": {
        "url": "https://api.groq.com/openai/v1/chat/completions",
        "key_file": "config/groq.key"
    },

    "together": {
        "url": "https://api.together.xyz/v1/chat/completions",
        "key_file": "config/together.key"
    },

    "openrouter": {
        "url": "https://openrouter.ai/api/v1/chat/completions",
        "key_file": "config/openrouter.key"
    },

    "mistral": {
        "url": "https://api.mistral.ai/v1/chat/completions",
        "key_file": "config/mistral.key"
    },

    "anthropic": {
        "url": "https://api.anthropic.com/v1/messages",
        "key_file": "config/anthropic.key"
    },

}

ANTHROPIC_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MAX_TOKENS = 1024


# System instruction prepended to every chat request.
SYSTEM_MESSAGE = (
    "You are a helpful assistant.\n"
    "Answer precisely, clearly and without repetition.\n"
)

DEFAULT_CHAT_OPTIONS = ChatOptions(
    model=MODEL_NAME,
    temperature=0.45,
    top_p=0.9,
    presence_penalty=0.4,
    frequency_penalty=0.5,
)


# Image generation settings consumed by `genflow.image`.
STABILITY_API_HOST = os.getenv("STABILITY_API_HOST", "https://api.stability.ai")
STABILITY_ENGINE = os.getenv("STABILITY_ENGINE", "stable-diffusion-v1-6")
STABILITY_KEY_FILE = "config/stability.key"

DEFAULT_STABILITY_OPTIONS = StabilityImageOptions(
    model=STABILITY_ENGINE,
    n=1,
    width=512,
    height=512,
    cfg_scale=7.0,
    steps=30,
)


def load_key(path):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/openai.key` -> `OPENAI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip()
