"""Model option records and merge policy.

Scope:
    - `merger`: `MergePolicy` and the table-driven `merge_options`.
    - `image_options`: portable and Stability-specific image option records.
    - `chat_options`: chat option record.

All option records are frozen dataclasses. Merging always builds a new record.
"""

from genflow.options.chat_options import CHAT_MERGE_POLICIES, ChatOptions
from genflow.options.image_options import (
    STABILITY_MERGE_POLICIES,
    ImageOptions,
    StabilityImageOptions,
)
from genflow.options.merger import MergePolicy, merge_options

__all__ = [
    "CHAT_MERGE_POLICIES",
    "ChatOptions",
    "ImageOptions",
    "MergePolicy",
    "STABILITY_MERGE_POLICIES",
    "StabilityImageOptions",
    "merge_options",
]
