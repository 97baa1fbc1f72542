"""Image generation option records.

Two layers:
    - `ImageOptions`: portable options understood by any image backend.
    - `StabilityImageOptions`: adds the Stability AI tuning knobs.

Merge table (`STABILITY_MERGE_POLICIES`):
    - Portable fields are null-coalescing: a call may override any of them.
    - `cfg_scale`, `clip_guidance_preset`, `seed` are default-wins: they are
      operator-controlled and a per-call value is ignored.
    - `sampler`, `steps`, `style_preset` are runtime-wins: they are per-call
      tuning and are never inherited from the defaults once runtime options
      are supplied.

`style` vs `style_preset`:
    Each field has exactly one policy. The Stability request reads its style
    preset only from `style_preset`; the portable `style` is merged into its
    own field and is not forwarded to the Stability API.
"""

from dataclasses import dataclass
from typing import ClassVar, Mapping

from genflow.options.merger import MergePolicy


PORTABLE_IMAGE_MERGE_POLICIES: Mapping[str, MergePolicy] = {
    "model": MergePolicy.NULL_COALESCE,
    "n": MergePolicy.NULL_COALESCE,
    "response_format": MergePolicy.NULL_COALESCE,
    "width": MergePolicy.NULL_COALESCE,
    "height": MergePolicy.NULL_COALESCE,
    "style": MergePolicy.NULL_COALESCE,
}

STABILITY_MERGE_POLICIES: Mapping[str, MergePolicy] = {
    **PORTABLE_IMAGE_MERGE_POLICIES,
    "cfg_scale": MergePolicy.DEFAULT_WINS,
    "clip_guidance_preset": MergePolicy.DEFAULT_WINS,
    "seed": MergePolicy.DEFAULT_WINS,
    "sampler": MergePolicy.RUNTIME_WINS,
    "steps": MergePolicy.RUNTIME_WINS,
    "style_preset": MergePolicy.RUNTIME_WINS,
}


@dataclass(frozen=True)
class ImageOptions:
    """Portable image options.

    Attributes:
        model: Backend model/engine identifier.
        n: Number of images to generate.
        response_format: `b64_json` or `url`, where the backend supports both.
        width: Output width in pixels.
        height: Output height in pixels.
        style: Free-form style hint.
    """

    merge_policies: ClassVar[Mapping[str, MergePolicy]] = PORTABLE_IMAGE_MERGE_POLICIES

    model: str | None = None
    n: int | None = None
    response_format: str | None = None
    width: int | None = None
    height: int | None = None
    style: str | None = None


@dataclass(frozen=True)
class StabilityImageOptions(ImageOptions):
    """Stability AI options on top of the portable set."""

    merge_policies: ClassVar[Mapping[str, MergePolicy]] = STABILITY_MERGE_POLICIES

    cfg_scale: float | None = None
    clip_guidance_preset: str | None = None
    sampler: str | None = None
    seed: int | None = None
    steps: int | None = None
    style_preset: str | None = None
