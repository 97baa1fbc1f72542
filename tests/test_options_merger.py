"""
Tests for option merging.

Covers:
  - absent runtime options
  - null-coalescing, default-wins and runtime-wins fields
  - the style / style_preset split
  - chat options and explicit policy tables
"""
import dataclasses

import pytest

from genflow.options import (
    CHAT_MERGE_POLICIES,
    STABILITY_MERGE_POLICIES,
    ChatOptions,
    ImageOptions,
    MergePolicy,
    StabilityImageOptions,
    merge_options,
)


@pytest.fixture
def defaults():
    return StabilityImageOptions(
        model="sd-default",
        n=1,
        response_format="b64_json",
        width=512,
        height=512,
        style="photographic",
        cfg_scale=7.0,
        clip_guidance_preset="FAST_BLUE",
        sampler="K_DPM_2",
        seed=42,
        steps=30,
        style_preset="anime",
    )


@pytest.fixture
def runtime():
    return StabilityImageOptions(
        model="sd-runtime",
        n=3,
        response_format="url",
        width=1024,
        height=768,
        style="cinematic",
        cfg_scale=12.0,
        clip_guidance_preset="SLOWEST",
        sampler="K_EULER",
        seed=7,
        steps=50,
        style_preset="pixel-art",
    )


class TestAbsentRuntime:
    def test_returns_defaults_unchanged(self, defaults):
        assert merge_options(None, defaults) is defaults

    def test_runtime_wins_fields_keep_defaults_when_runtime_absent(self, defaults):
        merged = merge_options(None, defaults)
        assert merged.sampler == "K_DPM_2"
        assert merged.steps == 30
        assert merged.style_preset == "anime"


class TestStabilityPolicyTable:
    def test_table_covers_every_field(self):
        names = {f.name for f in dataclasses.fields(StabilityImageOptions)}
        assert set(STABILITY_MERGE_POLICIES) == names

    @pytest.mark.parametrize("name", ["model", "n", "response_format", "width", "height", "style"])
    def test_null_coalescing_prefers_runtime(self, name, runtime, defaults):
        assert getattr(merge_options(runtime, defaults), name) == getattr(runtime, name)

    @pytest.mark.parametrize("name", ["model", "n", "response_format", "width", "height", "style"])
    def test_null_coalescing_falls_back_to_default(self, name, defaults):
        assert getattr(merge_options(StabilityImageOptions(), defaults), name) == getattr(defaults, name)

    @pytest.mark.parametrize("name", ["cfg_scale", "clip_guidance_preset", "seed"])
    def test_default_wins_ignores_runtime(self, name, runtime, defaults):
        assert getattr(merge_options(runtime, defaults), name) == getattr(defaults, name)

    @pytest.mark.parametrize("name", ["sampler", "steps", "style_preset"])
    def test_runtime_wins_takes_runtime(self, name, runtime, defaults):
        assert getattr(merge_options(runtime, defaults), name) == getattr(runtime, name)

    @pytest.mark.parametrize("name", ["sampler", "steps", "style_preset"])
    def test_runtime_wins_does_not_fall_back(self, name, defaults):
        assert getattr(merge_options(StabilityImageOptions(), defaults), name) is None


class TestMergeBehavior:
    def test_returns_new_record_of_default_type(self, runtime, defaults):
        merged = merge_options(runtime, defaults)
        assert type(merged) is StabilityImageOptions
        assert merged is not defaults
        assert merged is not runtime

    def test_inputs_are_not_modified(self, runtime, defaults):
        before = (dataclasses.asdict(runtime), dataclasses.asdict(defaults))
        merge_options(runtime, defaults)
        assert (dataclasses.asdict(runtime), dataclasses.asdict(defaults)) == before

    def test_option_records_are_immutable(self, defaults):
        with pytest.raises(dataclasses.FrozenInstanceError):
            defaults.width = 64

    def test_portable_runtime_against_provider_defaults(self, defaults):
        merged = merge_options(ImageOptions(width=256), defaults)
        assert merged.width == 256
        assert merged.height == 512
        assert merged.seed == 42
        # portable runtime cannot set sampler/steps/style_preset
        assert merged.sampler is None
        assert merged.steps is None
        assert merged.style_preset is None

    def test_both_unset_yields_none(self):
        merged = merge_options(StabilityImageOptions(), StabilityImageOptions())
        assert merged == StabilityImageOptions()

    def test_rejects_non_dataclass_default(self):
        with pytest.raises(TypeError):
            merge_options(ImageOptions(), {"width": 1})


class TestStyleAndStylePreset:
    def test_style_does_not_feed_style_preset(self, defaults):
        merged = merge_options(StabilityImageOptions(style="cinematic"), defaults)
        assert merged.style == "cinematic"
        assert merged.style_preset is None

    def test_style_preset_is_taken_from_runtime_only(self, defaults):
        merged = merge_options(StabilityImageOptions(style_preset="origami"), defaults)
        assert merged.style_preset == "origami"
        assert merged.style == "photographic"


class TestExplicitPolicies:
    def test_chat_options_are_all_null_coalescing(self):
        assert set(CHAT_MERGE_POLICIES.values()) == {MergePolicy.NULL_COALESCE}
        defaults = ChatOptions(model="m", temperature=0.45, top_p=0.9)
        merged = merge_options(ChatOptions(temperature=0.0), defaults)
        assert merged == ChatOptions(model="m", temperature=0.0, top_p=0.9)

    def test_explicit_table_overrides_declared_table(self, runtime, defaults):
        merged = merge_options(runtime, defaults, policies={"seed": MergePolicy.RUNTIME_WINS})
        assert merged.seed == 7
        # fields missing from an explicit table fall back to null-coalescing
        assert merged.cfg_scale == 12.0
