#!/usr/bin/env python3
"""
transforms.py — Encode image transform options into Cloudinary URL segments.

The encoder emits tokens in a fixed order so that the same options always
produce the same segment string; CDN cache keys and golden URLs depend on it.
Values are not validated. Whatever the provider rejects, it rejects.

    encode(TransformOptions(width=80, height=80, crop="thumb"))
    -> "w_80,h_80,c_thumb,q_auto,f_webp,dpr_auto"
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

AUTO = "auto"
DEFAULT_CROP = "fill"
DEFAULT_FORMAT = "webp"
DEFAULT_GRAVITY = "center"
LAYER_APPLY = "fl_layer_apply"

CROP_MODES = ("fill", "fit", "thumb", "pad")
GRAVITIES = ("center", "face")


@dataclass(frozen=True)
class TransformOptions:
    width: Union[int, str] = AUTO
    height: Union[int, str] = AUTO
    crop: str = DEFAULT_CROP
    quality: Union[int, str] = AUTO
    format: str = DEFAULT_FORMAT
    dpr: Union[float, str] = AUTO
    gravity: str = DEFAULT_GRAVITY
    flags: str = ""
    radius: Optional[Union[int, str]] = None
    folder: Optional[str] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "TransformOptions":
        """Build options from a plain dict. Unknown keys and None values are dropped."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known and v is not None})

    def merged(self, **overrides: Any) -> "TransformOptions":
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


OptionsLike = Union[TransformOptions, Mapping[str, Any], None]


def as_options(options: OptionsLike) -> TransformOptions:
    if options is None:
        return TransformOptions()
    if isinstance(options, TransformOptions):
        return options
    return TransformOptions.from_mapping(options)


def encode(options: OptionsLike = None) -> str:
    opts = as_options(options)
    tokens = [
        f"w_{opts.width}",
        f"h_{opts.height}",
        f"c_{opts.crop}",
        f"q_{opts.quality}",
        f"f_{opts.format}",
        f"dpr_{opts.dpr}",
    ]
    if opts.gravity != DEFAULT_GRAVITY:
        tokens.append(f"g_{opts.gravity}")
    if opts.flags:
        tokens.append(f"fl_{opts.flags}")
    if opts.radius is not None and opts.radius != "":
        tokens.append(f"r_{opts.radius}")
    return ",".join(tokens)


def layer_id(public_id: str) -> str:
    """Overlay ids use ':' where the stored id has folder slashes."""
    return public_id.strip("/").replace("/", ":")


def encode_layer(overlay: str, opacity: Union[int, str] = 50) -> str:
    return f"l_{layer_id(overlay)},o_{opacity},{LAYER_APPLY}"


def encode_gradient(descriptor: str) -> str:
    return f"l_gradient:{descriptor},{LAYER_APPLY}"
