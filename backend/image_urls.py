#!/usr/bin/env python3
"""
image_urls.py — Build deliverable Cloudinary URLs from catalog references.

URL layout:
    {base_url}/{cloud_name}/image/upload/{transforms}/{folder}/{asset_id}

Pure string work over a CloudinaryConfig and a Catalog. Nothing here talks to
the network, so a wrong cloud name just produces URLs that 404.
"""
from __future__ import annotations

from typing import Dict, Optional, Union

from catalog import Catalog
from config import CloudinaryConfig
from transforms import (
    OptionsLike,
    TransformOptions,
    as_options,
    encode,
    encode_gradient,
    encode_layer,
)

# Breakpoint ladder: name -> (width, height). Each also gets a 2x variant,
# large included, so the set has eight keys. The old front-end helper stopped
# at desktop2x and had no large2x (3840x2880).
BREAKPOINTS = {
    "mobile": (400, 300),
    "tablet": (768, 576),
    "desktop": (1200, 900),
    "large": (1920, 1440),
}

# Sizes recorded for every uploaded avatar in upload reports
AVATAR_VARIANTS = {
    "avatar_sm": {"width": 64, "height": 64, "crop": "thumb", "gravity": "face", "radius": "max"},
    "avatar_md": {"width": 128, "height": 128, "crop": "thumb", "gravity": "face", "radius": "max"},
    "avatar_lg": {"width": 200, "height": 200, "crop": "thumb", "gravity": "face", "radius": "max"},
    "card_sm": {"width": 150, "height": 150, "crop": "fill", "gravity": "face"},
    "card_md": {"width": 300, "height": 300, "crop": "fill", "gravity": "face"},
    "card_lg": {"width": 400, "height": 400, "crop": "fill", "gravity": "face"},
    "hero": {"width": 600, "height": 400, "crop": "fill", "gravity": "face"},
}


class ImageUrlBuilder:
    def __init__(self, config: CloudinaryConfig, catalog: Optional[Catalog] = None):
        self.config = config
        self.catalog = catalog if catalog is not None else Catalog.default()

    @property
    def upload_root(self) -> str:
        return f"{self.config.base_url.rstrip('/')}/{self.config.cloud_name}/image/upload"

    def _asset_path(self, asset_id: str, folder: Optional[str]) -> str:
        folder = self.config.folder if folder is None else folder
        asset_id = asset_id.lstrip("/")
        return f"{folder.strip('/')}/{asset_id}" if folder else asset_id

    def optimized_url(self, asset_id: str, options: OptionsLike = None) -> str:
        opts = as_options(options)
        return f"{self.upload_root}/{encode(opts)}/{self._asset_path(asset_id, opts.folder)}"

    def resolve(self, category: str, name: str, options: OptionsLike = None) -> str:
        asset_id = self.catalog.lookup(category, name)
        if not asset_id:
            return ""
        return self.optimized_url(asset_id, options)

    def avatar_url(self, asset_id: str, size: int = 150) -> str:
        return self.optimized_url(asset_id, TransformOptions(
            width=size, height=size, crop="thumb", gravity="face", flags="face_center",
        ))

    def hero_url(self, asset_id: str, width: int = 1920, height: int = 1080,
                 overlay: Optional[str] = None, overlay_opacity: Union[int, str] = 50,
                 gradient: Optional[str] = None) -> str:
        """Hero background with optional overlay and gradient layers.

        Groups are slash-separated in a fixed order: base transform, overlay,
        gradient. Each layer group carries its own fl_layer_apply.
        """
        groups = [f"w_{width},h_{height},c_fill,q_auto,f_webp"]
        if overlay:
            groups.append(encode_layer(overlay, overlay_opacity))
        if gradient:
            groups.append(encode_gradient(gradient))
        return f"{self.upload_root}/{'/'.join(groups)}/{self._asset_path(asset_id, None)}"

    def responsive_set(self, asset_id: str, options: OptionsLike = None) -> Dict[str, str]:
        base = as_options(options)
        urls = {}
        for name, (width, height) in BREAKPOINTS.items():
            urls[name] = self.optimized_url(asset_id, base.merged(width=width, height=height))
        for name, (width, height) in BREAKPOINTS.items():
            urls[f"{name}2x"] = self.optimized_url(
                asset_id, base.merged(width=width * 2, height=height * 2))
        return urls

    def avatar_variants(self, asset_id: str) -> Dict[str, str]:
        return {name: self.optimized_url(asset_id, opts)
                for name, opts in AVATAR_VARIANTS.items()}
