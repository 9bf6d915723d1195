#!/usr/bin/env python3
"""
cloudinary_service.py — Upload TuneAtLife imagery to Cloudinary.

Wraps the cloudinary SDK with the brand folder layout and per-category
transform presets. upload_image() never raises for a provider failure: it
returns an UploadResult with success=False and the error message, so batch
callers can record it and move on.
"""
from __future__ import annotations

import logging
import re
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import cloudinary
import cloudinary.api
import cloudinary.uploader

from config import CloudinaryConfig

log = logging.getLogger(__name__)

DEFAULT_TAGS = ["tuneatlife", "ai-generated"]

# Incoming transformation applied at upload time, per category
UPLOAD_PRESETS: Dict[str, Dict[str, Any]] = {
    "experts": {"width": 400, "height": 400, "crop": "fill", "gravity": "face", "radius": "max"},
    "testimonials": {"width": 300, "height": 300, "crop": "fill", "gravity": "face"},
    "icons": {"width": 256, "height": 256, "crop": "pad", "background": "transparent"},
    "features": {"width": 800, "height": 600, "crop": "fill"},
    "social": {"width": 1200, "height": 800, "crop": "fill"},
    "logo": {"width": 800, "height": 200, "crop": "fit", "background": "transparent"},
    "logo_icon": {"width": 512, "height": 512, "crop": "pad", "background": "transparent"},
    "hero": {"width": 1920, "height": 1080, "crop": "fill"},
}


@dataclass
class UploadResult:
    success: bool
    asset_id: str = ""
    public_id: str = ""
    url: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def slugify(name: str) -> str:
    return re.sub(r"-+", "-", re.sub(r"[^a-z0-9]", "-", name.lower())).strip("-")


class CloudinaryUploadService:
    def __init__(self, config: CloudinaryConfig, uploader=None, api=None):
        self.config = config
        if uploader is None or api is None:
            cloudinary.config(
                cloud_name=config.cloud_name,
                api_key=config.api_key,
                api_secret=config.api_secret,
                secure=True,
            )
        self.uploader = uploader if uploader is not None else cloudinary.uploader
        self.api = api if api is not None else cloudinary.api

    def folder_for(self, category: str) -> str:
        return f"{self.config.folder}/{category}" if self.config.folder else category

    def asset_id_for(self, public_id: str) -> str:
        """Strip the account folder so the id matches catalog entries."""
        prefix = f"{self.config.folder}/" if self.config.folder else ""
        if prefix and public_id.startswith(prefix):
            return public_id[len(prefix):]
        return public_id

    def upload_image(self, source: str, category: str, public_id: str,
                     tags: Optional[List[str]] = None,
                     transformation: Optional[Dict[str, Any]] = None) -> UploadResult:
        """Upload one file path, URL or data URI. Overwrites an existing public id."""
        options = {
            "folder": self.folder_for(category),
            "public_id": public_id,
            "tags": tags or list(DEFAULT_TAGS),
            "resource_type": "image",
            "format": "webp",
            "quality": "auto",
            "overwrite": True,
            "transformation": [
                {"quality": "auto", "fetch_format": "webp"},
                *([transformation] if transformation else []),
            ],
            "flags": "progressive",
            "context": {
                "source": "gemini-ai",
                "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
                "platform": "tuneatlife",
            },
        }
        try:
            result = self.uploader.upload(source, **options)
        except Exception as e:
            log.error("Cloudinary upload failed for %s/%s: %s", category, public_id, e)
            return UploadResult(success=False, public_id=public_id, error=str(e))

        stored_id = result.get("public_id", f"{options['folder']}/{public_id}")
        return UploadResult(
            success=True,
            asset_id=self.asset_id_for(stored_id),
            public_id=stored_id,
            url=result.get("secure_url", ""),
            metadata={
                "width": result.get("width"),
                "height": result.get("height"),
                "format": result.get("format"),
                "bytes": result.get("bytes"),
                "created": result.get("created_at"),
            },
        )

    # -- Category wrappers --------------------------------------------------

    def upload_preset(self, source: str, category: str, public_id: str,
                      tags: Optional[List[str]] = None) -> UploadResult:
        return self.upload_image(source, category, public_id,
                                 tags=tags, transformation=UPLOAD_PRESETS[category])

    def upload_expert_avatar(self, source: str, expert_name: str,
                             public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(
            source, "experts", public_id or f"{slugify(expert_name)}-avatar",
            tags=["expert", "avatar", "ai-generated", slugify(expert_name)])

    def upload_testimonial_avatar(self, source: str, person_name: str,
                                  public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(
            source, "testimonials", public_id or f"{slugify(person_name)}-testimonial",
            tags=["testimonial", "avatar", "ai-generated", slugify(person_name)])

    def upload_feature_icon(self, source: str, icon_name: str,
                            public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(source, "icons", public_id or f"{slugify(icon_name)}-icon",
                                  tags=["icon", "feature", "ai-generated", icon_name])

    def upload_feature_demo(self, source: str, feature_name: str,
                            public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(source, "features", public_id or f"{slugify(feature_name)}-demo",
                                  tags=["feature", "demo", "ai-generated", feature_name])

    def upload_social_proof(self, source: str, proof_type: str,
                            public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(source, "social",
                                  public_id or f"{slugify(proof_type)}-social-proof",
                                  tags=["social-proof", "graphic", "ai-generated", proof_type])

    def upload_logo(self, source: str, variation: str,
                    public_id: Optional[str] = None) -> UploadResult:
        # Square marks (app icon, favicon) are padded; wordmarks keep their aspect
        square = variation in ("icon", "favicon")
        preset = UPLOAD_PRESETS["logo_icon" if square else "logo"]
        return self.upload_image(source, "logo", public_id or f"tuneatlife-logo-{variation}",
                                 tags=["logo", "branding", "ai-generated", variation],
                                 transformation=preset)

    def upload_hero(self, source: str, hero_name: str,
                    public_id: Optional[str] = None) -> UploadResult:
        return self.upload_preset(source, "hero", public_id or f"{slugify(hero_name)}-hero",
                                  tags=["hero", "background", "ai-generated", hero_name])

    # -- Admin API ----------------------------------------------------------

    def ping(self) -> Dict[str, Any]:
        return self.api.ping()

    def usage(self) -> Dict[str, Any]:
        return self.api.usage()

    def create_folder(self, path: str) -> Dict[str, Any]:
        return self.api.create_folder(path)

    def destroy(self, public_id: str) -> Dict[str, Any]:
        return self.uploader.destroy(public_id)
