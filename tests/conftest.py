"""Shared pytest fixtures."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from PIL import Image

from cloudinary_service import UploadResult
from config import AppConfig, CloudinaryConfig


@pytest.fixture
def cloud_config():
    return CloudinaryConfig(cloud_name="demo-cloud", api_key="key", api_secret="secret")


@pytest.fixture
def app_config(tmp_path, cloud_config):
    return AppConfig(
        cloudinary=cloud_config,
        environment="test",
        project_root=tmp_path,
        generated_dir=tmp_path / "generated-assets",
        catalog_path=tmp_path / "assets" / "catalog.json",
    )


@pytest.fixture
def make_image():
    """Factory writing a small real image file and returning its path."""
    def _make(directory: Path, filename: str, size=(32, 24)):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        fmt = {"jpg": "JPEG", "jpeg": "JPEG", "png": "PNG",
               "webp": "WEBP", "gif": "GIF"}[filename.rsplit(".", 1)[-1].lower()]
        Image.new("RGB", size, (102, 126, 234)).save(path, format=fmt)
        return path

    return _make


def _success(category):
    def _upload(source, name, public_id=None):
        return UploadResult(
            success=True,
            asset_id=f"{category}/{public_id}",
            public_id=f"tuneatlife/{category}/{public_id}",
            url=f"https://res.cloudinary.com/demo-cloud/image/upload/v1/tuneatlife/{category}/{public_id}.webp",
            metadata={"width": 400, "height": 400, "format": "webp", "bytes": 1234},
        )
    return _upload


@pytest.fixture
def fake_service():
    """Upload service double whose uploads succeed unless a test overrides them."""
    service = MagicMock()
    service.upload_expert_avatar.side_effect = _success("experts")
    service.upload_testimonial_avatar.side_effect = _success("testimonials")
    service.upload_feature_icon.side_effect = _success("icons")
    service.upload_feature_demo.side_effect = _success("features")
    service.upload_social_proof.side_effect = _success("social")
    service.upload_logo.side_effect = _success("logo")
    service.upload_hero.side_effect = _success("hero")
    return service
