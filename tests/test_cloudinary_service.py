"""Tests for the Cloudinary upload service, with the SDK swapped for mocks."""

from unittest.mock import MagicMock

import pytest

from cloudinary_service import UPLOAD_PRESETS, CloudinaryUploadService, slugify


@pytest.fixture
def uploader():
    mock = MagicMock()
    mock.upload.return_value = {
        "public_id": "tuneatlife/experts/alex-rivera-fitness-coach",
        "secure_url": "https://res.cloudinary.com/demo-cloud/image/upload/v1/tuneatlife/experts/alex-rivera-fitness-coach.webp",
        "width": 400,
        "height": 400,
        "format": "webp",
        "bytes": 20480,
        "created_at": "2024-01-01T00:00:00Z",
    }
    return mock


@pytest.fixture
def service(cloud_config, uploader):
    return CloudinaryUploadService(cloud_config, uploader=uploader, api=MagicMock())


class TestSlugify:
    def test_names(self):
        assert slugify("Dr. Maya Chen") == "dr-maya-chen"
        assert slugify("  Coach Alex Rivera!! ") == "coach-alex-rivera"


class TestUploadImage:
    def test_success_maps_result(self, service, uploader):
        result = service.upload_expert_avatar("a.png", "Coach Alex Rivera",
                                              public_id="alex-rivera-fitness-coach")
        assert result.success
        assert result.asset_id == "experts/alex-rivera-fitness-coach"
        assert result.public_id == "tuneatlife/experts/alex-rivera-fitness-coach"
        assert result.metadata["width"] == 400
        assert result.error is None

        args, kwargs = uploader.upload.call_args
        assert args == ("a.png",)
        assert kwargs["folder"] == "tuneatlife/experts"
        assert kwargs["public_id"] == "alex-rivera-fitness-coach"
        assert kwargs["overwrite"] is True
        assert kwargs["transformation"][-1] == UPLOAD_PRESETS["experts"]
        assert "coach-alex-rivera" in kwargs["tags"]

    def test_default_public_id(self, service, uploader):
        service.upload_testimonial_avatar("s.png", "Sarah M.")
        assert uploader.upload.call_args.kwargs["public_id"] == "sarah-m-testimonial"
        assert uploader.upload.call_args.kwargs["transformation"][-1] == UPLOAD_PRESETS["testimonials"]

    def test_provider_error_becomes_failed_result(self, service, uploader):
        uploader.upload.side_effect = RuntimeError("Invalid image file")
        result = service.upload_image("bad.png", "experts", "broken")
        assert not result.success
        assert result.error == "Invalid image file"
        assert result.asset_id == ""

    def test_logo_icon_uses_icon_preset(self, service, uploader):
        service.upload_logo("icon.png", "icon")
        kwargs = uploader.upload.call_args.kwargs
        assert kwargs["public_id"] == "tuneatlife-logo-icon"
        assert kwargs["transformation"][-1] == UPLOAD_PRESETS["logo_icon"]

        service.upload_logo("main.png", "main")
        assert uploader.upload.call_args.kwargs["transformation"][-1] == UPLOAD_PRESETS["logo"]

    def test_category_wrappers(self, service, uploader):
        service.upload_feature_icon("i.png", "ai-brain")
        assert uploader.upload.call_args.kwargs["public_id"] == "ai-brain-icon"
        service.upload_feature_demo("f.png", "ai-chat")
        assert uploader.upload.call_args.kwargs["folder"] == "tuneatlife/features"
        service.upload_social_proof("s.png", "ratings")
        assert uploader.upload.call_args.kwargs["public_id"] == "ratings-social-proof"


class TestAdmin:
    def test_passthrough(self, cloud_config, uploader):
        api = MagicMock()
        api.ping.return_value = {"status": "ok"}
        service = CloudinaryUploadService(cloud_config, uploader=uploader, api=api)
        assert service.ping() == {"status": "ok"}
        service.create_folder("tuneatlife/hero")
        api.create_folder.assert_called_once_with("tuneatlife/hero")
        service.destroy("tuneatlife/test/connection-test")
        uploader.destroy.assert_called_once_with("tuneatlife/test/connection-test")

    def test_asset_id_outside_folder_kept(self, service):
        assert service.asset_id_for("other/thing") == "other/thing"


class TestBrandAssetWrappers:
    def test_explicit_public_ids(self, service, uploader):
        service.upload_feature_icon("i.png", "sleep", public_id="moon-sleep")
        assert uploader.upload.call_args.kwargs["public_id"] == "moon-sleep"
        assert uploader.upload.call_args.kwargs["transformation"][-1] == UPLOAD_PRESETS["icons"]
        service.upload_social_proof("s.png", "ratings", public_id="five-star-ratings")
        assert uploader.upload.call_args.kwargs["public_id"] == "five-star-ratings"

    def test_favicon_is_square(self, service, uploader):
        service.upload_logo("f.png", "favicon", public_id="tuneatlife-favicon")
        kwargs = uploader.upload.call_args.kwargs
        assert kwargs["public_id"] == "tuneatlife-favicon"
        assert kwargs["transformation"][-1] == UPLOAD_PRESETS["logo_icon"]

    def test_hero_preset(self, service, uploader):
        service.upload_hero("h.jpg", "main", public_id="wellness-transformation-hero")
        kwargs = uploader.upload.call_args.kwargs
        assert kwargs["folder"] == "tuneatlife/hero"
        assert kwargs["transformation"][-1] == UPLOAD_PRESETS["hero"]
        service.upload_hero("h.jpg", "Summer Campaign")
        assert uploader.upload.call_args.kwargs["public_id"] == "summer-campaign-hero"
