"""Tests for the Cloudinary URL builder."""

import pytest

from catalog import Catalog
from config import CloudinaryConfig
from image_urls import BREAKPOINTS, ImageUrlBuilder
from transforms import TransformOptions

ROOT = "https://res.cloudinary.com/dgel7rbdd/image/upload"


@pytest.fixture
def urls():
    return ImageUrlBuilder(CloudinaryConfig(), Catalog.default())


class TestResolve:
    def test_golden_expert_url(self, urls):
        url = urls.resolve("experts", "alexRivera", {
            "width": 80, "height": 80, "crop": "thumb", "quality": "auto", "format": "webp",
        })
        assert url == (f"{ROOT}/w_80,h_80,c_thumb,q_auto,f_webp,dpr_auto/"
                       "tuneatlife/experts/alex-rivera-fitness-coach")

    def test_miss_returns_empty_string(self, urls):
        assert urls.resolve("experts", "nobody", {"width": 80}) == ""
        assert urls.resolve("banners", "main") == ""

    def test_folder_override(self, urls):
        url = urls.optimized_url("misc/pic", TransformOptions(folder=""))
        assert url.endswith(",dpr_auto/misc/pic")
        url = urls.optimized_url("misc/pic", {"folder": "staging"})
        assert url.endswith(",dpr_auto/staging/misc/pic")

    def test_account_not_validated(self):
        urls = ImageUrlBuilder(CloudinaryConfig(cloud_name=""), Catalog.default())
        assert urls.resolve("logo", "main").startswith("https://res.cloudinary.com//image/upload/")


class TestAvatar:
    @pytest.mark.parametrize("asset_id", ["experts/x", "", "weird id/with spaces", "a,b"])
    def test_avatar_tokens(self, urls, asset_id):
        url = urls.avatar_url(asset_id, 150)
        for token in ("w_150", "h_150", "g_face", "c_thumb", "fl_face_center"):
            assert token in url

    def test_default_size(self, urls):
        assert "w_150,h_150,c_thumb" in urls.avatar_url("experts/x")


class TestHero:
    def test_base_only(self, urls):
        assert urls.hero_url("hero/main") == f"{ROOT}/w_1920,h_1080,c_fill,q_auto,f_webp/tuneatlife/hero/main"

    def test_overlay_then_gradient(self, urls):
        url = urls.hero_url("hero/main", width=1200, height=800,
                            overlay="logo/tuneatlife-icon", overlay_opacity=40, gradient="purple")
        assert url == (f"{ROOT}/w_1200,h_800,c_fill,q_auto,f_webp/"
                       "l_logo:tuneatlife-icon,o_40,fl_layer_apply/"
                       "l_gradient:purple,fl_layer_apply/tuneatlife/hero/main")

    def test_gradient_without_overlay(self, urls):
        url = urls.hero_url("hero/main", gradient="dark")
        assert "l_gradient:dark,fl_layer_apply" in url
        assert "o_" not in url


class TestResponsiveSet:
    def test_ladder_and_doubles(self, urls):
        result = urls.responsive_set("hero/main", {"crop": "fit", "width": 5})
        assert set(result) == set(BREAKPOINTS) | {f"{name}2x" for name in BREAKPOINTS}
        assert "w_400,h_300,c_fit" in result["mobile"]
        assert "w_800,h_600,c_fit" in result["mobile2x"]
        assert "w_3840,h_2880" in result["large2x"]

    def test_deterministic(self, urls):
        assert urls.responsive_set("hero/main") == urls.responsive_set("hero/main")


class TestAvatarVariants:
    def test_sizes(self, urls):
        variants = urls.avatar_variants("experts/alex-rivera-fitness-coach")
        assert "w_64,h_64,c_thumb" in variants["avatar_sm"]
        assert variants["avatar_lg"].split("/")[-4].endswith("g_face,r_max")
        assert "w_600,h_400,c_fill" in variants["hero"]
