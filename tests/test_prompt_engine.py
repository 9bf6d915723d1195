"""Tests for brand prompt templates and Gemini refinement."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from config import BrandGuidelines
from expert_profiles import EXPERT_PROFILES
from prompt_engine import ICON_PROMPTS, MODEL_ID, PromptEngine, expert_brief


@pytest.fixture
def brand():
    return BrandGuidelines()


def gemini_client(text="A refined prompt."):
    client = MagicMock()
    client.models.generate_content.return_value = SimpleNamespace(text=text)
    return client


class TestTemplates:
    def test_expert_avatar_without_client(self, brand):
        entry = PromptEngine(brand).expert_avatar(EXPERT_PROFILES["mayaChen"])
        assert "Dr. Maya Chen" in entry["prompt"]
        assert "#667eea" in entry["prompt"]
        assert entry["brand_guidelines"]["color_palette"]["accent"] == "#4ade80"
        assert "refined_prompt" not in entry

    def test_unknown_icon_uses_description(self, brand):
        entry = PromptEngine(brand).feature_icon("rocket", "A small rocket")
        assert "A small rocket" in entry["prompt"]

    def test_generate_all_counts(self, brand):
        assets = PromptEngine(brand).generate_all()
        assert {k: len(v) for k, v in assets.items()} == {
            "experts": 5, "testimonials": 5, "icons": len(ICON_PROMPTS),
            "features": 4, "social": 3, "logo": 3,
        }


class TestRefinement:
    def test_refined_prompt_recorded(self, brand):
        client = gemini_client("  Crisp portrait of Coach Alex Rivera.  ")
        entry = PromptEngine(brand, client=client).logo("main")
        assert entry["refined_prompt"] == "Crisp portrait of Coach Alex Rivera."
        assert entry["model"] == MODEL_ID
        kwargs = client.models.generate_content.call_args.kwargs
        assert kwargs["model"] == MODEL_ID
        assert kwargs["contents"][1] == entry["prompt"]

    def test_client_error_keeps_template(self, brand, caplog):
        client = MagicMock()
        client.models.generate_content.side_effect = RuntimeError("quota exceeded")
        entry = PromptEngine(brand, client=client).social_proof("rating-visual")
        assert entry["refine_error"] == "quota exceeded"
        assert "refined_prompt" not in entry
        assert entry["prompt"]
        assert "Gemini refinement failed" in caplog.text

    def test_empty_response_is_an_error(self, brand):
        entry = PromptEngine(brand, client=gemini_client("")).logo("icon")
        assert "empty" in entry["refine_error"]


class TestExpertBrief:
    def test_medical_expert_level(self, brand):
        brief = expert_brief(EXPERT_PROFILES["jamesWilson"], brand)
        assert brief.startswith("EXPERT IDENTITY: Dr. James Wilson")
        assert "High professional credibility" in brief

    def test_coach_level(self, brand):
        brief = expert_brief(EXPERT_PROFILES["alexRivera"], brand)
        assert "friendly, accessible energy" in brief
