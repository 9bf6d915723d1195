#!/usr/bin/env python3
"""
prompt_engine.py — Brand-consistent image prompts, optionally refined by Gemini.

Builds text prompts for every kind of TuneAtLife image (expert avatars,
testimonial portraits, feature icons, feature demos, social-proof graphics,
logo variations). Nothing here generates images. With a google-genai client
each prompt is sent to Gemini for a tightened rewrite; if that call fails the
template prompt is kept and the error is recorded on the entry.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from google import genai
from google.genai import types

from config import AppConfig, BrandGuidelines
from expert_profiles import EXPERT_PROFILES, TESTIMONIAL_PROFILES, ExpertProfile

log = logging.getLogger(__name__)

MODEL_ID = "gemini-2.5-flash"

REFINE_INSTRUCTION = (
    "You are an art director writing prompts for an image generation model. "
    "Rewrite the brief below into one precise, vivid prompt of at most 180 words. "
    "Keep every constraint, colour and 'avoid' item. Return only the prompt text."
)

ICON_PROMPTS = {
    "ai-brain": "Minimalist brain icon with subtle AI/tech elements like circuit patterns",
    "cultural-globe": "Globe with diverse cultural symbols and patterns around it",
    "camera-food": "Modern camera icon focused on healthy, diverse food",
    "progress-chart": "Clean upward trending graph with wellness metrics",
    "goals-target": "Target/bullseye with achievement elements",
    "health-heart": "Heart symbol with wellness/vitality elements",
    "fitness-dumbbell": "Modern dumbbell with energy/movement lines",
    "nutrition-apple": "Stylized apple or healthy food arrangement",
    "sleep-moon": "Crescent moon with peaceful, restful elements",
    "mindfulness-meditation": "Zen/meditation symbol with balance elements",
    "supplements-pills": "Natural supplement/vitamin representation",
}

FEATURE_PROMPTS = {
    "food-photo-analysis": (
        "Mobile phone screen showing food photo analysis. A diverse, healthy meal "
        "with an AI analysis overlay showing calories, nutrients and personalized "
        "recommendations in a clean, modern interface."
    ),
    "ai-chat-interface": (
        "Mobile chat interface with an AI wellness coach conversation. Encouraging, "
        "personalized wellness advice, a friendly coach avatar, TuneAtLife branded UI."
    ),
    "progress-charts": (
        "Wellness progress dashboard with weight, energy, sleep and mood tracked "
        "over time. Clean, colorful, encouraging trends with realistic data."
    ),
    "cultural-meals": (
        "Collage of diverse, healthy meals: Asian, Latin, Mediterranean, African "
        "and Middle Eastern cuisine. Vibrant, well-composed food photography."
    ),
}

SOCIAL_PROMPTS = {
    "user-statistics": (
        "Infographic of TuneAtLife success statistics (10,000+ users, 89% see "
        "results) with minimalist icons for each data point."
    ),
    "rating-visual": (
        "4.9/5 star rating display with short positive user review highlights, "
        "trustworthy and professional."
    ),
    "transformation-collage": (
        "Respectful wellness transformation showcase focused on energy, confidence "
        "and wellbeing rather than weight alone."
    ),
}

LOGO_PROMPTS = {
    "main": (
        "TuneAtLife company logo: the word 'TuneAtLife' in modern professional "
        "typography with a subtle wellness/growth symbol integrated."
    ),
    "icon": (
        "TuneAtLife square app icon, iOS/Android compatible, a recognizable "
        "wellness/target/AI symbol that works at small sizes."
    ),
    "white": "TuneAtLife logo in a white version for dark backgrounds, high contrast.",
}


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def make_client(config: AppConfig) -> Optional[genai.Client]:
    """Return a Gemini client when an API key is configured, else None."""
    if not config.gemini_api_key:
        return None
    return genai.Client(api_key=config.gemini_api_key)


class PromptEngine:
    def __init__(self, brand: BrandGuidelines, client: Optional[genai.Client] = None,
                 model: str = MODEL_ID):
        self.brand = brand
        self.client = client
        self.model = model

    # -- Core ---------------------------------------------------------------

    def refine(self, prompt: str) -> str:
        response = self.client.models.generate_content(
            model=self.model,
            contents=[REFINE_INSTRUCTION, prompt],
            config=types.GenerateContentConfig(temperature=0.4, max_output_tokens=1024),
        )
        text = (response.text or "").strip()
        if not text:
            raise RuntimeError("Gemini returned an empty prompt")
        return text

    def finish(self, prompt: str) -> Dict[str, Any]:
        """Wrap a template prompt into a log entry, refining it when a client is set."""
        entry: Dict[str, Any] = {
            "prompt": prompt,
            "timestamp": _now(),
            "brand_guidelines": self.brand.as_dict(),
        }
        if self.client is None:
            return entry
        try:
            entry["refined_prompt"] = self.refine(prompt)
            entry["model"] = self.model
        except Exception as e:
            log.warning("Gemini refinement failed, keeping template prompt: %s", e)
            entry["refine_error"] = str(e)
        return entry

    # -- Templates ----------------------------------------------------------

    def expert_avatar(self, expert: ExpertProfile) -> Dict[str, Any]:
        palette = self.brand.palette
        return self.finish(
            f"Create a professional headshot portrait for {expert.name}, "
            f"a {expert.specialty} expert.\n"
            f"Style: {self.brand.style}\n"
            f"Demographics: {expert.ethnicity} {expert.gender.lower()}, "
            f"approximately {expert.age} years old\n"
            "Appearance: Professional, approachable, confident, friendly smile\n"
            "Attire: Professional but approachable (avoid overly formal suits)\n"
            "Background: Soft, neutral gradient background in wellness colors\n"
            "Lighting: Soft, natural lighting that flatters the face\n"
            f"Brand colors: Incorporate subtle {palette['primary']} accents\n"
            "The image should convey expertise, trustworthiness, and cultural sensitivity.\n"
            "Avoid: Stock photo appearance, overly staged poses, distracting elements"
        )

    def testimonial_avatar(self, name: str, role: str, demographic: str,
                           achievement: str) -> Dict[str, Any]:
        return self.finish(
            f"Create an authentic, friendly portrait for {name}, a {role}.\n"
            f"Demographics: {demographic}\n"
            f"Context: Person who {achievement} through their wellness journey\n"
            "Style: Natural, authentic, approachable (not overly polished)\n"
            "Expression: Genuine smile, confident, happy, healthy glow\n"
            "Background: Soft, out-of-focus natural or home environment\n"
            "Lighting: Natural, warm lighting\n"
            "Avoid: Stock photo appearance, overly perfect retouching, generic poses"
        )

    def feature_icon(self, icon_type: str, description: str = "") -> Dict[str, Any]:
        base = ICON_PROMPTS.get(icon_type) or description
        return self.finish(
            f"Create a professional icon: {base}\n"
            f"Style: {self.brand.style}, minimalist, clean lines\n"
            f"Colors: Primary {self.brand.palette['primary']}, with accents\n"
            "Format: Vector-style, scalable, square, centered, transparent background\n"
            "The icon should be immediately recognizable and work at small sizes."
        )

    def feature_demo(self, feature_type: str, custom_prompt: str = "") -> Dict[str, Any]:
        base = FEATURE_PROMPTS.get(feature_type) or custom_prompt
        palette = self.brand.palette
        return self.finish(
            f"{base}\n"
            f"Style: {self.brand.style}\n"
            f"Colors: Incorporate {palette['primary']} and {palette['accent']}\n"
            "Quality: High-resolution, professional, modern UI/UX design\n"
            "Cultural sensitivity: Respectful representation of diverse cultures"
        )

    def social_proof(self, proof_type: str) -> Dict[str, Any]:
        palette = self.brand.palette
        return self.finish(
            f"{SOCIAL_PROMPTS[proof_type]}\n"
            f"Brand colors: {palette['primary']}, {palette['accent']}\n"
            f"Style: {self.brand.style}\n"
            f"Tone: {self.brand.tone}\n"
            "The graphic should build trust and credibility for the TuneAtLife platform."
        )

    def logo(self, variation: str) -> Dict[str, Any]:
        return self.finish(
            f"{LOGO_PROMPTS[variation]}\n"
            f"Colors: Primary {self.brand.palette['primary']} with gradients\n"
            f"Style: {self.brand.style}\n"
            "Scalability: Works from favicon size to large displays\n"
            "The logo should represent AI-powered, culturally-aware wellness coaching."
        )

    # -- Batch --------------------------------------------------------------

    def generate_all(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        assets: Dict[str, Dict[str, Dict[str, Any]]] = {
            "experts": {}, "testimonials": {}, "icons": {},
            "features": {}, "social": {}, "logo": {},
        }
        for key, expert in EXPERT_PROFILES.items():
            assets["experts"][key] = self.expert_avatar(expert)
        for key, person in TESTIMONIAL_PROFILES.items():
            assets["testimonials"][key] = self.testimonial_avatar(
                person.name, person.role, person.demographic, person.achievement)
        for icon_type in ICON_PROMPTS:
            assets["icons"][icon_type] = self.feature_icon(icon_type)
        for feature_type in FEATURE_PROMPTS:
            assets["features"][feature_type] = self.feature_demo(feature_type)
        for proof_type in SOCIAL_PROMPTS:
            assets["social"][proof_type] = self.social_proof(proof_type)
        for variation in LOGO_PROMPTS:
            assets["logo"][variation] = self.logo(variation)
        return assets


# ---------------------------------------------------------------------------
# Expert headshot briefs
# ---------------------------------------------------------------------------

def _bullets(items: List[str]) -> str:
    return "\n".join(f"- {item}" for item in items)


def expert_brief(expert: ExpertProfile, brand: BrandGuidelines) -> str:
    """The long-form headshot brief used for the expert avatar guide."""
    if expert.is_medical:
        level = "High professional credibility while maintaining warmth and approachability"
    else:
        level = "Professional expertise with friendly, accessible energy"
    cues = expert.story_cues or ["Authentic personal investment in helping others achieve wellness"]
    return f"""EXPERT IDENTITY: {expert.name} - {expert.specialty}

PHOTOGRAPHY STYLE:
- Professional headshot with authentic, approachable energy
- Lighting: Soft, natural lighting that creates warmth and trust
- Background: {expert.background}
- Quality: High-resolution, magazine-quality professional portrait

DEMOGRAPHIC DETAILS:
- Ethnicity: {expert.ethnicity}
- Age: {expert.age}
- Gender: {expert.gender}
- Heritage: {expert.heritage}

PERSONALITY EXPRESSION:
- Expression: {expert.expression}
- Energy: {expert.energy}
- Approachability: Highly approachable, someone you'd share your health struggles with
- Authority: Clear expertise without intimidation

ATTIRE & STYLING:
- Clothing: {expert.attire}
- Color Palette: Incorporate TuneAtLife brand colors ({brand.palette['primary']}) subtly
- Professional level: {level}

AUTHORITY SIGNALS:
{_bullets(expert.authority_triggers)}

TRUST BUILDERS:
{_bullets(expert.trust_builders)}

LIKABILITY FACTORS:
{_bullets(expert.likability_factors)}

STORY-SPECIFIC VISUAL CUES:
{_bullets(cues)}

TECHNICAL REQUIREMENTS:
- Square format (1:1 aspect ratio), optimized for circular avatar cropping
- High resolution suitable for web and print

AVOID:
- Generic stock photo appearance
- Overly posed or artificial staging
- Cultural stereotypes or cliches
- Over-processed or filtered look"""
