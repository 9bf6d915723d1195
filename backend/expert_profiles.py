#!/usr/bin/env python3
"""
expert_profiles.py — The people behind the TuneAtLife imagery.

Catalog keys (alexRivera, sarahM, ...) index both tables. Portrait attributes
are declared per person rather than guessed from names; the prompt and upload
scripts read them as-is.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class ExpertProfile:
    key: str
    name: str
    specialty: str
    credentials: List[str]
    location: str
    heritage: str
    ethnicity: str
    gender: str
    age: int
    expression: str
    energy: str
    background: str
    attire: str
    authority_triggers: List[str] = field(default_factory=list)
    likability_factors: List[str] = field(default_factory=list)
    trust_builders: List[str] = field(default_factory=list)
    story_cues: List[str] = field(default_factory=list)
    wow_factors: List[str] = field(default_factory=list)

    @property
    def is_medical(self) -> bool:
        return any(c.startswith(("MD", "PhD", "PharmD")) for c in self.credentials)


@dataclass(frozen=True)
class TestimonialProfile:
    key: str
    name: str
    role: str
    demographic: str
    achievement: str


EXPERT_PROFILES: Dict[str, ExpertProfile] = {p.key: p for p in [
    ExpertProfile(
        key="alexRivera",
        name="Coach Alex Rivera",
        specialty="Fitness & Movement Specialist",
        credentials=["NASM-CPT", "Corrective Exercise Specialist", "Former Olympic Trainer"],
        location="Miami, FL",
        heritage="São Paulo, Brazil",
        ethnicity="Latino/Hispanic",
        gender="Male",
        age=35,
        expression="Warm, encouraging smile with hint of playfulness - someone who makes fitness fun",
        energy="High energy, dynamic but not overwhelming",
        background="Subtle fitness studio environment or clean gym backdrop, contextually relevant but not distracting",
        attire="Athletic but polished - high-quality activewear or smart casual with athletic elements",
        authority_triggers=[
            "Former Olympic trainer",
            "Transformed 10,000+ lives",
            "15+ years experience",
            "Featured in Men's Health, Shape Magazine",
        ],
        likability_factors=[
            "Overcame poverty and family health struggles",
            "Celebrates cultural diversity in fitness",
            "Non-judgmental, body-positive approach",
        ],
        trust_builders=[
            "Vulnerable about his own weight struggles",
            "Focus on family health legacy",
            "Maintains daily personal practice",
        ],
        story_cues=[
            "Hint of determination and resilience in expression - someone who has overcome challenges",
            "Warmth and family connection evident in expression - honors heritage",
        ],
        wow_factors=["Has trained athletes from 23 different countries"],
    ),
    ExpertProfile(
        key="mayaChen",
        name="Dr. Maya Chen",
        specialty="Nutrition & Functional Medicine",
        credentials=["MD", "Harvard T.H. Chan School of Public Health",
                     "Functional Medicine Certified", "Traditional Chinese Medicine"],
        location="San Francisco, CA",
        heritage="Taipei, Taiwan",
        ethnicity="Asian (Chinese/Taiwanese)",
        gender="Female",
        age=32,
        expression="Gentle, wise smile with compassionate eyes - someone who truly cares about your wellbeing",
        energy="Balanced, professional energy with warmth",
        background="Clean, modern kitchen or wellness clinic setting with subtle healthy food elements",
        attire="Professional but approachable - quality blouse with subtle wellness accessories",
        authority_triggers=[
            "Harvard-trained MD",
            "15,000+ patients transformed",
            "Featured in The New York Times, CNN Health",
        ],
        likability_factors=[
            "Honors traditional family wisdom",
            "Makes complex science accessible",
            "Celebrates food as love and culture",
        ],
        trust_builders=[
            "Medical doctor credentials",
            "Respects cultural food traditions",
            "Evidence-based but holistic approach",
        ],
        story_cues=[
            "Warmth and family connection evident in expression - honors heritage",
            "Cultural authenticity and sensitivity visible in styling and expression",
        ],
        wow_factors=["Created the 'Cultural Plate Method' used by hospitals worldwide"],
    ),
    ExpertProfile(
        key="sarahKim",
        name="Dr. Sarah Kim",
        specialty="Mindfulness & Stress Management",
        credentials=["PhD Psychology", "Mindfulness-Based Stress Reduction Certified",
                     "Trauma-Informed Therapy", "Korean Zen Buddhist Training"],
        location="Seattle, WA",
        heritage="Seoul, South Korea",
        ethnicity="Korean",
        gender="Female",
        age=38,
        expression="Calm, peaceful expression with understanding eyes - someone who gets your struggles",
        energy="Calm, centered energy with inner strength",
        background="Serene, minimalist setting with natural elements - plants or soft textures",
        attire="Smart casual professional - quality clothing that suggests expertise without being stuffy",
        authority_triggers=[
            "PhD in Psychology from Stanford",
            "20,000+ people guided to peace",
            "Featured expert on Headspace, Calm apps",
        ],
        likability_factors=[
            "Openly shares her anxiety history",
            "Understands immigrant and multicultural struggles",
            "Celebrates sensitivity as strength",
        ],
        trust_builders=[
            "Academic credentials plus traditional training",
            "Trauma-informed approach",
            "Cultural sensitivity in mental health",
        ],
        story_cues=["Cultural authenticity and sensitivity visible in styling and expression"],
        wow_factors=["Created the 'Cultural Calm' technique used in Fortune 500 companies"],
    ),
    ExpertProfile(
        key="jamesWilson",
        name="Dr. James Wilson",
        specialty="Sleep Optimization & Recovery",
        credentials=["MD Sleep Medicine", "Stanford Sleep Medicine Fellowship",
                     "Board Certified Neurologist", "US Military Sleep Consultant"],
        location="Atlanta, GA",
        heritage="Detroit, MI",
        ethnicity="African American",
        gender="Male",
        age=42,
        expression="Confident, reassuring smile with eyes that show he understands exhaustion",
        energy="Steady, reliable energy with hint of restfulness",
        background="Professional but calming medical or wellness office setting",
        attire="Professional but approachable - quality button-down, possibly with subtle medical accessories",
        authority_triggers=[
            "Stanford-trained Sleep Medicine specialist",
            "US Military sleep consultant",
            "25,000+ lives transformed",
        ],
        likability_factors=[
            "Grew up with a single mother working three jobs",
            "Understands real-world sleep challenges",
            "Calls his mother every night",
        ],
        trust_builders=[
            "Medical doctor with specialized training",
            "Military experience with impossible conditions",
            "Focus on sleep equity and accessibility",
        ],
        story_cues=["Personal investment and caring evident - this is personal, not just professional"],
        wow_factors=["Created the '4-Hour Recovery Protocol' for new parents"],
    ),
    ExpertProfile(
        key="lisaPark",
        name="Dr. Lisa Park",
        specialty="Natural Supplements & Holistic Health",
        credentials=["PharmD", "Functional Medicine Practitioner", "Clinical Herbalist",
                     "Integrative Health Consultant"],
        location="Portland, OR",
        heritage="mixed Korean-Irish heritage",
        ethnicity="Mixed Korean-Irish",
        gender="Female",
        age=29,
        expression="Intelligent, curious expression with slight smile - someone who loves solving health puzzles",
        energy="Balanced, professional energy with warmth",
        background="Clean, modern pharmacy or wellness laboratory setting with plants or herbs",
        attire="Smart casual professional - quality clothing that suggests expertise without being stuffy",
        authority_triggers=[
            "Doctor of Pharmacy degree",
            "18,000+ people optimized naturally",
            "Clinical herbalist certification",
        ],
        likability_factors=[
            "Mixed heritage connects with diverse backgrounds",
            "Skeptical of both conventional and 'woo-woo' approaches",
            "Grows her own herbs",
        ],
        trust_builders=[
            "Pharmaceutical training with natural focus",
            "Evidence-based approach to supplements",
            "Transparent about what works and what doesn't",
        ],
        story_cues=["Warmth and family connection evident in expression - honors heritage"],
        wow_factors=["Created the 'Supplement Audit' system used by functional medicine doctors"],
    ),
]}

TESTIMONIAL_PROFILES: Dict[str, TestimonialProfile] = {p.key: p for p in [
    TestimonialProfile("sarahM", "Sarah M.", "Working Mom", "Caucasian female, 34", "lost 28lbs"),
    TestimonialProfile("davidL", "David L.", "CEO", "African American male, 45", "improved sleep 85%"),
    TestimonialProfile("mariaG", "Maria G.", "Fitness Enthusiast", "Latina female, 28", "gained 15lbs muscle"),
    TestimonialProfile("jamesK", "James K.", "Executive", "Asian male, 39", "increased energy 200%"),
    TestimonialProfile("lisaP", "Lisa P.", "New Mom", "Caucasian female, 31", "reduced stress 70%"),
]}
