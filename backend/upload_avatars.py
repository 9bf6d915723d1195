#!/usr/bin/env python3
"""
upload_avatars.py — Upload generated brand imagery to Cloudinary and update the catalog.

Scans generated-assets/<subdir>/images/ for files named after the declared
filename table, uploads each match with its category preset, merges the
successful uploads into assets/catalog.json (backing up the previous file),
then writes upload-report.json and UPLOAD_SUMMARY.md next to the images.

Portraits (experts, testimonials) and brand assets (icons, features, social,
logo, hero) go through the same flow; --category all runs every table.

One failed upload never stops the batch. An unexpected error anywhere is
written to error-report.json and the script exits 1.

Usage:
    python backend/upload_avatars.py                           # Expert avatars
    python backend/upload_avatars.py --category testimonials   # Testimonial portraits
    python backend/upload_avatars.py --category icons          # Feature icons
    python backend/upload_avatars.py --category all            # Every category
    python backend/upload_avatars.py --concurrent 4            # Parallel uploads
"""
from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from PIL import Image

from catalog import Catalog
from cloudinary_service import CloudinaryUploadService, UploadResult
from config import GENERATED_DIR, AppConfig, load_config
from error_report import write_error_report
from expert_profiles import EXPERT_PROFILES, TESTIMONIAL_PROFILES
from image_urls import ImageUrlBuilder

log = logging.getLogger("upload_avatars")

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp", ".gif"}

RECOMMENDATIONS = [
    "Check Cloudinary credentials in .env.local",
    "Verify image files are in correct format",
    "Ensure sufficient Cloudinary storage space",
    "Check network connectivity",
]

_STEM_RE = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")


@dataclass(frozen=True)
class FileRule:
    stem: str   # expected filename without extension
    key: str    # catalog key
    slug: str   # public id under the category folder


@dataclass(frozen=True)
class AssetLabel:
    name: str
    description: str


EXPERT_FILES = [
    FileRule("alex-rivera", "alexRivera", "alex-rivera-fitness-coach"),
    FileRule("maya-chen", "mayaChen", "maya-chen-nutritionist"),
    FileRule("sarah-kim", "sarahKim", "sarah-kim-mindfulness"),
    FileRule("james-wilson", "jamesWilson", "james-wilson-sleep"),
    FileRule("lisa-park", "lisaPark", "lisa-park-supplements"),
]

TESTIMONIAL_FILES = [
    FileRule("sarah-m", "sarahM", "sarah-m-working-mom"),
    FileRule("david-l", "davidL", "david-l-ceo"),
    FileRule("maria-g", "mariaG", "maria-g-fitness"),
    FileRule("james-k", "jamesK", "james-k-executive"),
    FileRule("lisa-p", "lisaP", "lisa-p-new-mom"),
]

# Brand assets are saved under their public id
ICON_FILES = [FileRule(slug, key, slug) for key, slug in [
    ("ai", "ai-brain"),
    ("culturalIntelligence", "cultural-globe"),
    ("foodAnalysis", "camera-food"),
    ("progress", "chart-progress"),
    ("goals", "target-goals"),
    ("notification", "bell-notification"),
    ("health", "heart-health"),
    ("fitness", "dumbbell-fitness"),
    ("nutrition", "apple-nutrition"),
    ("sleep", "moon-sleep"),
    ("mindfulness", "meditation-brain"),
    ("supplements", "pills-supplements"),
]]

FEATURE_FILES = [FileRule(slug, key, slug) for key, slug in [
    ("foodPhotoAnalysis", "food-photo-analysis-demo"),
    ("aiChat", "ai-chat-interface"),
    ("progressTracking", "progress-charts"),
    ("culturalMeals", "cultural-meals-collage"),
]]

SOCIAL_FILES = [FileRule(slug, key, slug) for key, slug in [
    ("userStats", "user-statistics-graphic"),
    ("ratings", "five-star-ratings"),
    ("transformations", "before-after-collage"),
]]

LOGO_FILES = [FileRule(slug, key, slug) for key, slug in [
    ("main", "tuneatlife-logo-main"),
    ("white", "tuneatlife-logo-white"),
    ("icon", "tuneatlife-icon"),
    ("favicon", "tuneatlife-favicon"),
]]

HERO_FILES = [FileRule(slug, key, slug) for key, slug in [
    ("main", "wellness-transformation-hero"),
    ("mobile", "mobile-app-hero"),
    ("dashboard", "dashboard-preview"),
    ("success", "success-stories-bg"),
]]

ASSET_LABELS: Dict[str, Dict[str, AssetLabel]] = {
    "icons": {
        "ai": AssetLabel("AI", "AI coaching brain icon"),
        "culturalIntelligence": AssetLabel("Cultural Intelligence", "Globe with cultural patterns"),
        "foodAnalysis": AssetLabel("Food Analysis", "Camera focused on healthy food"),
        "progress": AssetLabel("Progress", "Upward wellness chart"),
        "goals": AssetLabel("Goals", "Target with achievement marks"),
        "notification": AssetLabel("Notification", "Reminder bell"),
        "health": AssetLabel("Health", "Heart with vitality accents"),
        "fitness": AssetLabel("Fitness", "Dumbbell with movement lines"),
        "nutrition": AssetLabel("Nutrition", "Stylised apple"),
        "sleep": AssetLabel("Sleep", "Crescent moon"),
        "mindfulness": AssetLabel("Mindfulness", "Meditation symbol"),
        "supplements": AssetLabel("Supplements", "Natural supplement capsules"),
    },
    "features": {
        "foodPhotoAnalysis": AssetLabel("Food Photo Analysis", "Meal photo with AI nutrient overlay"),
        "aiChat": AssetLabel("AI Chat", "Coach conversation on mobile"),
        "progressTracking": AssetLabel("Progress Tracking", "Wellness dashboard charts"),
        "culturalMeals": AssetLabel("Cultural Meals", "Collage of diverse healthy meals"),
    },
    "social": {
        "userStats": AssetLabel("User Statistics", "Success statistics infographic"),
        "ratings": AssetLabel("Ratings", "4.9 star rating display"),
        "transformations": AssetLabel("Transformations", "Wellness transformation collage"),
    },
    "logo": {
        "main": AssetLabel("Main Logo", "Full colour wordmark"),
        "white": AssetLabel("White Logo", "Wordmark for dark backgrounds"),
        "icon": AssetLabel("App Icon", "Square app icon"),
        "favicon": AssetLabel("Favicon", "Small square mark"),
    },
    "hero": {
        "main": AssetLabel("Main Hero", "Wellness transformation hero"),
        "mobile": AssetLabel("Mobile Hero", "Mobile app hero"),
        "dashboard": AssetLabel("Dashboard", "Dashboard preview background"),
        "success": AssetLabel("Success Stories", "Success stories background"),
    },
}


@dataclass(frozen=True)
class UploadPlan:
    category: str
    subdir: str
    rules: List[FileRule]
    profiles: Mapping[str, Any]
    upload_method: str
    by_key: bool = False          # pass the catalog key to the wrapper instead of a person's name
    variants: str = "avatar"      # "avatar" sizes or the "responsive" breakpoint set
    preset: str = "avatar"        # IMAGE_PRESETS name shown in usage examples
    prompt_script: str = "generate_brand_assets.py"


def _asset_plan(category: str, rules: List[FileRule], method: str, preset: str) -> UploadPlan:
    return UploadPlan(category, category, rules, ASSET_LABELS[category], method,
                      by_key=True, variants="responsive", preset=preset)


PLANS = {
    "experts": UploadPlan("experts", "expert-avatars", EXPERT_FILES,
                          EXPERT_PROFILES, "upload_expert_avatar",
                          prompt_script="generate_expert_avatars.py"),
    "testimonials": UploadPlan("testimonials", "testimonials", TESTIMONIAL_FILES,
                               TESTIMONIAL_PROFILES, "upload_testimonial_avatar"),
    "icons": _asset_plan("icons", ICON_FILES, "upload_feature_icon", "icon"),
    "features": _asset_plan("features", FEATURE_FILES, "upload_feature_demo", "cardImage"),
    "social": _asset_plan("social", SOCIAL_FILES, "upload_social_proof", "cardImage"),
    "logo": _asset_plan("logo", LOGO_FILES, "upload_logo", "iconLarge"),
    "hero": _asset_plan("hero", HERO_FILES, "upload_hero", "heroDesktop"),
}


def validate_rules(plan: UploadPlan) -> Dict[str, FileRule]:
    """Check the filename table once at startup. Returns rules keyed by stem."""
    by_stem: Dict[str, FileRule] = {}
    keys = set()
    for rule in plan.rules:
        if not _STEM_RE.match(rule.stem):
            raise ValueError(f"Filename stem must be a lowercase slug: {rule.stem!r}")
        if not _STEM_RE.match(rule.slug):
            raise ValueError(f"Public id must be a lowercase slug: {rule.slug!r}")
        if rule.stem in by_stem:
            raise ValueError(f"Duplicate filename stem: {rule.stem!r}")
        if rule.key in keys:
            raise ValueError(f"Duplicate catalog key: {rule.key!r}")
        if rule.key not in plan.profiles:
            raise ValueError(f"No {plan.category} profile for catalog key {rule.key!r}")
        by_stem[rule.stem] = rule
        keys.add(rule.key)
    return by_stem


# ---------------------------------------------------------------------------
# Run state
# ---------------------------------------------------------------------------

class RunState(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    PROCESSING = "processing"
    CONFIG_UPDATED = "config_updated"
    REPORT_GENERATED = "report_generated"
    ABORTED = "aborted"


class ItemState(str, Enum):
    UPLOADED = "uploaded"
    UPLOAD_FAILED = "upload_failed"


@dataclass
class ScannedImage:
    filename: str
    path: Path
    rule: FileRule
    size_bytes: int
    width: Optional[int] = None
    height: Optional[int] = None


@dataclass
class ItemOutcome:
    image: ScannedImage
    result: UploadResult
    uploaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat(timespec="seconds"))

    @property
    def state(self) -> ItemState:
        return ItemState.UPLOADED if self.result.success else ItemState.UPLOAD_FAILED


def _describe(profile: Any) -> str:
    for attr in ("specialty", "role", "description"):
        value = getattr(profile, attr, None)
        if value:
            return value
    return ""


def read_dimensions(path: Path) -> "tuple[Optional[int], Optional[int]]":
    try:
        with Image.open(path) as img:
            return img.size
    except OSError:
        return None, None


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------

class AvatarUploadRun:
    def __init__(self, config: AppConfig, category: str = "experts",
                 service: Optional[CloudinaryUploadService] = None,
                 concurrent: int = 1):
        if category not in PLANS:
            raise ValueError(f"No upload plan for category {category!r}")
        self.config = config
        self.plan = PLANS[category]
        self.rules = validate_rules(self.plan)
        self.service = service
        self.concurrent = max(1, concurrent)
        self.state = RunState.IDLE
        self.urls = ImageUrlBuilder(config.cloudinary)

        self.output_dir = config.generated_dir / self.plan.subdir
        self.input_dir = self.output_dir / "images"
        self.backup_dir = self.output_dir / "config-backups"

    # -- Phases -------------------------------------------------------------

    def scan(self) -> List[ScannedImage]:
        self.state = RunState.SCANNING
        if not self.input_dir.exists():
            print(f"  Creating input directory: {self.input_dir}")
            self.input_dir.mkdir(parents=True, exist_ok=True)
            return []

        images = []
        for path in sorted(self.input_dir.iterdir()):
            if not path.is_file() or path.suffix.lower() not in IMAGE_EXTENSIONS:
                continue
            rule = self.rules.get(path.stem.lower())
            if rule is None:
                continue
            width, height = read_dimensions(path)
            images.append(ScannedImage(
                filename=path.name, path=path, rule=rule,
                size_bytes=path.stat().st_size, width=width, height=height,
            ))
        return images

    def _upload_one(self, image: ScannedImage) -> ItemOutcome:
        rule = image.rule
        label = rule.key if self.plan.by_key else self.plan.profiles[rule.key].name
        upload = getattr(self.service, self.plan.upload_method)
        try:
            result = upload(str(image.path), label, public_id=rule.slug)
        except Exception as e:
            log.error("Upload raised for %s: %s", image.filename, e)
            result = UploadResult(success=False, public_id=rule.slug, error=str(e))
        return ItemOutcome(image=image, result=result)

    def process(self, images: List[ScannedImage]) -> List[ItemOutcome]:
        self.state = RunState.PROCESSING
        if self.concurrent > 1:
            with ThreadPoolExecutor(max_workers=self.concurrent) as pool:
                outcomes = list(pool.map(self._upload_one, images))
        else:
            outcomes = [self._upload_one(img) for img in images]

        for outcome in outcomes:
            name = self.plan.profiles[outcome.image.rule.key].name
            if outcome.result.success:
                print(f"  OK    {name}: {outcome.result.url}")
            else:
                print(f"  FAIL  {name}: {outcome.result.error}", file=sys.stderr)

        ok = sum(1 for o in outcomes if o.result.success)
        print(f"  Uploaded {ok}/{len(outcomes)} images")
        return outcomes

    def update_catalog(self, outcomes: List[ItemOutcome]) -> Optional[Path]:
        uploaded = {o.image.rule.key: o.result.asset_id
                    for o in outcomes if o.result.success}
        backup_path = None
        if uploaded:
            catalog = Catalog.load(self.config.catalog_path)
            catalog.merge(self.plan.category, uploaded)
            backup_path = catalog.save(self.config.catalog_path, backup_dir=self.backup_dir)
            if backup_path:
                print(f"  Backed up catalog to {backup_path}")
            print(f"  Wrote {len(uploaded)} {self.plan.category} entries to "
                  f"{self.config.catalog_path}")
        else:
            print("  No successful uploads, catalog unchanged")
        self.state = RunState.CONFIG_UPDATED
        return backup_path

    def variant_urls(self, asset_id: str) -> Dict[str, str]:
        if self.plan.variants == "avatar":
            return self.urls.avatar_variants(asset_id)
        return self.urls.responsive_set(asset_id)

    def build_report(self, outcomes: List[ItemOutcome]) -> Dict[str, Any]:
        category = self.plan.category
        succeeded = [o for o in outcomes if o.result.success]
        report: Dict[str, Any] = {
            "summary": {
                "category": category,
                "total_processed": len(outcomes),
                "successful_uploads": len(succeeded),
                "failed_uploads": len(outcomes) - len(succeeded),
                "generated_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
                "environment": self.config.environment,
            },
            "assets": {},
            "failures": {},
            "usage": {"examples": {}},
        }
        for o in outcomes:
            key = o.image.rule.key
            profile = self.plan.profiles[key]
            if not o.result.success:
                report["failures"][key] = {
                    "name": profile.name,
                    "original_file": o.image.filename,
                    "error": o.result.error,
                }
                continue
            asset_id = o.result.asset_id
            responsive = self.variant_urls(asset_id)
            responsive["original"] = o.result.url
            report["assets"][key] = {
                "name": profile.name,
                "description": _describe(profile),
                "asset_id": asset_id,
                "original_url": o.result.url,
                "original_file": o.image.filename,
                "local_dimensions": [o.image.width, o.image.height],
                "uploaded_at": o.uploaded_at,
                "responsive_urls": responsive,
                "metadata": o.result.metadata,
            }
            report["usage"]["examples"][key] = {
                "resolve": f"urls.resolve('{category}', '{key}', "
                           f"IMAGE_PRESETS['{self.plan.preset}'])",
                "direct_url": o.result.url,
            }
        return report

    def write_reports(self, report: Dict[str, Any]) -> None:
        """Write the JSON report and markdown summary. Never raises."""
        report_path = self.output_dir / "upload-report.json"
        summary_path = self.output_dir / "UPLOAD_SUMMARY.md"
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(report_path, "w") as f:
                json.dump(report, f, indent=2)
            print(f"  Report:  {report_path}")
        except (OSError, TypeError, ValueError) as e:
            print(f"  WARNING: could not write {report_path}: {e}", file=sys.stderr)
        try:
            summary_path.write_text(render_summary(report))
            print(f"  Summary: {summary_path}")
        except (OSError, KeyError) as e:
            print(f"  WARNING: could not write {summary_path}: {e}", file=sys.stderr)
        self.state = RunState.REPORT_GENERATED

    def write_generation_guide(self) -> Path:
        lines = [
            f"# {self.plan.category.title()} Image Generation Instructions",
            "",
            f"Place generated images in: `{self.input_dir}`",
            "",
            "Use these exact filenames (.jpg, .jpeg, .png, .webp or .gif):",
            "",
        ]
        for rule in self.plan.rules:
            profile = self.plan.profiles[rule.key]
            lines.append(f"- `{rule.stem}.jpg` - {profile.name} ({_describe(profile)})")
        lines += [
            "",
            f"Prompts are written by `backend/{self.plan.prompt_script}`.",
            f"Then run: `python backend/upload_avatars.py --category {self.plan.category}`",
            "",
        ]
        guide_path = self.output_dir / "GENERATION_GUIDE.md"
        self.output_dir.mkdir(parents=True, exist_ok=True)
        guide_path.write_text("\n".join(lines))
        return guide_path

    def write_error_report(self, error: BaseException) -> Path:
        return write_error_report(self.output_dir, error, RECOMMENDATIONS,
                                  category=self.plan.category, state=self.state.value)

    # -- Entry --------------------------------------------------------------

    def run(self) -> Optional[Dict[str, Any]]:
        print(f"=== TuneAtLife {self.plan.category} upload ===")

        if self.service is None:
            missing = self.config.cloudinary.missing_credentials()
            if missing:
                print(f"Missing Cloudinary credentials: {', '.join(missing)}", file=sys.stderr)
                print("Add them to .env.local (see backend/check_cloudinary.py)", file=sys.stderr)
                self.state = RunState.ABORTED
                return None
            self.service = CloudinaryUploadService(self.config.cloudinary)

        print(f"\n[1/4] Scanning {self.input_dir}")
        images = self.scan()
        if not images:
            guide = self.write_generation_guide()
            print("  No matching images found.")
            print(f"  Generation guide: {guide}")
            return None
        print(f"  Found {len(images)} images")

        print("\n[2/4] Uploading to Cloudinary")
        outcomes = self.process(images)

        print("\n[3/4] Updating catalog")
        self.update_catalog(outcomes)

        print("\n[4/4] Writing reports")
        report = self.build_report(outcomes)
        self.write_reports(report)

        summary = report["summary"]
        print(f"\nDone. Uploaded: {summary['successful_uploads']} | "
              f"Failed: {summary['failed_uploads']}")
        return report


def render_summary(report: Dict[str, Any]) -> str:
    summary = report["summary"]
    out = [
        f"# {summary['category'].title()} Upload Summary",
        "",
        "## Results",
        "",
        f"- **Total processed**: {summary['total_processed']}",
        f"- **Successful uploads**: {summary['successful_uploads']}",
        f"- **Failed uploads**: {summary['failed_uploads']}",
        f"- **Generated**: {summary['generated_at']}",
        "",
    ]
    if report["assets"]:
        out += ["## Uploaded", ""]
    for key, asset in report["assets"].items():
        out += [
            f"### {asset['name']}",
            f"**Description**: {asset['description']}  ",
            f"**Asset id**: `{asset['asset_id']}`  ",
            f"**Direct URL**: {asset['original_url']}",
            "",
        ]
        out += [f"- {size}: {url}" for size, url in asset["responsive_urls"].items()
                if size != "original"]
        out += [
            "",
            "```python",
            report["usage"]["examples"][key]["resolve"],
            "```",
            "",
        ]
    if report["failures"]:
        out += ["## Failed", ""]
        for key, failure in report["failures"].items():
            out.append(f"- **{failure['name']}** (`{failure['original_file']}`): {failure['error']}")
        out.append("")
    return "\n".join(out)


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Upload generated brand imagery to Cloudinary")
    parser.add_argument("--category", choices=sorted(PLANS) + ["all"], default="experts",
                        help="Which table to upload, or 'all' (default: experts)")
    parser.add_argument("--concurrent", type=int, default=1,
                        help="Parallel uploads (default: 1, sequential)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s  %(levelname)-7s  %(message)s")

    categories = list(PLANS) if args.category == "all" else [args.category]
    output_dir = GENERATED_DIR
    run = None
    try:
        config = load_config()
        output_dir = config.generated_dir
        for category in categories:
            run = None
            run = AvatarUploadRun(config, category=category, concurrent=args.concurrent)
            run.run()
            if run.state == RunState.ABORTED:
                break
            print()
    except Exception as e:
        print(f"\nUpload workflow failed: {e}", file=sys.stderr)
        if run is not None:
            error_path = run.write_error_report(e)
        else:
            error_path = write_error_report(output_dir, e, RECOMMENDATIONS,
                                            state=RunState.IDLE.value)
        print(f"Error report: {error_path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
