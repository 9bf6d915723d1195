#!/usr/bin/env python3
"""
generate_expert_avatars.py — Headshot briefs for the five TuneAtLife experts.

Writes generated-assets/expert-avatars/enhanced-expert-prompts.json and
EXPERT_AVATAR_GUIDE.md. The images themselves are produced outside this repo
and dropped into generated-assets/expert-avatars/images/ for upload_avatars.py.

Usage:
    python backend/generate_expert_avatars.py
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from config import GENERATED_DIR, AppConfig, load_config
from error_report import write_error_report
from expert_profiles import EXPERT_PROFILES
from prompt_engine import expert_brief
from upload_avatars import EXPERT_FILES

SUBDIR = "expert-avatars"

RECOMMENDATIONS = [
    "Check that generated-assets/expert-avatars/ is writable",
    "Verify every expert profile has a filename rule in upload_avatars.py",
    "Re-run after fixing .env.local if configuration failed to load",
]


def build_prompts(config: AppConfig) -> Dict[str, Dict[str, Any]]:
    filenames = {rule.key: f"{rule.stem}.png" for rule in EXPERT_FILES}
    generated_at = datetime.now(timezone.utc).isoformat(timespec="seconds")
    prompts = {}
    for key, expert in EXPERT_PROFILES.items():
        prompts[key] = {
            "name": expert.name,
            "specialty": expert.specialty,
            "filename": filenames.get(key),
            "prompt": expert_brief(expert, config.brand),
            "psychology_notes": {
                "authority": expert.authority_triggers,
                "likability": expert.likability_factors,
                "trust": expert.trust_builders,
                "wow_factors": expert.wow_factors,
            },
            "generated_at": generated_at,
        }
    return prompts


def render_guide(prompts: Dict[str, Dict[str, Any]]) -> str:
    sections = []
    for key, entry in prompts.items():
        notes = entry["psychology_notes"]
        sections.append(
            f"### {entry['name']}\n"
            f"**Specialty**: {entry['specialty']}  \n"
            f"**Save as**: `images/{entry['filename']}`\n\n"
            f"- Authority: {', '.join(notes['authority'][:2])}\n"
            f"- Trust: {', '.join(notes['trust'][:2])}\n"
            f"- Wow factor: {''.join(notes['wow_factors'][:1])}\n\n"
            f"Prompt: `enhanced-expert-prompts.json` ({key})\n"
        )
    return (
        "# TuneAtLife Expert Avatar Generation Guide\n\n"
        "Professional headshots that balance authority with approachability.\n\n"
        "## Experts\n\n" + "\n".join(sections) +
        "\n## Workflow\n\n"
        "1. Generate each portrait from its prompt (square, 1:1).\n"
        "2. Save it under `images/` with the filename shown above.\n"
        "3. Run `python backend/upload_avatars.py`.\n"
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate expert avatar briefs")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s  %(levelname)-7s  %(message)s")

    output_dir = GENERATED_DIR / SUBDIR
    try:
        config = load_config()
        output_dir = config.generated_dir / SUBDIR
        output_dir.mkdir(parents=True, exist_ok=True)
        prompts = build_prompts(config)
        with open(output_dir / "enhanced-expert-prompts.json", "w") as f:
            json.dump(prompts, f, indent=2, ensure_ascii=False)
        (output_dir / "EXPERT_AVATAR_GUIDE.md").write_text(render_guide(prompts))
    except Exception as e:
        print(f"Expert brief generation failed: {e}", file=sys.stderr)
        error_path = write_error_report(output_dir, e, RECOMMENDATIONS)
        print(f"Error report: {error_path}", file=sys.stderr)
        return 1

    for entry in prompts.values():
        print(f"  OK  {entry['name']}")
    print(f"\n{len(prompts)} briefs written to {output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
