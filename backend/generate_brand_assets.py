#!/usr/bin/env python3
"""
generate_brand_assets.py — Write image prompts for every TuneAtLife brand asset.

Outputs to generated-assets/brand/:
    generated-prompts.json   prompts grouped by catalog category
    generation-log.json      step log (appended per run)
    USAGE_INSTRUCTIONS.md    what to do with the prompts

Prompts are refined through Gemini when GEMINI_API_KEY is set; otherwise the
brand templates are written as-is.

Usage:
    python backend/generate_brand_assets.py
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from config import GENERATED_DIR, AppConfig, load_config
from error_report import write_error_report
from prompt_engine import PromptEngine, make_client

SUBDIR = "brand"

RECOMMENDATIONS = [
    "Check GEMINI_API_KEY in .env.local, or unset it to write template prompts",
    "Check that generated-assets/brand/ is writable",
    "Check network connectivity to the Gemini API",
]


def _now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def append_log(log_path: Path, entry: Dict[str, Any]) -> None:
    entries: List[Dict[str, Any]] = []
    if log_path.exists():
        try:
            with open(log_path) as f:
                loaded = json.load(f)
            entries = loaded if isinstance(loaded, list) else [loaded]
        except json.JSONDecodeError:
            entries = []
    entries.append(entry)
    with open(log_path, "w") as f:
        json.dump(entries, f, indent=2)


def count_prompts(assets: Dict[str, Dict[str, Any]]) -> Dict[str, int]:
    return {category: len(items) for category, items in assets.items()}


def refine_failures(assets: Dict[str, Dict[str, Any]]) -> int:
    return sum(1 for items in assets.values() for entry in items.values()
               if "refine_error" in entry)


def render_instructions(counts: Dict[str, int], refined: bool) -> str:
    rows = "\n".join(f"| {category} | {n} |" for category, n in counts.items())
    source = "refined by Gemini" if refined else "brand templates (no GEMINI_API_KEY set)"
    return f"""# TuneAtLife Brand Asset Prompts

Prompts in `generated-prompts.json` are {source}.

| Category | Prompts |
|----------|---------|
{rows}

## Next steps

1. Generate images from each prompt with your image tool of choice.
2. Save portraits as `generated-assets/expert-avatars/images/<first>-<last>.png`
   (testimonials under `generated-assets/testimonials/images/`). Brand assets go
   in `generated-assets/<category>/images/` named after their public id, e.g.
   `generated-assets/icons/images/ai-brain.png`.
3. Run `python backend/upload_avatars.py --category all` to upload them and
   update `assets/catalog.json`.
4. Resolve URLs in code with `ImageUrlBuilder.resolve(category, name, options)`.
"""


def run(config: AppConfig) -> Dict[str, Any]:
    output_dir = config.generated_dir / SUBDIR
    output_dir.mkdir(parents=True, exist_ok=True)
    log_path = output_dir / "generation-log.json"

    client = make_client(config)
    if client is None:
        print("GEMINI_API_KEY not set; writing template prompts without refinement")

    engine = PromptEngine(config.brand, client=client)
    print("Generating prompts for brand assets...")
    assets = engine.generate_all()
    counts = count_prompts(assets)
    failures = refine_failures(assets)

    with open(output_dir / "generated-prompts.json", "w") as f:
        json.dump(assets, f, indent=2)

    append_log(log_path, {
        "step": "prompts_generated",
        "timestamp": _now(),
        "environment": config.environment,
        "refined": client is not None,
        "refine_failures": failures,
        "summary": counts,
    })

    (output_dir / "USAGE_INSTRUCTIONS.md").write_text(
        render_instructions(counts, refined=client is not None))

    print(f"  {sum(counts.values())} prompts written to {output_dir}")
    for category, n in counts.items():
        print(f"    {category:14s} {n}")
    if failures:
        print(f"  {failures} prompts kept their template after Gemini errors")
    return assets


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Generate TuneAtLife brand asset prompts")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s  %(levelname)-7s  %(message)s")

    output_dir = GENERATED_DIR / SUBDIR
    try:
        config = load_config()
        output_dir = config.generated_dir / SUBDIR
        run(config)
    except Exception as e:
        print(f"\nAsset prompt generation failed: {e}", file=sys.stderr)
        error_path = write_error_report(output_dir, e, RECOMMENDATIONS)
        print(f"Error report: {error_path}", file=sys.stderr)
        try:
            append_log(output_dir / "generation-log.json", {
                "step": "error",
                "timestamp": _now(),
                "error": str(e),
            })
        except OSError as log_error:
            print(f"  WARNING: could not update generation log: {log_error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
