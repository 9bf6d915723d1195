#!/usr/bin/env python3
"""
check_cloudinary.py — Verify Cloudinary credentials and set up the folder layout.

Pings the API, prints plan usage, round-trips a 1x1 test upload and makes sure
every catalog category has a folder under tuneatlife/.

Usage:
    python backend/check_cloudinary.py

An unexpected provider error is written to
generated-assets/cloudinary-check/error-report.json and the script exits 1.
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from catalog import CATEGORY_NAMES
from cloudinary_service import CloudinaryUploadService
from config import GENERATED_DIR, AppConfig, load_config
from error_report import write_error_report

SUBDIR = "cloudinary-check"

RECOMMENDATIONS = [
    "Confirm CLOUDINARY_CLOUD_NAME, CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET in .env.local",
    "Compare them with https://console.cloudinary.com/settings",
    "Check network connectivity to api.cloudinary.com",
]

TEST_PIXEL = (
    "data:image/png;base64,iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42"
    "mNkYPhfDwAChAGA5lnb8AAAAABJRU5ErkJggg=="
)


def report_credentials(config: AppConfig) -> List[str]:
    cfg = config.cloudinary
    print(f"  Cloud name: {cfg.cloud_name or 'MISSING'}")
    print(f"  API key:    {'present' if cfg.api_key else 'MISSING'}")
    print(f"  API secret: {'present' if cfg.api_secret else 'MISSING'}")
    print(f"  Environment: {config.environment}")
    return cfg.missing_credentials()


def check(config: AppConfig, service: Optional[CloudinaryUploadService] = None) -> bool:
    """Run every check. Returns False if credentials are missing or the API is unreachable."""
    print("=== Cloudinary connection check ===\n")
    missing = report_credentials(config)
    if missing:
        print(f"\nMissing: {', '.join(missing)}", file=sys.stderr)
        print("  1. Open https://console.cloudinary.com/")
        print("  2. Copy the cloud name, API key and API secret")
        print("  3. Add them to .env.local, e.g. CLOUDINARY_CLOUD_NAME=your_cloud_name")
        return False

    service = service or CloudinaryUploadService(config.cloudinary)
    try:
        print("\nPinging API...")
        status = service.ping()
        print(f"  OK  status={status.get('status')}")

        usage = service.usage()
        storage_mb = round((usage.get("storage", {}).get("usage") or 0) / 1024 / 1024)
        print(f"  Plan: {usage.get('plan')} | Credits used: {usage.get('credits_usage', 0)} "
              f"| Storage: {storage_mb}MB")
    except Exception as e:
        message = str(e)
        print(f"\nConnection failed: {message}", file=sys.stderr)
        if "cloud_name" in message:
            print("  The cloud name looks wrong; check https://console.cloudinary.com/")
        elif "api_key" in message.lower() or "API key" in message:
            print("  The API credentials look wrong; check https://console.cloudinary.com/settings")
        return False

    print("\nTesting upload...")
    result = service.upload_image(TEST_PIXEL, "test", "connection-test")
    if result.success:
        print(f"  OK  {result.url}")
        service.destroy(result.public_id)
        print("  Test image removed")
    else:
        print(f"  FAIL  {result.error}", file=sys.stderr)

    print("\nEnsuring folders...")
    root = config.cloudinary.folder
    for category in CATEGORY_NAMES:
        path = f"{root}/{category}"
        try:
            service.create_folder(path)
            print(f"  OK  {path}")
        except Exception as e:
            if "already exists" in str(e):
                print(f"  OK  {path} (exists)")
            else:
                print(f"  WARN  {path}: {e}", file=sys.stderr)

    print("\nCloudinary setup complete.")
    return result.success


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check the Cloudinary connection")
    parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s  %(levelname)-7s  %(message)s")

    output_dir = GENERATED_DIR / SUBDIR
    try:
        config = load_config()
        output_dir = config.generated_dir / SUBDIR
        check(config)
    except Exception as e:
        print(f"\nCloudinary check failed: {e}", file=sys.stderr)
        error_path = write_error_report(output_dir, e, RECOMMENDATIONS)
        print(f"Error report: {error_path}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
