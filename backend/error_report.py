#!/usr/bin/env python3
"""
error_report.py — The error-report.json every script writes when it dies.

Scripts catch unexpected exceptions once in main(), hand them here with a
short list of remediation hints, and exit 1.
"""
from __future__ import annotations

import json
import traceback
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List

REPORT_NAME = "error-report.json"


def write_error_report(output_dir: Path, error: BaseException,
                       recommendations: List[str], **context: Any) -> Path:
    """Write error-report.json into output_dir and return its path.

    Extra keyword arguments (run state, category, ...) are stored alongside
    the error.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    error_path = output_dir / REPORT_NAME
    report = {
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        **context,
        "error": str(error),
        "type": type(error).__name__,
        "traceback": traceback.format_exception(type(error), error, error.__traceback__),
        "recommendations": list(recommendations),
    }
    with open(error_path, "w") as f:
        json.dump(report, f, indent=2, default=str)
    return error_path
