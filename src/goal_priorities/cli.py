"""Command-line front end for the priority engine.

Usage:
    python -m goal_priorities state.json
    python -m goal_priorities state.yaml --now 2025-01-06T08:00 --top 5
    python -m goal_priorities state.json --config priorities.yaml --verbose

Prints the priorities as JSON. Exit code:
    0 = success
    1 = error (unreadable state, bad --now, bad config)
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml

from goal_priorities.config import config_from_env, load_config
from goal_priorities.priorities import compute_priorities

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = {".yaml", ".yml"}


def read_state(path: Path) -> Any:
    """Read a persisted state file (JSON, or YAML by suffix)."""
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in _YAML_SUFFIXES:
        return yaml.safe_load(text)
    return json.loads(text)


def _json_safe(value: Any) -> Any:
    """Replace infinite floats and dates so the output stays strict JSON."""
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_json_safe(v) for v in value]
    return value


def _error(message: str) -> int:
    print(json.dumps({"error": message}), file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = argparse.ArgumentParser(
        prog="goal_priorities",
        description="Rank queued goals and resolve the active goal",
    )
    parser.add_argument("state", type=Path, help="State file (JSON or YAML)")
    parser.add_argument(
        "--now",
        default=None,
        help="Reference instant, ISO-8601 (default: current local time)",
    )
    parser.add_argument(
        "--top",
        type=int,
        default=None,
        help="Number of next goals to list (default: from config, 3)",
    )
    parser.add_argument("--config", type=Path, default=None, help="Engine YAML config")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else config_from_env()
    except (OSError, yaml.YAMLError) as exc:
        return _error(f"Cannot load config {args.config}: {exc}")

    now = None
    if args.now:
        try:
            now = datetime.fromisoformat(args.now)
        except ValueError:
            return _error(f"Invalid --now value: {args.now}")

    try:
        state = read_state(args.state)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        return _error(f"Cannot read state {args.state}: {exc}")

    logger.debug("Computing priorities for %s", args.state)
    result = compute_priorities(state, now, args.top, config=config)
    print(json.dumps(_json_safe(result.to_dict()), indent=2, ensure_ascii=False))
    return 0
