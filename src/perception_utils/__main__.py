"""perception_utils CLI entry point.

Selects the most probable label from a set of classification hypotheses.

Usage:
    python -m perception_utils CAR:0.5 TRUCK:0.8 BUS:0.7
    python -m perception_utils --input hypotheses.yaml
    python -m perception_utils --json CAR:0.8 TRUCK:0.8
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml
from omegaconf import OmegaConf
from pydantic import ValidationError

from perception_utils.classification.object_classification import (
    convert_label_to_string,
    get_highest_prob_classification,
    is_vehicle,
    to_object_classification,
)
from perception_utils.core.config import PerceptionConfig
from perception_utils.core.config_schema import OutputConfig
from perception_utils.core.types import Classification, InvalidLabelName
from perception_utils.utils.logging import setup_logging

logger = logging.getLogger("perception_utils.cli")

DEFAULT_CONFIG = "config/default.yaml"


def parse_hypothesis(token: str) -> Classification:
    """Parse a ``LABEL:PROB`` token."""
    name, sep, prob = token.rpartition(":")
    if not sep:
        raise ValueError(f"Expected LABEL:PROB, got {token!r}")
    return to_object_classification(name, float(prob))


def load_hypotheses(path: str | Path) -> list[Classification]:
    """Load a YAML/JSON list of ``{label, probability}`` records.

    A mapping with a ``classifications`` key is also accepted.
    """
    data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
    if isinstance(data, dict):
        data = data.get("classifications", [])
    return [Classification.from_dict(record) for record in data]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perception_utils",
        description="Select the most probable object label from classification hypotheses",
    )
    parser.add_argument(
        "hypotheses",
        nargs="*",
        help="Hypotheses as LABEL:PROB, in insertion order (e.g. CAR:0.5 TRUCK:0.8)",
    )
    parser.add_argument(
        "--input",
        "-i",
        default=None,
        help="YAML or JSON file holding a list of {label, probability} records",
    )
    parser.add_argument(
        "--config",
        "-c",
        default=None,
        help=f"Path to configuration YAML file (default: {DEFAULT_CONFIG})",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Set logging level",
    )
    parser.add_argument(
        "--validate-config",
        action="store_true",
        default=False,
        help="Validate config against Pydantic schema before running",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path to log file (default: no file logging)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Output logs as JSON instead of human-readable",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Load config; the implicit default path may be absent
    config = PerceptionConfig(args.config or DEFAULT_CONFIG)
    try:
        if args.config is None and not Path(DEFAULT_CONFIG).exists():
            cfg = config.load_defaults()
        else:
            cfg = config.load(validate=args.validate_config)
    except FileNotFoundError:
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    if args.json:
        config.override("perception_utils.output.format", "json")

    # Output settings are validated even without --validate-config
    raw_output = OmegaConf.select(cfg, "perception_utils.output", default=None)
    try:
        output = OutputConfig.model_validate(
            {} if raw_output is None else OmegaConf.to_container(raw_output, resolve=True)
        )
    except ValidationError as e:
        print(f"Error: Config validation failed:\n{e}", file=sys.stderr)
        return 1

    root = cfg.get("perception_utils", {})
    system = root.get("system", {})
    log_level = args.log_level or system.get("log_level", "INFO")
    log_file = args.log_file or system.get("log_file", None)
    log_json = args.log_json or system.get("log_json", False)
    setup_logging(log_level, log_file=log_file, log_json=log_json)

    try:
        classifications: list[Classification] = []
        if args.input is not None:
            classifications.extend(load_hypotheses(args.input))
        classifications.extend(parse_hypothesis(t) for t in args.hypotheses)
    except InvalidLabelName as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, KeyError, TypeError, ValueError, yaml.YAMLError) as e:
        print(f"Error: Could not read hypotheses: {e}", file=sys.stderr)
        return 1

    best = get_highest_prob_classification(classifications)
    logger.debug("Selected %s from %d hypotheses", best.label.name, len(classifications))

    if output.format == "json":
        result = best.to_dict()
        result["is_vehicle"] = is_vehicle(best)
        print(json.dumps(result))
    else:
        print(f"{convert_label_to_string(best)} {best.probability:.{output.precision}f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
