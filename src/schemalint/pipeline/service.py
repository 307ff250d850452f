"""Pipeline orchestration service."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TextIO

from schemalint.common import RunConfig, RunOutcome
from schemalint.config import find_config, load_run_config
from schemalint.engine import build_registry, evaluate
from schemalint.extractor import get_extractor
from schemalint.observability import get_logger
from schemalint.reporter import ConsoleReporter, write_json_report
from schemalint.rules import Rule, load_plugin_rules

logger = get_logger(__name__)


def load_config(config_path: Path | None = None) -> RunConfig:
    """Loads the given config, or discovers one in the working directory."""
    path = config_path if config_path is not None else find_config(Path.cwd())
    logger.info("using configuration %s", path)
    return load_run_config(path)


def run_lint(
    config_path: Path | None = None,
    report_path: Path | None = None,
    *,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> RunOutcome:
    """Loads configuration, plugins and extractor, then runs the engine once."""

    config = load_config(config_path)
    base_dir = _base_dir(config)
    plugin_rules = load_plugin_rules(config.plugins, base_dir)
    extractor = get_extractor(config.connection, base_dir)

    reporter = ConsoleReporter(stream=stream)
    outcome = asyncio.run(
        evaluate(config, extractor, plugin_rules=plugin_rules, sink=reporter.report)
    )
    reporter.summarize(outcome, out=out)

    if report_path is not None:
        write_json_report(report_path, outcome)
        logger.info("report written: %s", report_path)

    return outcome


def list_rules(config_path: Path | None = None) -> list[Rule]:
    """Returns built-in rules plus those contributed by configured plugins."""

    plugin_rules: list[dict[str, Rule]] = []
    if config_path is not None:
        config = load_run_config(config_path)
        plugin_rules = load_plugin_rules(config.plugins, _base_dir(config))
    return list(build_registry(plugin_rules=plugin_rules))


def _base_dir(config: RunConfig) -> Path:
    return Path(config.base_dir) if config.base_dir else Path.cwd()
