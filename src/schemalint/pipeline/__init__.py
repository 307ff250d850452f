"""Pipeline module."""

from .service import list_rules, load_config, run_lint

__all__ = ["list_rules", "load_config", "run_lint"]
