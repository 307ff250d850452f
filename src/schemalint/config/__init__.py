"""Run configuration."""

from .loader import DEFAULT_CONFIG_NAMES, find_config, load_run_config, run_config_from_dict

__all__ = ["DEFAULT_CONFIG_NAMES", "find_config", "load_run_config", "run_config_from_dict"]
