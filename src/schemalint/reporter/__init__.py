"""Reporter module."""

from .service import ConsoleReporter, write_json_report

__all__ = ["ConsoleReporter", "write_json_report"]
