"""Entry point for the schemalint CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from schemalint.cli import build_parser
from schemalint.common import ExtractionError, UserInputError
from schemalint.observability import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    log_config = getattr(args, "log_config", None)
    setup_logging(Path(log_config) if log_config else None)

    handler = getattr(args, "handler", None)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return int(handler(args))
    except UserInputError as exc:
        logger.error("%s", exc)
        return 1
    except ExtractionError as exc:
        logger.error("extraction failed: %s", exc)
        return 1
    except OSError as exc:
        logger.error("filesystem error: %s", exc)
        return 1
    except Exception as exc:
        logger.error("evaluation failed: %s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
