# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs exactly one command and maps the
outcome to an exit status:
- 0 on success,
- 1 when the command failed (bad input, unknown id, unreadable/corrupt/unwritable file),
- 2 on usage errors (missing/unknown command, wrong argument count).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import UsageError, format_error, registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.errors import TaskTrackerError
from ..tasks.task_api import Clock
from ..tasks.task_models import utc_now

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def main(
    argv: Sequence[str] | None = None,
    *,
    settings=None,
    clock: Clock = utc_now,
    configure_logging: bool = True,
) -> int:
    if argv is None:
        argv = sys.argv[1:]
    if settings is None:
        settings = get_settings()

    if configure_logging:
        level_name = str(getattr(settings, "log_level", "WARNING")).upper()
        console_level = getattr(logging, level_name, logging.WARNING)
        setup_logging(console_level=console_level, log_dir=getattr(settings, "log_dir", None))

    state = create_initial_state(settings=settings, clock=clock)

    try:
        reply = registry.handle(state, list(argv))
    except UsageError as e:
        logger.debug("Usage error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        print(registry.build_help(), file=sys.stderr)
        return EXIT_USAGE
    except TaskTrackerError as e:
        logger.info("Command %s failed: %s", argv[0] if argv else "", e)
        print(format_error(e), file=sys.stderr)
        return EXIT_FAILURE

    print(reply)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
