"""Logging role for action execution."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ..core.context import Context
from ..core.role import ActionRole, Next

if TYPE_CHECKING:
    from ..core.action import Action

logger = logging.getLogger("actionrole.roles")


class Logging(ActionRole):
    """Log action execution with timing.

    Logs at INFO level for successful calls and with the traceback on
    exceptions. Duration is stored in the stash as 'duration_ms'.

    Args:
        logger_name: Logger to use (defaults to actionrole.roles)
        log_args: Whether to include request args in the log

    Example:
        >>> class Bar(Controller):
        ...     @action(does="Logging")
        ...     def foo(self, ctx): ...
    """

    logger_name: str = "actionrole.roles"
    log_args: bool = False

    async def around(self, next: Next, action: Action, controller: object, ctx: Context, *args: object) -> object:
        log = logging.getLogger(self.logger_name)
        start = time.perf_counter()

        arg_str = f" args={args!r}" if self.log_args else ""
        log.info(f"[{action.reverse}] Starting{arg_str}")

        try:
            result = await next(action, controller, ctx, *args)
        except Exception as e:
            ctx["duration_ms"] = (time.perf_counter() - start) * 1000
            log.exception(f"[{action.reverse}] EXCEPTION ({ctx['duration_ms']:.1f}ms): {e}")
            raise

        ctx["duration_ms"] = (time.perf_counter() - start) * 1000
        log.info(f"[{action.reverse}] OK ({ctx['duration_ms']:.1f}ms)")
        return result
