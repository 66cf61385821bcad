"""Callback-style access to a Right Track database.

Some callers are written against the ``callback(error, result)`` convention
rather than awaiting ``select``/``get``. These helpers schedule the query on
the running event loop, return immediately, and invoke the callback exactly
once: ``callback(None, result)`` on success or ``callback(error, None)`` on
failure.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, Callable, TypeVar

from right_track_db.db.base import RightTrackDB, Row
from right_track_db.errors import QueryError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SelectCallback = Callable[[QueryError | None, list[Row] | None], Any]
GetCallback = Callable[[QueryError | None, Row | None], Any]


async def _deliver(
    query: Awaitable[T],
    callback: Callable[[QueryError | None, T | None], Any],
    *,
    statement: str,
    operation: str,
) -> None:
    try:
        result = await query
    except QueryError as exc:
        error = exc
    except Exception as exc:
        error = QueryError(f"{operation} failed: {exc}", statement=statement)
        error.__cause__ = exc
    else:
        callback(None, result)
        return

    logger.warning("%s failed for statement %r: %s", operation, statement, error)
    callback(error, None)


# The loop only keeps weak references to tasks; hold them until they finish.
_pending: set[asyncio.Task] = set()


def _schedule(query: Callable[[], Awaitable[T]], callback: Callable[..., Any], **kwargs: str) -> asyncio.Task:
    loop = asyncio.get_running_loop()
    task = loop.create_task(_deliver(query(), callback, **kwargs))
    _pending.add(task)
    task.add_done_callback(_pending.discard)
    return task


def select_with_callback(db: RightTrackDB, statement: str, callback: SelectCallback) -> asyncio.Task:
    """Select multiple rows and pass them to ``callback``.

    Must be called while an event loop is running; raises RuntimeError otherwise.
    """
    return _schedule(lambda: db.select(statement), callback, statement=statement, operation="select")


def get_with_callback(db: RightTrackDB, statement: str, callback: GetCallback) -> asyncio.Task:
    """Select a single row and pass it to ``callback``.

    Must be called while an event loop is running; raises RuntimeError otherwise.
    """
    return _schedule(lambda: db.get(statement), callback, statement=statement, operation="get")
