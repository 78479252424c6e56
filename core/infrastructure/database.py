"""
Database utilities and transaction management.
"""

from typing import Any, Callable, TypeVar

from asgiref.sync import sync_to_async
from django.db import transaction

T = TypeVar("T")


async def run_in_transaction(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """
    Run a synchronous ORM callable inside a single database transaction.

    Any exception raised by ``func`` rolls back every write it made.

    Usage:
        await run_in_transaction(apply_updates, entries)
    """

    def _atomic() -> T:
        with transaction.atomic():
            return func(*args, **kwargs)

    return await sync_to_async(_atomic)()
