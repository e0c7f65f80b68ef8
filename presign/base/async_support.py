"""
Awaitable variants of the presign operations.

Signing is local and listing buckets is a single blocking boto3 call, so
the canonical implementations stay synchronous. :class:`AsyncMixin`
derives ``a<name>`` coroutines from them that run the call in a worker
thread with :func:`asyncio.to_thread`, keeping the event loop free::

    class PresignService(AsyncMixin):
        async_methods = ("list_buckets",)

        def list_buckets(self) -> list[str]: ...

    names = await service.alist_buckets()
"""

from __future__ import annotations

import asyncio
import functools
import inspect
from typing import Any, Callable, ClassVar, Coroutine, TypeVar

T = TypeVar("T")


def async_wrap(
    fn: Callable[..., T],
) -> Callable[..., Coroutine[Any, Any, T]]:
    """Return a coroutine function that runs *fn* in a worker thread.

    Name, docstring and signature metadata of *fn* are preserved.
    """

    @functools.wraps(fn)
    async def _wrapper(*args: Any, **kwargs: Any) -> T:
        return await asyncio.to_thread(fn, *args, **kwargs)

    return _wrapper


class AsyncMixin:
    """Generate ``a<name>`` coroutines for the methods listed in ``async_methods``.

    The coroutines are attached once, when the subclass is defined. A
    subclass that already defines ``a<name>`` keeps its own version.
    """

    async_methods: ClassVar[tuple[str, ...]] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in cls.async_methods:
            method = getattr(cls, name, None)
            if method is None or not callable(method):
                raise TypeError(f"{cls.__name__}.{name} is not a method")
            if inspect.iscoroutinefunction(method):
                raise TypeError(f"{cls.__name__}.{name} is already a coroutine")
            async_name = f"a{name}"
            if async_name not in vars(cls):
                setattr(cls, async_name, async_wrap(method))
