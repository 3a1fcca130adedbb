"""Invoke helpers — call sync or async handlers uniformly.

Muxer handlers can be ``def`` or ``async def``. Any code that calls a
user-provided handler must handle both cases, so the check lives here.

Usage::

    from muxer._internal.invoke import invoke

    result = await invoke(handler, request)
"""

import functools
import inspect
from typing import Any

import anyio.to_thread


async def invoke(handler: Any, *args: Any, **kwargs: Any) -> Any:
    """Call a handler and await the result.

    Coroutine functions are awaited on the event loop. Plain callables
    run in a worker thread so a blocking handler cannot stall other
    requests::

        def profile(request):
            return {"id": request.path_params["id"]}

        async def profile(request):
            user = await load_user(request.path_params["id"])
            return {"id": user.id}
    """
    if inspect.iscoroutinefunction(handler):
        return await handler(*args, **kwargs)

    result = await anyio.to_thread.run_sync(functools.partial(handler, *args, **kwargs))
    if inspect.isawaitable(result):
        result = await result
    return result

