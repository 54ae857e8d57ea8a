from __future__ import annotations

import asyncio


class CancellationToken:
    """A cooperative cancellation signal.

    The queue consumer owns the token and cancels it when the request lifetime
    ends. Actions poll it (or await ``wait()``) and stop by raising
    ``asyncio.CancelledError``, so cancellation never looks like a returned stage.
    """

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        """Signal cancellation. Call on the event loop's thread; see ``cancel_threadsafe``."""

        self._event.set()

    def cancel_threadsafe(self, loop: asyncio.AbstractEventLoop) -> None:
        """Signal cancellation from a thread other than the one running ``loop``."""

        loop.call_soon_threadsafe(self._event.set)

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise asyncio.CancelledError("Workflow step cancelled")

    async def wait(self) -> None:
        await self._event.wait()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled})"
