"""Chat adapter abstraction."""

from __future__ import annotations

import abc
import asyncio
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

Payload = Optional[Dict[str, Any]]
ReplyCallback = Callable[[Payload, Optional[str]], Any]


class PendingResponse:
    """One-shot completion handle for an outstanding API request.

    A response settles exactly once, either with a payload or with an error
    text. The optional callback runs synchronously when it settles; settling
    twice raises ``RuntimeError``.
    """

    def __init__(self, method: str, callback: Optional[ReplyCallback] = None) -> None:
        self.method = method
        self._callback = callback
        self._outcome: Optional[Tuple[Payload, Optional[str]]] = None
        self._settled = asyncio.Event()

    @property
    def done(self) -> bool:
        return self._outcome is not None

    @property
    def has_callback(self) -> bool:
        return self._callback is not None

    def resolve(self, payload: Payload) -> None:
        self._settle(payload, None)

    def reject(self, error: str) -> None:
        self._settle(None, error)

    async def wait(self) -> Tuple[Payload, Optional[str]]:
        """Wait until the response settles and return ``(payload, error)``."""
        await self._settled.wait()
        assert self._outcome is not None
        return self._outcome

    def _settle(self, payload: Payload, error: Optional[str]) -> None:
        if self._outcome is not None:
            raise RuntimeError(f"Response for {self.method} already delivered")
        self._outcome = (payload, error)
        self._settled.set()
        if self._callback is not None:
            self._callback(payload, error)


class IChatAdapter(abc.ABC):
    """Abstraction for the remote messaging API."""

    @abc.abstractmethod
    def post(
        self,
        method: str,
        fields: Mapping[str, str],
        callback: Optional[ReplyCallback] = None,
    ) -> PendingResponse:
        """Issue an API request without blocking.

        Returns:
            The handle that settles when the reply (or an error) arrives.
        """

    @abc.abstractmethod
    async def close(self) -> None:
        """Wait for outstanding requests and release the transport."""
