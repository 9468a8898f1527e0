"""Signal/drain coordination between async producers and one consumer.

Producers (concurrent directory reads) append to a shared buffer and
call ``signal()``. The consumer awaits ``wait()`` and then drains the
*whole* buffer, which is why signals are allowed to coalesce: a burst of
signals before the consumer wakes is equivalent to a single one.

Typical consumer loop::

    while True:
        more = await coordinator.wait()
        while buffer:
            yield buffer.pop()
        if not more:
            break
"""

import asyncio
import logging
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class CoordinatorState(Enum):
    """Lifecycle of a Coordinator."""
    IDLE = "idle"                         # No consumer waiting
    AWAITING_SIGNAL = "awaiting_signal"   # Consumer suspended in wait()
    REJECTED = "rejected"                 # Terminal: a producer failed
    CLOSED = "closed"                     # Terminal: no more signals will come


class Coordinator:
    """Condition-variable-like primitive for a single consumer.

    A signal sent while nobody waits is remembered and satisfies the next
    ``wait()``; it is never lost. Once rejected or closed the coordinator
    ignores further transitions. Must be created and used from a single
    event loop thread.
    """

    def __init__(self):
        self._state = CoordinatorState.IDLE
        self._wakeup = asyncio.Event()
        # Set while the consumer is suspended in wait() and once terminal
        self._demand = asyncio.Event()
        self._pending = False
        self._error: Optional[BaseException] = None

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def error(self) -> Optional[BaseException]:
        """The failure stored by ``fail()``, if any."""
        return self._error

    @property
    def is_closed(self) -> bool:
        return self._state is CoordinatorState.CLOSED

    @property
    def is_rejected(self) -> bool:
        return self._state is CoordinatorState.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self._state in (CoordinatorState.REJECTED, CoordinatorState.CLOSED)

    async def wait(self) -> bool:
        """Suspend until the next signal, failure or close.

        Returns:
            True after a signal (drain the buffer and wait again),
            False once closed (drain the buffer one last time and stop)

        Raises:
            The error passed to ``fail()``, on this and every later call
        """
        while True:
            if self._state is CoordinatorState.REJECTED:
                raise self._error

            if self._pending:
                self._pending = False
                self._wakeup.clear()
                return True

            if self._state is CoordinatorState.CLOSED:
                return False

            self._state = CoordinatorState.AWAITING_SIGNAL
            self._wakeup.clear()
            self._demand.set()
            try:
                await self._wakeup.wait()
            finally:
                # Re-arm; terminal transitions made while waiting stay
                if self._state is CoordinatorState.AWAITING_SIGNAL:
                    self._state = CoordinatorState.IDLE
                    self._demand.clear()

    async def demanded(self) -> None:
        """Suspend until the consumer is waiting for more results.

        Producers call this before starting more work while undelivered
        results are buffered, so a consumer that stops pulling (without
        closing the iteration) also stops the reads. Returns at once after
        ``fail()`` or ``close()``.
        """
        await self._demand.wait()

    def signal(self) -> None:
        """Wake the current waiter (if any); new results may be buffered."""
        if self.is_terminal:
            return
        self._pending = True
        self._wakeup.set()

    def fail(self, error: BaseException) -> None:
        """Reject: the current and all future waits raise ``error``."""
        if self.is_terminal:
            logger.debug("Ignoring failure after %s: %r", self._state.value, error)
            return
        self._error = error
        self._state = CoordinatorState.REJECTED
        self._wakeup.set()
        self._demand.set()

    def close(self) -> None:
        """Announce that no further signals will arrive."""
        if self.is_terminal:
            return
        self._state = CoordinatorState.CLOSED
        self._wakeup.set()
        self._demand.set()

    def __repr__(self) -> str:
        return f"Coordinator(state={self._state.value}, pending={self._pending})"
