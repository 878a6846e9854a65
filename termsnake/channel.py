"""Zero-capacity channel handing commands from the input thread to the game loop.

A send completes only once the receiving side has taken the value, so at most
one command is ever in flight and nothing is queued or dropped. The receiving
side may poll without blocking.
"""

from __future__ import annotations

import threading
from typing import Generic, Optional, Tuple, TypeVar

T = TypeVar("T")


class ChannelError(Exception):
    """Base class for channel errors."""


class Empty(ChannelError):
    """Nothing is being offered right now."""


class Disconnected(ChannelError):
    """The other end of the channel has been closed."""


class _Slot(Generic[T]):
    def __init__(self) -> None:
        self.cond = threading.Condition()
        self.item: Optional[T] = None
        self.offered = False
        self.sent = 0
        self.received = 0
        self.sender_closed = False
        self.receiver_closed = False

    def take(self) -> T:
        item = self.item
        self.item = None
        self.offered = False
        self.received += 1
        self.cond.notify_all()
        return item  # type: ignore[return-value]


class Sender(Generic[T]):
    """Sending end of a rendezvous channel."""

    def __init__(self, slot: _Slot[T]) -> None:
        self._slot = slot

    def send(self, item: T) -> None:
        """Offer ``item`` and block until the receiver has taken it.

        Raises :class:`Disconnected` if the receiver is or becomes closed
        before taking the item.
        """

        slot = self._slot
        with slot.cond:
            if slot.sender_closed:
                raise ValueError("send on a closed sender")
            slot.cond.wait_for(lambda: not slot.offered or slot.receiver_closed)
            if slot.receiver_closed:
                raise Disconnected("receiver closed")
            slot.item = item
            slot.offered = True
            slot.sent += 1
            ticket = slot.sent
            slot.cond.notify_all()
            slot.cond.wait_for(lambda: slot.received >= ticket or slot.receiver_closed)
            if slot.received < ticket:
                slot.item = None
                slot.offered = False
                raise Disconnected("receiver closed before taking the item")

    def close(self) -> None:
        with self._slot.cond:
            self._slot.sender_closed = True
            self._slot.cond.notify_all()

    @property
    def closed(self) -> bool:
        return self._slot.sender_closed

    def __enter__(self) -> "Sender[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class Receiver(Generic[T]):
    """Receiving end of a rendezvous channel."""

    def __init__(self, slot: _Slot[T]) -> None:
        self._slot = slot

    def try_recv(self) -> T:
        """Take the offered item without blocking.

        Raises :class:`Empty` when nothing is offered and :class:`Disconnected`
        when nothing is offered and the sender has been closed.
        """

        slot = self._slot
        with slot.cond:
            if slot.offered:
                return slot.take()
            if slot.sender_closed:
                raise Disconnected("sender closed")
            raise Empty()

    def recv(self, timeout: Optional[float] = None) -> T:
        """Block until an item is offered, the sender closes or ``timeout`` expires."""

        slot = self._slot
        with slot.cond:
            ready = slot.cond.wait_for(lambda: slot.offered or slot.sender_closed, timeout)
            if slot.offered:
                return slot.take()
            if ready:
                raise Disconnected("sender closed")
            raise Empty()

    def close(self) -> None:
        with self._slot.cond:
            self._slot.receiver_closed = True
            self._slot.cond.notify_all()

    @property
    def closed(self) -> bool:
        return self._slot.receiver_closed

    def __enter__(self) -> "Receiver[T]":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def channel() -> Tuple[Sender, Receiver]:
    """Create a connected ``(sender, receiver)`` pair."""

    slot: _Slot = _Slot()
    return Sender(slot), Receiver(slot)
