"""Paced outgoing CAN frame queue with activity indicators."""

from __future__ import annotations

import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

from rvbridge.packet import CanFrame

RECEIVE_QUEUE_SIZE = 10
SEND_QUEUE_SIZE = 8
SEND_PACKET_INTERVAL_MS = 50
MIN_SEND_PACKET_INTERVAL_MS = 5
LAST_SEND_TIME_MS = 1000
LAST_RECV_TIME_MS = 1000
PACKET_BLINK_TIME_MS = 25
HEARTBEAT_RATE_MS = 3000
HEARTBEAT_BLINK_TIME_MS = 10

Writer = Callable[[CanFrame], object]
Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class Indicators:
    """Which status lights should be lit."""

    send: bool
    heartbeat: bool
    receive: bool


class PacketQueue:
    """Outgoing frames sent in order, no faster than the bus pacing allows.

    ``writer`` receives each frame as it goes out; without one, sending is
    only simulated and reported on standard output. ``clock`` returns the
    current time in milliseconds.
    """

    capacity = SEND_QUEUE_SIZE - 1

    def __init__(self, writer: Writer | None = None, clock: Clock | None = None) -> None:
        self._writer = writer
        self._clock: Clock = clock if clock is not None else _monotonic_ms
        self._pending: deque[tuple[CanFrame, bool]] = deque()
        now = self._clock()
        self._last_send = now - LAST_SEND_TIME_MS
        self._last_recv = now - LAST_RECV_TIME_MS
        self._heartbeat_start = now

    def __len__(self) -> int:
        return len(self._pending)

    def _elapsed(self, since: float) -> float:
        return self._clock() - since

    def queue_packet(self, frame: CanFrame, short_gap: bool = False) -> None:
        """Add a frame to the queue, sending earlier frames while it is full."""
        if frame is None:
            raise ValueError("cannot queue a missing packet")
        while len(self._pending) >= self.capacity:
            self.process_queue()
        self._pending.append((frame, short_gap))

    def process_queue(self) -> CanFrame | None:
        """Send the next frame if its gap has passed; return the frame sent."""
        if not self._pending:
            return None
        frame, short_gap = self._pending[0]
        interval = MIN_SEND_PACKET_INTERVAL_MS if short_gap else SEND_PACKET_INTERVAL_MS
        if self._elapsed(self._last_send) < interval:
            return None
        if self._writer is not None:
            self._writer(frame)
        else:
            print(f"{int(self._clock())}: ***SIMULATE*** CAN-Bus Send Packet")
        self._pending.popleft()
        self._last_send = self._clock()
        return frame

    def packet_received(
        self,
        frame: CanFrame | None,
        handler: Callable[[CanFrame], object] | None = None,
    ) -> bool:
        """Hand a received frame to ``handler``, then service the send queue.

        Returns True when a frame was received.
        """
        received = False
        if frame is not None:
            if handler is not None:
                handler(frame)
            received = True
        self.process_queue()
        return received

    def clear_last_receive_time(self) -> None:
        """Mark that a frame has just been received."""
        self._last_recv = self._clock()

    def indicators(self, connected: bool = True) -> Indicators:
        """Current state of the send, heartbeat and receive lights."""
        send = self._elapsed(self._last_send) < PACKET_BLINK_TIME_MS
        receive = self._elapsed(self._last_recv) < PACKET_BLINK_TIME_MS
        if send or receive:
            # keep the heartbeat blink clear of the send/receive blinks
            self._heartbeat_start = self._clock() - HEARTBEAT_BLINK_TIME_MS
        beat = self._elapsed(self._heartbeat_start)
        if connected:
            heartbeat = (beat % HEARTBEAT_RATE_MS) < HEARTBEAT_BLINK_TIME_MS
        else:
            heartbeat = (beat % (HEARTBEAT_RATE_MS / 4)) > HEARTBEAT_BLINK_TIME_MS * 5
        return Indicators(send=send, heartbeat=heartbeat, receive=receive)