"""Conversation sessions: transcript ownership and delayed bot replies.

A session belongs to one open chat widget. Every reply is delivered by a
``loop.call_later`` callback tagged with the session epoch at scheduling
time; ``open`` and ``close`` advance the epoch, so a callback that outlives
its conversation finds a newer epoch and does nothing.
"""

import asyncio
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from .engines import Engine, Mode
from .logging import get_logger
from .models import Message

Listener = Callable[[Message], None]


class ConversationSession:
    def __init__(
        self,
        engine: Engine,
        reply_delay: Optional[float] = None,
        loop: Optional[asyncio.AbstractEventLoop] = None,
    ):
        self.engine = engine
        self.reply_delay = engine.reply_delay if reply_delay is None else reply_delay
        self.input_buffer = ""
        self._loop = loop
        self._mode: Optional[Mode] = None
        self._epoch = 0
        self._messages: List[Message] = []
        # Replies wait here in send order; each timer delivers the oldest one
        self._pending: Deque[str] = deque()
        self._timers: Deque[asyncio.TimerHandle] = deque()
        self._listeners: List[Listener] = []
        self._idle = asyncio.Event()
        self._idle.set()
        self._log = get_logger(__name__).bind(engine=engine.name)

    # =========================
    # State
    # =========================
    @property
    def messages(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def mode(self) -> Optional[str]:
        return self._mode.name if self._mode else None

    @property
    def title(self) -> Optional[str]:
        return self._mode.title if self._mode else None

    @property
    def is_open(self) -> bool:
        return self._mode is not None

    @property
    def epoch(self) -> int:
        return self._epoch

    @property
    def pending(self) -> int:
        return len(self._pending)

    @property
    def can_send(self) -> bool:
        return bool(self.input_buffer.strip())

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with every message appended to the transcript.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # =========================
    # Lifecycle
    # =========================
    def open(self, mode: Optional[str] = None) -> Message:
        selected = self.engine.mode(mode)
        self._reset()
        self._mode = selected
        self._log.info("session_opened", mode=selected.name, epoch=self._epoch)
        greeting = Message.from_bot(selected.greeting)
        self._append(greeting)
        return greeting

    def close(self) -> None:
        dropped = len(self._pending)
        self._reset()
        self._mode = None
        self.input_buffer = ""
        self._log.info("session_closed", epoch=self._epoch, dropped_replies=dropped)

    def _reset(self) -> None:
        self._epoch += 1
        while self._timers:
            self._timers.popleft().cancel()
        self._pending.clear()
        self._messages.clear()
        self._idle.set()

    # =========================
    # Sending
    # =========================
    def send(self, text: str) -> Optional[Message]:
        if self._mode is None or not (text or "").strip():
            return None

        loop = self._loop or asyncio.get_running_loop()
        message = Message.from_user(text)
        self._append(message)

        self._pending.append(self._mode.reply(text))
        self._idle.clear()
        self._timers.append(loop.call_later(self.reply_delay, self._deliver, self._epoch))
        self._log.debug("message_sent", mode=self._mode.name, pending=len(self._pending))
        return message

    def submit(self) -> Optional[Message]:
        if not self.can_send:
            return None
        text, self.input_buffer = self.input_buffer, ""
        return self.send(text)

    def handle_key(self, key: str, shift: bool = False) -> Optional[Message]:
        if self.engine.should_submit(key, shift):
            return self.submit()
        return None

    async def wait_idle(self) -> None:
        await self._idle.wait()

    def _deliver(self, epoch: int) -> None:
        if epoch != self._epoch or not self._pending:
            self._log.debug("stale_reply_dropped", scheduled_epoch=epoch, epoch=self._epoch)
            return
        if self._timers:
            self._timers.popleft()
        reply = Message.from_bot(self._pending.popleft())
        if not self._pending:
            self._idle.set()
        self._append(reply)
        self._log.debug("reply_delivered", mode=self.mode, pending=len(self._pending))

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        for listener in list(self._listeners):
            listener(message)
