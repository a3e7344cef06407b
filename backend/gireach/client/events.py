"""In-process publish/subscribe bus standing in for browser-wide window events."""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

logger = logging.getLogger(__name__)

Listener = Callable[[Dict[str, Any]], None]


class EventBus:
    def __init__(self):
        self._listeners: Dict[str, List[Listener]] = {}

    def on(self, event: str, listener: Listener) -> None:
        self._listeners.setdefault(event, []).append(listener)

    def off(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def emit(self, event: str, detail: Dict[str, Any]) -> None:
        """Call every listener for ``event`` now, in subscription order.

        A failing listener is logged and does not stop the others.
        """
        for listener in list(self._listeners.get(event, [])):
            try:
                listener(detail)
            except Exception:
                logger.exception("[events] listener for %s failed", event)

    def emit_later(self, event: str, detail: Dict[str, Any], delay: float) -> Optional[asyncio.Handle]:
        """Schedule ``emit`` on the running loop; a zero delay still defers to the next loop iteration."""
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.warning("[events] no running loop, emitting %s immediately", event)
            self.emit(event, detail)
            return None
        if delay <= 0:
            return loop.call_soon(self.emit, event, detail)
        return loop.call_later(delay, self.emit, event, detail)
