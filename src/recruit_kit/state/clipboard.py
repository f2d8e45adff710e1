"""Copy-to-clipboard action with a short-lived acknowledgement."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Protocol


class Clipboard(Protocol):
    def write_text(self, text: str) -> None: ...


class CopyAction:
    """Writes text to a clipboard and reports ``copied`` for a few seconds.

    The acknowledgement is read against ``clock``, so it turns false on its
    own once ``ack_seconds`` have passed since the last copy.
    """

    def __init__(
        self,
        clipboard: Clipboard,
        *,
        ack_seconds: float = 2.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.clipboard = clipboard
        self.ack_seconds = ack_seconds
        self._clock = clock
        self._copied_at: float | None = None

    def copy(self, text: str) -> None:
        self.clipboard.write_text(text)
        self._copied_at = self._clock()

    @property
    def copied(self) -> bool:
        if self._copied_at is None:
            return False
        return self._clock() - self._copied_at < self.ack_seconds
