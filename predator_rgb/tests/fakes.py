from __future__ import annotations

from predator_rgb.core.protocol import CommandFrame


class FakeTransport:
    """Records frames instead of writing them; optionally fails at a given index."""

    def __init__(self, *, fail_at: int | None = None, exc: OSError | None = None) -> None:
        self.frames: list[CommandFrame] = []
        self.fail_at = fail_at
        self.exc = exc or OSError(5, "Input/output error")
        self.closed = False
        self.attempts = 0

    def write(self, frame: CommandFrame) -> None:
        index = self.attempts
        self.attempts += 1
        if self.fail_at is not None and index == self.fail_at:
            raise self.exc
        self.frames.append(frame)

    def close(self) -> None:
        self.closed = True
