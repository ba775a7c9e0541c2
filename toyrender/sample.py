"""Window-level state of a sample application."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

DEFAULT_NOTIFICATION = "Scaling:Up&Down Arrow, Wireframe mode: Key S"
_WARP_FLAGS = ("-warp", "/warp")


@dataclass
class Sample:
    """Viewport size, window title and adapter options of a sample."""

    width: int
    height: int
    title: str
    use_warp_device: bool = False
    notification: str = DEFAULT_NOTIFICATION

    def parse_command_line_args(self, argv: Sequence[str]) -> None:
        """Enable the software device for each ``-warp`` or ``/warp`` argument.

        The program name in ``argv[0]`` is skipped. An argument matches when it
        is a case-insensitive prefix of one of the flags.
        """
        for arg in argv[1:]:
            lowered = arg.lower()
            if any(flag.startswith(lowered) for flag in _WARP_FLAGS):
                self.use_warp_device = True
                self.title = f"{self.title} (WARP)"

    def on_resize(self, width: int, height: int) -> None:
        """Record the new viewport dimensions."""
        self.width = width
        self.height = height

    def window_text(self, text: str) -> str:
        """Return the window caption showing ``text`` after the title."""
        return f"{self.title}: {text} {self.notification}"