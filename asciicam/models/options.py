from __future__ import annotations

from pydantic import ConfigDict, Field

from asciicam.models.wire import WireModel

WHITESPACE_MIN = 0
WHITESPACE_MAX = 50
# Largest screen dimension a page may report, in pixels
MAX_SCREEN_SIZE = 16384


class RenderOptions(WireModel):
    """The four user-adjustable settings. Immutable; changes produce a new instance."""

    model_config = ConfigDict(frozen=True)

    show_video: bool = False
    coloured: bool = False
    reversed: bool = False
    whitespace: int = Field(default=15, ge=WHITESPACE_MIN, le=WHITESPACE_MAX)

    @property
    def whitespace_label(self) -> str:
        return f"Whitespace: {self.whitespace}"


DEFAULT_OPTIONS = RenderOptions()
