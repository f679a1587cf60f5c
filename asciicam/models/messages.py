from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from asciicam.models.wire import WireModel
from asciicam.models.options import MAX_SCREEN_SIZE, WHITESPACE_MAX, WHITESPACE_MIN, RenderOptions

# ===== Client -> Server messages =====
# One message per user input event; every one of them goes through the dispatcher.


class SetShowVideo(WireModel):
    type: Literal["setShowVideo"]
    value: bool


class SetColoured(WireModel):
    type: Literal["setColoured"]
    value: bool


class SetReversed(WireModel):
    type: Literal["setReversed"]
    value: bool


class SetWhitespace(WireModel):
    type: Literal["setWhitespace"]
    value: int = Field(ge=WHITESPACE_MIN, le=WHITESPACE_MAX)


class Reset(WireModel):
    type: Literal["reset"]


# Sent by the page on connect with window.screen dimensions
class Screen(WireModel):
    type: Literal["screen"]
    width: int = Field(gt=0, le=MAX_SCREEN_SIZE)
    height: int = Field(gt=0, le=MAX_SCREEN_SIZE)


ClientMessage = Annotated[
    Union[
        SetShowVideo,
        SetColoured,
        SetReversed,
        SetWhitespace,
        Reset,
        Screen,
    ],
    Field(discriminator="type"),
]


# ===== Server -> Client messages =====


class OptionsState(WireModel):
    type: Literal["options"] = "options"
    show_video: bool
    coloured: bool
    reversed: bool
    whitespace: int
    whitespace_label: str

    @classmethod
    def from_options(cls, options: RenderOptions) -> "OptionsState":
        return cls(
            show_video=options.show_video,
            coloured=options.coloured,
            reversed=options.reversed,
            whitespace=options.whitespace,
            whitespace_label=options.whitespace_label,
        )


class Frame(WireModel):
    type: Literal["frame"] = "frame"
    html: str
    # JPEG data URL of the raw frame, only while the raw video is shown
    video: str | None = None


class Error(WireModel):
    type: Literal["error"] = "error"
    detail: str
