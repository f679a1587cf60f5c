from __future__ import annotations

import logging

from asciicam.models.options import DEFAULT_OPTIONS, RenderOptions

logger = logging.getLogger(__name__)


class OptionsStore:
    """Holds the current RenderOptions and the defaults they reset to.

    Storage only: whoever calls a setter is responsible for rebuilding the
    ramp and the capture afterwards.
    """

    def __init__(self, defaults: RenderOptions = DEFAULT_OPTIONS) -> None:
        self.defaults = defaults
        self._current = defaults

    @property
    def current(self) -> RenderOptions:
        return self._current

    def _update(self, **changes) -> RenderOptions:
        # model_validate rather than model_copy so bounds are re-checked
        data = self._current.model_dump()
        data.update(changes)
        self._current = RenderOptions.model_validate(data)
        logger.debug("options changed: %s", changes)
        return self._current

    def set_show_video(self, value: bool) -> RenderOptions:
        return self._update(show_video=value)

    def set_coloured(self, value: bool) -> RenderOptions:
        return self._update(coloured=value)

    def set_reversed(self, value: bool) -> RenderOptions:
        return self._update(reversed=value)

    def set_whitespace(self, value: int) -> RenderOptions:
        return self._update(whitespace=value)

    def reset(self) -> RenderOptions:
        self._current = self.defaults
        logger.debug("options reset to defaults")
        return self._current
