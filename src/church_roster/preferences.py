from __future__ import annotations

from .core.enums import Theme
from .core.exceptions import ValidationError
from .state import AppState


class ThemeService:
    def __init__(self, state: AppState):
        self._state = state

    def get(self) -> Theme:
        return self._state.theme

    def set(self, value: str) -> Theme:
        try:
            theme = Theme(value)
        except ValueError as e:
            raise ValidationError(f"theme must be 'light' or 'dark', got {value!r}") from e
        self._state.set_theme(theme)
        return theme
