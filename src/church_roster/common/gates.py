from __future__ import annotations

from typing import Callable

# Yes/no confirmation asked before a destructive change. Declining cancels it.
Confirm = Callable[[str], bool]


def approve(_message: str) -> bool:
    return True


def decline(_message: str) -> bool:
    return False
