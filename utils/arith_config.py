"""
Central arithmetic switches for the Complex stack.

Two settings live here:

* the *mode* – 'faithful' reproduces the historical operator behaviour
  (subtraction adds, != needs both parts to differ, <= / >= follow the
  old predicate table); 'corrected' gives the conventional readings.
* the mpmath decimal places used when an engine cross-checks a result.

Callers (or tests) may change them with set_mode() / set_dps(); everything
else should only *read* them through get_mode() / get_dps().
"""
from contextlib import contextmanager
from typing import Iterator, List

from mpmath import mp

FAITHFUL = 'faithful'
CORRECTED = 'corrected'

_MODES: List[str] = [FAITHFUL, CORRECTED]
_PRESETS: List[int] = [30, 50, 100]                # default + 2 bigger ones

_MODE = FAITHFUL
_CURRENT_DPS = _PRESETS[0]


def get_mode() -> str:
    """Return the active operator mode."""
    return _MODE


def set_mode(value: str) -> None:
    """Switch operator mode if value is a known one."""
    global _MODE
    if value not in _MODES:
        raise ValueError(f"mode {value!r} not allowed; choose one of {_MODES}")
    _MODE = value


def modes() -> List[str]:
    return _MODES.copy()


def is_faithful() -> bool:
    return _MODE == FAITHFUL


@contextmanager
def use_mode(value: str) -> Iterator[str]:
    """Temporarily switch mode, restoring the previous one on exit."""
    previous = get_mode()
    set_mode(value)
    try:
        yield value
    finally:
        set_mode(previous)


def get_dps() -> int:
    """Return the decimal places used for mpmath verification."""
    return _CURRENT_DPS


def set_dps(value: int) -> None:
    """Set verification precision if value is one of the approved presets."""
    global _CURRENT_DPS
    if value not in _PRESETS:
        raise ValueError(f"dps {value} not allowed; choose one of {_PRESETS}")
    _CURRENT_DPS = value
    mp.dps = value


def presets() -> List[int]:
    return _PRESETS.copy()
