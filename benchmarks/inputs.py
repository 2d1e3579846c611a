from __future__ import annotations

from typing import Final

import pytest

SMALL: Final[str] = "(a b c d e)"

MEDIUM: Final[str] = (
    '(node (kind "widget") (id 42) (pos 12.5 -3.2) (size 100 200) (visible true) (zorder 3))'
)

LARGE: Final[str] = (
    "(root"
    " (meta 1234)"
    " (item (p 0.0 0.0) (q 1.2 -0.4))"
    ' (group "alpha"'
    "  (entry 1 (p -42.0 0.0) (q 0.0 0.0) (r 0.0))"
    "  (entry 2 (p -30.0 10.0) (q 0.3 0.0) (r 15.0))"
    "  (entry 3 (p -30.0 -10.0) (q 0.3 0.0) (r -15.0))"
    "  (entry 4 (p -20.0 20.0) (q 0.5 -0.1) (r 30.0))"
    "  (entry 5 (p -20.0 -20.0) (q 0.5 0.1) (r -30.0))"
    "  (entry 6 (p -10.0 15.0) (q 0.7 0.2) (r 45.0))"
    "  (entry 7 (p -10.0 -15.0) (q 0.7 -0.2) (r -45.0))"
    "  (entry 8 (p 5.0 25.0) (q 0.9 0.0) (r 60.0))"
    "  (entry 9 (p 5.0 -25.0) (q 0.9 0.0) (r -60.0))"
    "  (entry 10 (p 15.0 10.0) (q 1.0 0.3) (r 80.0))"
    "  (entry 11 (p 15.0 -10.0) (q 1.0 -0.3) (r -80.0))"
    " )"
    ' (group "beta"'
    "  (entry 1 (p 42.0 0.0) (q 0.0 0.0) (r 180.0))"
    "  (entry 2 (p 30.0 10.0) (q -0.3 0.0) (r 165.0))"
    "  (entry 3 (p 30.0 -10.0) (q -0.3 0.0) (r -165.0))"
    "  (entry 4 (p 20.0 20.0) (q -0.5 -0.1) (r 150.0))"
    "  (entry 5 (p 20.0 -20.0) (q -0.5 0.1) (r -150.0))"
    "  (entry 6 (p 10.0 15.0) (q -0.7 0.2) (r 135.0))"
    "  (entry 7 (p 10.0 -15.0) (q -0.7 -0.2) (r -135.0))"
    "  (entry 8 (p -5.0 25.0) (q -0.9 0.0) (r 120.0))"
    "  (entry 9 (p -5.0 -25.0) (q -0.9 0.0) (r -120.0))"
    "  (entry 10 (p -15.0 10.0) (q -1.0 0.3) (r 100.0))"
    "  (entry 11 (p -15.0 -10.0) (q -1.0 -0.3) (r -100.0))"
    " )"
    ")"
)


def generate(depth: int, width: int) -> str:
    atoms = " ".join(f"a{i}" for i in range(width))

    def _build(d: int) -> str:
        if d == 0:
            return atoms
        inner = _build(d - 1)
        label = f"w{d}"
        return "(" + label + " " + inner + " " + atoms + ")"

    return _build(depth)


_DEEP_DEPTH: Final[int] = 8
_DEEP_WIDTH: Final[int] = 6
DEEP: Final[str] = generate(_DEEP_DEPTH, _DEEP_WIDTH)

_WIDE_DEPTH: Final[int] = 1
_WIDE_WIDTH: Final[int] = 34
WIDE: Final[str] = generate(_WIDE_DEPTH, _WIDE_WIDTH)

INPUTS: Final = [
    pytest.param(SMALL, id="small"),
    pytest.param(MEDIUM, id="medium"),
    pytest.param(LARGE, id="large"),
    pytest.param(DEEP, id="deep"),
]
