"""
Easing curves mapping linear progress in [0, 1] to eased progress in [0, 1].

Named curves follow the CSS definitions so that a transition sampled here matches
what the browser renders for the same timing function.
"""

from typing import Callable, Dict

Easing = Callable[[float], float]


def _clamp(t: float) -> float:
    return 0.0 if t <= 0 else 1.0 if t >= 1 else t


def linear(t: float) -> float:
    return _clamp(t)


def ease_out(power: float = 3.0) -> Easing:
    """Ease-out power curve: 1 - (1 - t)^power."""

    def curve(t: float) -> float:
        t = _clamp(t)
        if t == 1.0:
            return 1.0
        return 1.0 - (1.0 - t) ** power

    return curve


def cubic_bezier(x1: float, y1: float, x2: float, y2: float) -> Easing:
    """
    CSS cubic-bezier() timing function.

    Solves x(s) = t for the curve parameter s with Newton iterations, falling back to
    bisection when the derivative flattens, then returns y(s).
    """

    def sample(a1: float, a2: float, s: float) -> float:
        return 3 * a1 * (1 - s) ** 2 * s + 3 * a2 * (1 - s) * s**2 + s**3

    def slope(a1: float, a2: float, s: float) -> float:
        return 3 * a1 * (1 - s) ** 2 + 6 * (a2 - a1) * (1 - s) * s + 3 * (1 - a2) * s**2

    def solve_s(t: float) -> float:
        s = t
        for _ in range(8):
            error = sample(x1, x2, s) - t
            if abs(error) < 1e-7:
                return s
            d = slope(x1, x2, s)
            if abs(d) < 1e-6:
                break
            s -= error / d
        lo, hi = 0.0, 1.0
        s = t
        while hi - lo > 1e-7:
            if sample(x1, x2, s) < t:
                lo = s
            else:
                hi = s
            s = (lo + hi) / 2
        return s

    def curve(t: float) -> float:
        t = _clamp(t)
        if t in (0.0, 1.0):
            return t
        return sample(y1, y2, solve_s(t))

    return curve


EASINGS: Dict[str, Easing] = {
    "linear": linear,
    "ease": cubic_bezier(0.25, 0.1, 0.25, 1.0),
    "ease-in": cubic_bezier(0.42, 0.0, 1.0, 1.0),
    "ease-out": cubic_bezier(0.0, 0.0, 0.58, 1.0),
    "ease-in-out": cubic_bezier(0.42, 0.0, 0.58, 1.0),
    "ease-out-cubic": ease_out(3.0),
    "ease-out-quart": ease_out(4.0),
}


def get_easing(name: str) -> Easing:
    """
    Look up a named easing curve.

    Raises:
        KeyError: If the name is not registered
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise KeyError(f"Unknown easing '{name}'. Available: {', '.join(sorted(EASINGS))}")
