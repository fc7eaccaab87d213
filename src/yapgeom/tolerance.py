## numeric tolerance policy shared by every yapgeom predicate

## Copyright (c) 2026 yapgeom contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Tolerance policy for **yapgeom**.

Every equality, containment and tangency decision in yapgeom is gated
by a :class:`ToleranceContext`, a value of the form ``(epsilon, mode)``.
In absolute mode two scalars are equal when ``|a - b| <= epsilon``.  In
relative mode they are equal when ``|a - b| <= epsilon * scale``, where
``scale`` is the characteristic magnitude the caller supplies (the
longer segment, the larger radius, and so on).

The *current* context is kept per thread.  It starts out as the
package default (``epsilon = 1e-12``, absolute) unless overridden by
the ``YAPGEOM_TOLERANCE`` and ``YAPGEOM_ABSOLUTE_TOLERANCE`` environment
variables, and it changes only through :func:`set_tolerance`,
:func:`set_absolute_tolerance`, :func:`set_context` or the
:func:`tolerance` context manager.

"""

from __future__ import annotations

import logging
import math
import os
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE = 1e-12

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


def _check_epsilon(epsilon) -> float:
    if isinstance(epsilon, bool) or not isinstance(epsilon, (int, float)):
        raise ValueError('bad tolerance value: {}'.format(epsilon))
    if math.isnan(epsilon) or epsilon < 0:
        raise ValueError('tolerance must be a non-negative number, got {}'.format(epsilon))
    return float(epsilon)


class ToleranceContext:
    """Immutable ``(epsilon, absolute)`` pair with the comparison helpers."""

    __slots__ = ("_epsilon", "_absolute")

    def __init__(self, epsilon: float = DEFAULT_TOLERANCE, absolute: bool = True):
        self._epsilon = _check_epsilon(epsilon)
        self._absolute = bool(absolute)

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @property
    def absolute(self) -> bool:
        return self._absolute

    def __repr__(self):
        mode = "absolute" if self._absolute else "relative"
        return "ToleranceContext({}, {})".format(self._epsilon, mode)

    def __eq__(self, other):
        if not isinstance(other, ToleranceContext):
            return NotImplemented
        return self._epsilon == other._epsilon and self._absolute == other._absolute

    def __hash__(self):
        return hash((self._epsilon, self._absolute))

    def eps(self, scale: Optional[float] = None) -> float:
        """Return the absolute threshold at reference magnitude ``scale``.

        In relative mode a missing or zero ``scale`` falls back to the
        bare epsilon, so comparisons at the origin stay meaningful.
        """
        if self._absolute or not scale:
            return self._epsilon
        return self._epsilon * abs(scale)

    def scaled(self, scale: Optional[float]) -> "ToleranceContext":
        """Absolute context equivalent to this one at magnitude ``scale``."""
        if self._absolute:
            return self
        return ToleranceContext(self.eps(scale), True)

    def almost_equal(self, a: float, b: float, scale: Optional[float] = None) -> bool:
        return abs(a - b) <= self.eps(scale)

    def is_zero(self, a: float, scale: Optional[float] = None) -> bool:
        return abs(a) <= self.eps(scale)

    def greater(self, a: float, b: float, scale: Optional[float] = None) -> bool:
        """``a > b`` by more than the tolerance."""
        return a - b > self.eps(scale)

    def smaller(self, a: float, b: float, scale: Optional[float] = None) -> bool:
        """``a < b`` by more than the tolerance."""
        return b - a > self.eps(scale)


def _from_environment() -> ToleranceContext:
    epsilon = DEFAULT_TOLERANCE
    absolute = True
    raw = os.environ.get("YAPGEOM_TOLERANCE")
    if raw:
        try:
            epsilon = float(raw)
        except ValueError:
            raise ValueError('bad YAPGEOM_TOLERANCE value: {}'.format(raw)) from None
    raw = os.environ.get("YAPGEOM_ABSOLUTE_TOLERANCE")
    if raw:
        flag = raw.strip().lower()
        if flag in _TRUE:
            absolute = True
        elif flag in _FALSE:
            absolute = False
        else:
            raise ValueError('bad YAPGEOM_ABSOLUTE_TOLERANCE value: {}'.format(raw))
    return ToleranceContext(epsilon, absolute)


_local = threading.local()


def get_tolerance() -> ToleranceContext:
    """Return the tolerance context of the calling thread."""
    ctx = getattr(_local, "context", None)
    if ctx is None:
        ctx = _from_environment()
        _local.context = ctx
    return ctx


def set_context(ctx: ToleranceContext) -> None:
    if not isinstance(ctx, ToleranceContext):
        raise ValueError('bad tolerance context: {}'.format(ctx))
    logger.debug("tolerance policy set to %r", ctx)
    _local.context = ctx


def set_tolerance(epsilon: float) -> None:
    """Set epsilon for the calling thread, keeping the current mode.

    A negative (or NaN) epsilon is rejected with ``ValueError``.
    """
    set_context(ToleranceContext(epsilon, get_tolerance().absolute))


def set_absolute_tolerance(flag: bool) -> None:
    """Switch between absolute (``True``) and relative (``False``) mode."""
    set_context(ToleranceContext(get_tolerance().epsilon, flag))


def reset_tolerance() -> None:
    """Restore the package default (environment overrides included)."""
    set_context(_from_environment())


@contextmanager
def tolerance(epsilon: Optional[float] = None,
              absolute: Optional[bool] = None) -> Iterator[ToleranceContext]:
    """Temporarily override the tolerance policy of the calling thread.

    >>> with tolerance(0.01, absolute=False):
    ...     pass

    The saved policy is restored on exit, even when the body raises.
    """
    saved = get_tolerance()
    ctx = ToleranceContext(saved.epsilon if epsilon is None else epsilon,
                           saved.absolute if absolute is None else absolute)
    set_context(ctx)
    try:
        yield ctx
    finally:
        set_context(saved)


## module level shortcuts that consult the current context

def eps(scale: Optional[float] = None) -> float:
    return get_tolerance().eps(scale)


def almost_equal(a: float, b: float, scale: Optional[float] = None) -> bool:
    return get_tolerance().almost_equal(a, b, scale)


def is_zero(a: float, scale: Optional[float] = None) -> bool:
    return get_tolerance().is_zero(a, scale)


__all__ = [
    "DEFAULT_TOLERANCE",
    "ToleranceContext",
    "get_tolerance",
    "set_context",
    "set_tolerance",
    "set_absolute_tolerance",
    "reset_tolerance",
    "tolerance",
    "eps",
    "almost_equal",
    "is_zero",
]
