"""Iterative in-place radix-2 Fast Fourier Transform.

The transform works on a mutable sequence of complex numbers that serves as
both input and output.  Its length is first rounded up to the next power of
two by appending complex zeros *to the caller's buffer*, so the padding is
still there after the call.

Twiddle factors come from a root-of-unity cache owned by an
:class:`FFTContext`.  The cache is keyed by transform length only: it is
rebuilt when the length changes and reused otherwise, whichever direction
is requested.  Roots built for one direction are read as their complex
conjugates by the other, which is the same set of roots with the opposite
angle sign.

Sign convention: the forward transform uses ``exp(+2*pi*i*k/N)`` and the
inverse uses ``exp(-2*pi*i*k/N)`` followed by division by ``N``.  This is
the reverse of :func:`numpy.fft.fft`; the forward transform here equals
``N * numpy.fft.ifft``.
"""

from __future__ import annotations

import enum
import logging
import math
import threading
from typing import List, MutableSequence, Optional


logger = logging.getLogger(__name__)


class Direction(enum.IntEnum):
    """Transform direction; the value is the sign of the unit angle."""

    FORWARD = 1
    INVERSE = -1


def next_power_of_two(length: int) -> int:
    size = 1
    while size < length:
        size <<= 1
    return size


def bit_reverse_permute(values: MutableSequence[complex]) -> None:
    """Reorder ``values`` (power-of-two length) into bit-reversed index order."""

    size = len(values)
    j = 0
    for i in range(1, size):
        b = size >> 1
        while j >= b:
            j -= b
            b >>= 1
        j += b
        if i < j:
            values[i], values[j] = values[j], values[i]


class FFTContext:
    """Owns a root-of-unity cache and serialises transforms that share it.

    A context can be shared between threads: :meth:`transform` holds the
    context lock for the whole call.  Callers wanting no contention at all
    can create one context per thread.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.roots: List[complex] = []
        self.cached_length = 0
        self.cached_direction: Optional[Direction] = None

    def _twiddles(self, size: int, direction: Direction) -> List[complex]:
        if self.cached_direction is None or len(self.roots) != size // 2:
            theta = int(direction) * 2.0 * math.pi / size
            logger.debug("computing %d roots of unity for length %d", size // 2, size)
            self.roots = [complex(math.cos(theta * k), math.sin(theta * k)) for k in range(size // 2)]
            self.cached_length = size
            self.cached_direction = direction
        if direction is self.cached_direction:
            return self.roots
        return [root.conjugate() for root in self.roots]

    def clear(self) -> None:
        with self._lock:
            self.roots = []
            self.cached_length = 0
            self.cached_direction = None

    def transform(self, values: MutableSequence[complex], direction: Direction = Direction.FORWARD) -> None:
        """Transform ``values`` in place.

        ``values`` is padded with ``0j`` up to the next power of two; if that
        is needed it must support ``extend`` (a :class:`list` does), otherwise
        :class:`TypeError` is raised.  Entries are converted to ``complex``.
        """

        direction = Direction(direction)
        size = next_power_of_two(len(values))
        if size != len(values):
            if not hasattr(values, "extend"):
                raise TypeError(
                    f"cannot pad a {type(values).__name__} of length {len(values)} to {size} in place"
                )
            values.extend([0j] * (size - len(values)))
        for index in range(size):
            values[index] = complex(values[index])

        bit_reverse_permute(values)

        with self._lock:
            roots = self._twiddles(size, direction)
            half = 2
            while half <= size:
                layer = size // half
                step = half // 2
                for j in range(0, size, half):
                    for k in range(step):
                        u = values[j + k]
                        v = values[j + k + step] * roots[layer * k]
                        values[j + k] = u + v
                        values[j + k + step] = u - v
                half <<= 1

        if direction is Direction.INVERSE:
            for index in range(size):
                values[index] = values[index] / size


_default_context = FFTContext()


def default_context() -> FFTContext:
    return _default_context


def transform(
    values: MutableSequence[complex],
    direction: Direction = Direction.FORWARD,
    context: Optional[FFTContext] = None,
) -> None:
    """Fast Fourier Transform of ``values``, in place.

    Uses the module-wide default context unless ``context`` is given.
    """

    if context is None:
        context = _default_context
    context.transform(values, direction)
