from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .constants import (
    BYTE_MAX,
    FLOAT_DIVISOR,
    MAX_RANGE_BITS,
    MAX_SEED,
    MODULUS,
    SINGLE_DRAW_BITS,
    SINGLE_DRAW_MASK,
)
from .entropy import EntropySource, draw_seed
from .errors import InvalidArgument
from .hashing import hash28


def _check_int(name: str, value) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise InvalidArgument(f"{name} must be an integer, got {type(value).__name__}")
    return value


def _check_u28(name: str, value) -> int:
    _check_int(name, value)
    if value < 0 or value > MAX_SEED:
        raise InvalidArgument(f"{name} must be within 0..{MAX_SEED:#x}, got {value:#x}")
    return value


def _check_real(name: str, value) -> float:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise InvalidArgument(f"{name} must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise InvalidArgument(f"{name} must be finite, got {value}")
    return value


@dataclass
class GeneratorState:
    """The mutable ``(state, counter)`` pair behind one generator."""

    state: int
    counter: int = 0

    def __post_init__(self):
        _check_u28("state", self.state)
        _check_u28("counter", self.counter)

    def advance(self) -> int:
        # Output comes from the pre-mutation pair; the state update hashes state alone.
        out = hash28(self.state ^ self.counter)
        self.state ^= hash28(self.state)
        self.counter += 1
        if self.counter > MODULUS:
            self.counter = 0
        return out


class DPRNG:
    """Deterministic pseudo-random generator with cross-language reproducible output.

    Two instances built from the same seed yield identical sequences for the
    same sequence of calls. Not a CSPRNG. An instance is not safe to share
    between threads without external locking around each call.

    Args:
        seed: 28-bit initial state. When omitted, 28 bits are drawn from
            ``entropy`` (PyCryptodomex by default).
        entropy: Callable returning ``n`` random bits, used only when ``seed``
            is None.
    """

    def __init__(self, seed: Optional[int] = None, *, entropy: Optional[EntropySource] = None):
        if seed is None:
            seed = draw_seed(entropy)
        self.seed = _check_u28("seed", seed)
        self._state = GeneratorState(self.seed)

    @classmethod
    def from_state(cls, state: int, counter: int = 0) -> "DPRNG":
        """Resume a generator from a previously captured ``(state, counter)``."""
        inst = cls(state)
        inst._state.counter = _check_u28("counter", counter)
        return inst

    def getstate(self) -> GeneratorState:
        return GeneratorState(self._state.state, self._state.counter)

    def setstate(self, snapshot: GeneratorState) -> None:
        self._state = GeneratorState(snapshot.state, snapshot.counter)

    def advance(self) -> int:
        return self._state.advance()

    def next_int(self, a: int, b: int) -> int:
        """Return an integer in ``[a, b]`` inclusive.

        Ranges up to 2^20 wide use one advance; wider ranges take the top 20
        bits from one advance and the remaining low bits from a second.
        Draws that overshoot ``b`` are halved until they fit.
        """
        _check_int("a", a)
        _check_int("b", b)
        if a > b:
            raise InvalidArgument(f"lower bound {a} exceeds upper bound {b}")
        range_size = b - a
        if range_size == 0:
            return a
        # ceil(log2(range_size)), exact for arbitrarily large integers
        n_required_bits = (range_size - 1).bit_length()
        if n_required_bits > MAX_RANGE_BITS:
            raise InvalidArgument(f"range of {range_size} needs {n_required_bits} bits; at most {MAX_RANGE_BITS} supported")

        if n_required_bits > SINGLE_DRAW_BITS:
            additional_bits = n_required_bits - SINGLE_DRAW_BITS
            high = (self._state.advance() & SINGLE_DRAW_MASK) << additional_bits
            low = self._state.advance() & ((1 << additional_bits) - 1)
            result = high | low
        else:
            result = self._state.advance() & ((1 << n_required_bits) - 1)

        while a + result > b:
            result //= 2
        return a + result

    def next(self) -> float:
        """Return a float in ``[0, 1)``."""
        return self.next_int(0, MODULUS) / FLOAT_DIVISOR

    def next_float(self, a: float, b: float) -> float:
        """Return a float in ``[a, b)``.

        When ``b - a`` is only a few ulps wide, rounding of ``a + x * (b - a)``
        can yield exactly ``b``.
        """
        _check_real("a", a)
        _check_real("b", b)
        if not a < b:
            raise InvalidArgument(f"lower bound {a} must be less than upper bound {b}")
        span = b - a
        if not math.isfinite(span):
            raise InvalidArgument(f"width of [{a}, {b}) overflows a float")
        return a + self.next() * span

    next_double = next_float

    def next_bytes(self, n: int) -> bytes:
        _check_int("n", n)
        if n <= 0:
            raise InvalidArgument(f"byte count must be positive, got {n}")
        return bytes(self.next_int(0, BYTE_MAX) for _ in range(n))
