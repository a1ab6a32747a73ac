"""Single bits and bit vectors."""

import re

import numpy as np

from relstats.data.vector import NumberVector

__all__ = ['Bit', 'BitVector']


class Bit:
    """A number that is either 0 or 1.

    Parameters
    ----------
    bit : bool or int
        ``True``/``False`` or the integers 0 and 1.

    Raises
    ------
    ValueError
        If an integer other than 0 or 1 is given.
    """

    BIT_PATTERN = re.compile("[01]")

    def __init__(self, bit):
        if isinstance(bit, (bool, np.bool_)):
            self._bit = bool(bit)
            return
        if bit != 0 and bit != 1:
            raise ValueError(f"Required: 0 or 1 - found: {bit}")
        self._bit = bool(bit == 1)

    @classmethod
    def value_of(cls, text: str) -> "Bit":
        """Parse ``"0"`` or ``"1"``."""
        if not cls.BIT_PATTERN.fullmatch(text):
            raise ValueError(
                f'Input "{text}" does not fit required pattern: {cls.BIT_PATTERN.pattern}'
            )
        return cls(int(text))

    def bit_value(self) -> bool:
        return self._bit

    def __int__(self):
        return 1 if self._bit else 0

    def __float__(self):
        return float(int(self))

    def __bool__(self):
        return self._bit

    def __index__(self):
        return int(self)

    def __eq__(self, other):
        if isinstance(other, Bit):
            return self._bit == other._bit
        return NotImplemented

    def __hash__(self):
        return hash(self._bit)

    def __str__(self):
        return str(int(self))

    def __repr__(self):
        return f"Bit({int(self)})"


class BitVector(NumberVector):
    """Vector of bits, read as 0.0/1.0 coordinates.

    Parameters
    ----------
    values : iterable
        Bits, booleans or the numbers 0 and 1.

    Raises
    ------
    ValueError
        If any value is not a valid bit.
    """

    def __init__(self, values):
        bits = []
        for v in values:
            if isinstance(v, Bit):
                bits.append(v.bit_value())
            elif isinstance(v, (bool, np.bool_)):
                bits.append(bool(v))
            else:
                bits.append(Bit(v).bit_value())
        self._bits = np.array(bits, dtype=bool)

    @property
    def dimensionality(self) -> int:
        return self._bits.shape[0]

    def coordinate(self, d: int) -> float:
        self._check_index(d)
        return 1.0 if self._bits[d - 1] else 0.0

    def bit(self, d: int) -> Bit:
        """Bit of dimension ``d`` (1-based)."""
        self._check_index(d)
        return Bit(bool(self._bits[d - 1]))

    def cardinality(self) -> int:
        """Number of set bits."""
        return int(self._bits.sum())

    def to_array(self) -> np.ndarray:
        return self._bits.astype(float)

    def __str__(self):
        return " ".join("1" if b else "0" for b in self._bits)

    def __repr__(self):
        return f"BitVector({str(self)!r})"
