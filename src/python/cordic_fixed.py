# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
Real-number representations for the CORDIC engine

The CORDIC engine is written against the small set of operations defined
by the Numeric class (add, subtract, multiply, divide, remainder, compare,
display), so the number format can be changed without touching the
rotation loop.  Two formats are provided:
    FixedPoint      Thin wrapper around a Python float.
    BinaryFixed     Signed integer with a fixed number of fractional bits,
                    i.e., the format used by a hardware implementation.

Use qformat(n) to obtain the BinaryFixed class with n fractional bits.

See also: cordic_engine.py
'''

import math
from functools import lru_cache, total_ordering

# Default number of fractional bits for BinaryFixed.
DEFAULT_FRAC_BITS = 32

@total_ordering
class Numeric:
    """
    Abstract real number used by the CORDIC engine.
    Subclasses implement the arithmetic operators for operands of their
    own type, plus float() for reporting.  The remainder operator follows
    C fmod() semantics: the sign of the result follows the dividend.
    """
    def __add__(self, other):
        raise NotImplementedError

    def __sub__(self, other):
        raise NotImplementedError

    def __mul__(self, other):
        raise NotImplementedError

    def __truediv__(self, other):
        raise NotImplementedError

    def __mod__(self, other):
        raise NotImplementedError

    def __lt__(self, other):
        raise NotImplementedError

    def __eq__(self, other):
        raise NotImplementedError

    def __float__(self):
        raise NotImplementedError

    def __hash__(self):
        return hash(float(self))

    def __str__(self):
        return str(float(self))

    def __repr__(self):
        return f'{type(self).__name__}({self})'

class FixedPoint(Numeric):
    """
    Real number backed by a Python float.
    Despite the name, this is the floating-point reference format; it
    exists so that BinaryFixed can be swapped in later.
    """
    __slots__ = ('val',)

    def __init__(self, val):
        self.val = float(val)

    def _check(self, other):
        if not isinstance(other, FixedPoint):
            raise TypeError(f'Cannot mix FixedPoint and {type(other).__name__}')
        return other.val

    def __add__(self, other):
        return FixedPoint(self.val + self._check(other))

    def __sub__(self, other):
        return FixedPoint(self.val - self._check(other))

    def __mul__(self, other):
        return FixedPoint(self.val * self._check(other))

    def __truediv__(self, other):
        return FixedPoint(self.val / self._check(other))

    def __mod__(self, other):
        return FixedPoint(math.fmod(self.val, self._check(other)))

    def __neg__(self):
        return FixedPoint(-self.val)

    def __lt__(self, other):
        return self.val < self._check(other)

    def __eq__(self, other):
        if not isinstance(other, FixedPoint): return NotImplemented
        return self.val == other.val

    def __hash__(self):
        return hash(self.val)

    def __float__(self):
        return self.val

class BinaryFixed(Numeric):
    """
    Signed binary fixed-point number.
    The value is stored as an integer "raw" equal to round(x * 2^FRAC_BITS).
    Multiplication and division rescale using arithmetic shifts, which
    round toward negative infinity, as a hardware datapath would.
    Python integers never overflow, so there is no saturation.
    """
    __slots__ = ('raw',)
    FRAC_BITS = DEFAULT_FRAC_BITS

    def __init__(self, val):
        """Convert a float to the nearest representable value."""
        val = float(val)
        if not math.isfinite(val):
            raise ValueError(f'Cannot represent {val} in Q{self.FRAC_BITS}')
        self.raw = int(round(val * (1 << self.FRAC_BITS)))

    @classmethod
    def from_raw(cls, raw):
        """Create a new value from the underlying integer."""
        obj = cls.__new__(cls)
        obj.raw = int(raw)
        return obj

    @classmethod
    def lsb(cls):
        """Value of the least-significant bit."""
        return 2.0 ** -cls.FRAC_BITS

    def _check(self, other):
        if type(other) is not type(self):
            raise TypeError(f'Cannot mix {type(self).__name__} and {type(other).__name__}')
        return other.raw

    def __add__(self, other):
        return self.from_raw(self.raw + self._check(other))

    def __sub__(self, other):
        return self.from_raw(self.raw - self._check(other))

    def __mul__(self, other):
        return self.from_raw((self.raw * self._check(other)) >> self.FRAC_BITS)

    def __truediv__(self, other):
        divisor = self._check(other)
        if divisor == 0:
            raise ZeroDivisionError(f'{type(self).__name__} division by zero')
        return self.from_raw((self.raw << self.FRAC_BITS) // divisor)

    def __mod__(self, other):
        modulus = self._check(other)
        if modulus == 0:
            raise ZeroDivisionError(f'{type(self).__name__} modulo by zero')
        # Truncated remainder, sign follows the dividend.
        rem = abs(self.raw) % abs(modulus)
        return self.from_raw(-rem if self.raw < 0 else rem)

    def __neg__(self):
        return self.from_raw(-self.raw)

    def __lt__(self, other):
        return self.raw < self._check(other)

    def __eq__(self, other):
        if type(other) is not type(self): return NotImplemented
        return self.raw == other.raw

    def __hash__(self):
        return hash((self.FRAC_BITS, self.raw))

    def __float__(self):
        return self.raw / (1 << self.FRAC_BITS)

@lru_cache(maxsize=None)
def qformat(frac_bits=DEFAULT_FRAC_BITS):
    """
    Return the BinaryFixed subclass with the requested number of
    fractional bits.  Repeated calls return the same class, so values
    created by different callers can be combined.
    """
    frac_bits = int(frac_bits)
    if frac_bits < 1:
        raise ValueError(f'Fractional bits must be positive: {frac_bits}')
    if frac_bits == BinaryFixed.FRAC_BITS:
        return BinaryFixed
    return type(f'Q{frac_bits}', (BinaryFixed,), {
        '__slots__': (),
        'FRAC_BITS': frac_bits,
    })
