# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
This unit test file is run using pytest.
ex: pytest test_cordic_fixed.py
Tests the FixedPoint and BinaryFixed number formats.
'''

import pytest
from cordic_fixed import BinaryFixed, FixedPoint, qformat

Q16 = qformat(16)

def test_float_arithmetic():
    """Basic operators on the float-backed format"""
    a = FixedPoint(1.5)
    b = FixedPoint(2.25)
    assert a + b == FixedPoint(3.75)
    assert a - b == FixedPoint(-0.75)
    assert a * b == FixedPoint(3.375)
    assert b / FixedPoint(0.5) == FixedPoint(4.5)
    assert float(a) == 1.5
    assert str(b) == '2.25'
    assert repr(a) == 'FixedPoint(1.5)'

def test_float_remainder_sign():
    """Remainder sign follows the dividend, not the divisor"""
    assert FixedPoint(-7.0) % FixedPoint(3.0) == FixedPoint(-1.0)
    assert FixedPoint(7.0) % FixedPoint(-3.0) == FixedPoint(1.0)
    assert FixedPoint(7.0) % FixedPoint(3.0) == FixedPoint(1.0)

def test_float_ordering():
    """Comparison operators"""
    lo = FixedPoint(-1.0)
    hi = FixedPoint(2.0)
    assert lo < hi
    assert lo <= hi
    assert hi > lo
    assert hi >= FixedPoint(2.0)
    assert not hi < lo
    assert sorted([hi, lo]) == [lo, hi]

def test_float_errors():
    """Division by zero and mixed operands"""
    with pytest.raises(ZeroDivisionError):
        FixedPoint(1.0) / FixedPoint(0.0)
    with pytest.raises(TypeError):
        FixedPoint(1.0) + 1.0
    with pytest.raises(TypeError):
        FixedPoint(1.0) + Q16(1.0)

def test_binary_quantize():
    """Conversion to and from raw integers"""
    assert Q16(0.5).raw == 32768
    assert Q16(-1.0).raw == -65536
    assert Q16.from_raw(16384) == Q16(0.25)
    assert float(Q16(0.25)) == 0.25
    assert str(Q16(0.25)) == '0.25'
    assert Q16.lsb() == 2.0 ** -16
    with pytest.raises(ValueError):
        Q16(float('nan'))
    with pytest.raises(ValueError):
        Q16(float('inf'))

def test_binary_arithmetic():
    """Shift-based multiply and divide"""
    assert Q16(1.5) + Q16(2.25) == Q16(3.75)
    assert Q16(1.5) - Q16(2.25) == Q16(-0.75)
    assert Q16(1.5) * Q16(-0.5) == Q16(-0.75)
    assert Q16(1.0) / Q16(4.0) == Q16(0.25)
    # Products round toward negative infinity.
    assert (Q16.from_raw(1) * Q16(0.5)).raw == 0
    assert (Q16.from_raw(-1) * Q16(0.5)).raw == -1
    with pytest.raises(ZeroDivisionError):
        Q16(1.0) / Q16(0.0)

def test_binary_remainder_sign():
    """Remainder sign follows the dividend, matching FixedPoint"""
    assert Q16(-7.0) % Q16(3.0) == Q16(-1.0)
    assert Q16(7.0) % Q16(-3.0) == Q16(1.0)
    assert Q16(7.5) % Q16(2.0) == Q16(1.5)
    with pytest.raises(ZeroDivisionError):
        Q16(1.0) % Q16(0.0)

def test_binary_ordering():
    """Comparison and hashing"""
    assert Q16(-0.5) < Q16(0.0) <= Q16(0.0) < Q16(0.5)
    assert Q16(1.0) > Q16(0.5)
    assert len({Q16(0.5), Q16(0.5), Q16(0.25)}) == 2

def test_qformat():
    """Q-format classes are cached and cannot be mixed"""
    assert qformat(16) is Q16
    assert qformat() is BinaryFixed
    assert qformat(32) is BinaryFixed
    assert Q16.FRAC_BITS == 16
    assert issubclass(Q16, BinaryFixed)
    assert repr(Q16(0.5)) == 'Q16(0.5)'
    with pytest.raises(TypeError):
        qformat(8)(1.0) + Q16(1.0)
    with pytest.raises(ValueError):
        qformat(0)
