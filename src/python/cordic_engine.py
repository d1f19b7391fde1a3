# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
Circular-rotation CORDIC engine for sine and cosine

Each iteration rotates the vector (x, y) by +/- atan(2^-i) using only an
addition, a sign test, and a power-of-two scaling:
    x' = x - sigma * 2^-i * y
    y' = y + sigma * 2^-i * x
    z' = z - sigma * atan(2^-i)
The linearized update grows the vector by sqrt(1 + 2^-2i) per step.
That growth is removed once, at the end, by the gain factor K.

All intermediate values use a Numeric type from cordic_fixed.py, so the
same loop runs in floating-point or in binary fixed-point.

Conventions:
    * The loop runs exactly N times, using angle table entries 0..N-1.
    * The angle table is built to N+1 entries.
    * K is the product of N terms, one per micro-rotation.
    * Table entries past ANGLE_TABLE_LIMIT are approximated by halving
      the previous entry, since atan(x) ~= x for small x.

See also: cordic_fixed.py, cordic_cli.py
'''

import logging
import math
import operator
from collections import namedtuple
from functools import lru_cache

from cordic_fixed import FixedPoint

logger = logging.getLogger(__name__)

# Number of angle-table entries computed with atan(); later entries are
# derived by halving.  At double precision atan(2^-i) == 2^-i for i > 26.
ANGLE_TABLE_LIMIT = 64

# Limit of the gain factor as N goes to infinity.
GAIN_LIMIT = 0.6072529350088812

class CordicError(ValueError):
    """Base class for invalid CORDIC inputs."""

class InvalidIterationCount(CordicError):
    """Iteration count is not a positive integer."""

class NonFiniteAngle(CordicError):
    """Input angle is NaN or infinite."""

# Final state of the rotation loop: x ~= cos, y ~= sin, z = residual angle.
RotationState = namedtuple('RotationState', 'x, y, z')

def check_iterations(iterations):
    """Raise InvalidIterationCount unless the argument is an integer >= 1."""
    if isinstance(iterations, bool):
        raise InvalidIterationCount(f'Iteration count must be an integer: {iterations!r}')
    try:
        iterations = operator.index(iterations)
    except TypeError:
        raise InvalidIterationCount(f'Iteration count must be an integer: {iterations!r}') from None
    if iterations < 1:
        raise InvalidIterationCount(f'Iteration count must be at least 1: {iterations}')
    return iterations

@lru_cache(maxsize=256)
def angle_table(length, limit=ANGLE_TABLE_LIMIT):
    """
    Return a tuple of micro-rotation angles, atan(2^-i) for i = 0..length-1.
    Args:
        length (int)    Number of entries to generate.
        limit (int)     Number of entries calculated directly; any further
                        entries are half of the preceding entry.
    Returns: (tuple of float)
    """
    if limit < 1:
        raise ValueError(f'Angle table limit must be at least 1: {limit}')
    direct = min(length, limit)
    table = [math.atan(2.0 ** -i) for i in range(direct)]
    for i in range(direct, length):
        table.append(table[-1] / 2)
    logger.debug('Angle table: %d entries, limit %d, %d halved',
        length, limit, length - direct)
    return tuple(table)

@lru_cache(maxsize=256)
def gain_factor(iterations):
    """
    Return the CORDIC gain correction for N micro-rotations:
        K = prod(1 / sqrt(1 + 2^-2y)) for y = 0..N-1
    """
    check_iterations(iterations)
    gain = 1.0
    for y in range(iterations):
        gain *= 1.0 / math.sqrt(1.0 + 2.0 ** (-2 * y))
    return gain

def normalize_angle(theta, numeric=FixedPoint):
    """
    Reduce an angle into the CORDIC convergence domain.
    Args:
        theta (Numeric) Input angle in radians.
        numeric (class) Numeric type of theta.
    Returns: Tuple containing:
        (Numeric)       Equivalent angle in [-pi/2, +pi/2].
        (bool)          True if the result was folded by pi, in which
                        case the rotation must start from (-1, 0).
    """
    pi = numeric(math.pi)
    half_pi = numeric(math.pi / 2)
    two_pi = numeric(2 * math.pi)
    zero = numeric(0.0)
    # Remainder keeps the sign of theta, so z is in (-2pi, +2pi).
    z = theta % two_pi
    if z > pi:
        z = z - two_pi
    elif z < zero - pi:
        z = z + two_pi
    # Fold the left half-plane onto the right half-plane.
    if z > half_pi:
        return (z - pi, True)
    elif z < zero - half_pi:
        return (z + pi, True)
    return (z, False)

class CordicEngine:
    """Compute sine and cosine by CORDIC rotation with a fixed iteration count."""
    def __init__(self, iterations, numeric=FixedPoint, table_limit=ANGLE_TABLE_LIMIT):
        """Create CORDIC engine:
            iterations:     Number of micro-rotations (N >= 1).
            numeric:        Numeric type used for all intermediate values.
            table_limit:    Angle-table entries calculated directly.
        """
        self.iterations = check_iterations(iterations)
        self.numeric = numeric
        self.label = f'CORDIC: {self.iterations}, {numeric.__name__}'
        self.angles = tuple(numeric(a) for a in angle_table(self.iterations + 1, table_limit))
        self.gain = numeric(gain_factor(self.iterations))

    def convert(self, theta):
        """Convert an angle to this engine's numeric type, rejecting NaN and inf."""
        if not math.isfinite(float(theta)):
            raise NonFiniteAngle(f'Angle must be finite: {theta}')
        if type(theta) is self.numeric:
            return theta
        return self.numeric(theta)

    def run(self, theta):
        """Rotate the unit vector by theta; returns the final RotationState."""
        z, flip = normalize_angle(self.convert(theta), self.numeric)
        zero = self.numeric(0.0)
        one = self.numeric(1.0)
        two = self.numeric(2.0)
        if flip:
            logger.debug('%s: folded %s to %s', self.label, theta, z)
        # Initial vector is (1, 0), or (-1, 0) for folded angles.
        x = zero - one if flip else one
        y = zero
        step = one
        for i in range(self.iterations):
            if z < zero:
                factor = zero - step
                z = z + self.angles[i]
            else:
                factor = step
                z = z - self.angles[i]
            x, y = x - factor * y, factor * x + y
            step = step / two
        return RotationState(x * self.gain, y * self.gain, z)

    def cos_sin(self, theta):
        """CORDIC cosine + sine."""
        (x, y, _) = self.run(theta)
        return (x, y)

@lru_cache(maxsize=256)
def _engine(iterations, numeric):
    return CordicEngine(iterations, numeric)

def cordic(theta, iterations, numeric=FixedPoint):
    """
    Calculate (cos(theta), sin(theta)) with the specified number of
    CORDIC iterations.  Engines are cached by iteration count and type.
    """
    return _engine(check_iterations(iterations), numeric).cos_sin(theta)
