#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
Command-line interface for the CORDIC sine/cosine engine.

Two modes are supported:
    compute     Calculate cosine and sine of a single angle.
    bench       Sweep theta from 0.00 to 3.13 and compare each CORDIC
                result against numpy, writing a CSV table that can be
                opened in a spreadsheet.

ex: python cordic_cli.py compute 0.5 32
ex: python cordic_cli.py bench --frac-bits 24 --output bench.csv
'''

import argparse
import csv
import logging
import sys

import numpy as np

from cordic_engine import CordicEngine, CordicError
from cordic_fixed import FixedPoint, qformat

logger = logging.getLogger(__name__)

# Parameters for the "bench" sweep.
BENCH_ITERATIONS = 100
BENCH_SAMPLES = 314
BENCH_STEP = 0.01
BENCH_HEADER = [
    'Theta',
    'CORDIC Cosine', 'Standard Cosine', 'Cosine Error',
    'CORDIC Sine', 'Standard Sine', 'Sine Error',
]

def numeric_type(frac_bits=None):
    """Select FixedPoint, or the BinaryFixed Q-format if frac_bits is set."""
    return FixedPoint if frac_bits is None else qformat(frac_bits)

def compute(theta, iterations, frac_bits=None, out=None):
    """Print the "cos" and "sin" lines for a single angle."""
    out = out or sys.stdout
    engine = CordicEngine(iterations, numeric_type(frac_bits))
    (cos, sin) = engine.cos_sin(theta)
    angle = engine.convert(theta)
    print(f'cos {angle} == {cos}', file=out)
    print(f'sin {angle} == {sin}', file=out)

def bench(iterations=BENCH_ITERATIONS, frac_bits=None, out=None,
          samples=BENCH_SAMPLES, step=BENCH_STEP):
    """
    Write the CSV comparison of CORDIC against the numpy reference.
    Args:
        iterations (int)    CORDIC iterations for every sample
        frac_bits (int)     Q-format, or None for FixedPoint
        out (file)          Output stream (default stdout)
        samples (int)       Number of rows
        step (float)        Angle increment between rows (rad)
    Returns: (float) Worst-case absolute error over all samples.
    """
    out = out or sys.stdout
    engine = CordicEngine(iterations, numeric_type(frac_bits))
    theta = np.round(np.arange(samples) * step, 6)
    ref_cos = np.cos(theta)
    ref_sin = np.sin(theta)
    writer = csv.writer(out, lineterminator='\n')
    writer.writerow(BENCH_HEADER)
    worst = 0.0
    for n in range(samples):
        (cos, sin) = engine.cos_sin(float(theta[n]))
        err_cos = abs(float(cos) - ref_cos[n])
        err_sin = abs(float(sin) - ref_sin[n])
        worst = max(worst, err_cos, err_sin)
        writer.writerow([float(theta[n]),
            cos, float(ref_cos[n]), float(err_cos),
            sin, float(ref_sin[n]), float(err_sin)])
    logger.info('%s: %d samples, max error %.3g', engine.label, samples, worst)
    return float(worst)

def positive_int(text):
    """Argparse type for the number of fractional bits."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f'must be positive: {text}')
    return value

def build_parser():
    parser = argparse.ArgumentParser(
        description='CORDIC sine/cosine calculator',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument('-v', '--verbose',
                        action   = 'store_true',
                        help     = 'Enable debug logging')
    sub = parser.add_subparsers(dest='mode', required=True)
    cmd = sub.add_parser('compute',
        help='Calculate cosine and sine of one angle',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    cmd.add_argument('angle', type=float, help='Angle in radians')
    cmd.add_argument('iterations', type=int, help='Number of CORDIC iterations')
    cmd.add_argument('--frac-bits',
                     default  = None,
                     type     = positive_int,
                     help     = 'Use binary fixed-point with this many fractional bits')
    cmd = sub.add_parser('bench',
        help='Compare CORDIC against numpy, CSV output',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter)
    cmd.add_argument('--iterations',
                     default  = BENCH_ITERATIONS,
                     type     = int,
                     help     = 'Number of CORDIC iterations')
    cmd.add_argument('--frac-bits',
                     default  = None,
                     type     = positive_int,
                     help     = 'Use binary fixed-point with this many fractional bits')
    cmd.add_argument('--output',
                     default  = None,
                     type     = str,
                     help     = 'Output CSV file (default stdout)')
    return parser

def configure_logging(verbose):
    """Send log messages to the console."""
    root = logging.getLogger()
    if not root.handlers:
        root.addHandler(logging.StreamHandler(sys.stderr))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

def main(argv=None):
    """Parse command-line arguments and run the requested mode."""
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        if args.mode == 'compute':
            compute(args.angle, args.iterations, args.frac_bits)
        elif args.output:
            with open(args.output, 'w', newline='') as csvfile:
                bench(args.iterations, args.frac_bits, csvfile)
        else:
            bench(args.iterations, args.frac_bits)
    except CordicError as e:
        logger.error('Error: %s', e)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
