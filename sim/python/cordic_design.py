# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
Design tool for CORDIC sine/cosine parameters

This tool measures the accuracy of the CORDIC engine as a function of
iteration count and number format.  It is primarily used as a design aide
in choosing the number of iterations and fractional bits needed to meet
specific performance objectives.

See also: cordic_engine.py
'''

import numpy as np
import sys

from cordic_engine import CordicEngine
from cordic_fixed import FixedPoint, qformat

def cos_sin(engine, theta):
    """Evaluate a CORDIC engine over a vector of angles."""
    x = np.zeros(len(theta))
    y = np.zeros(len(theta))
    for n in range(len(theta)):
        (c, s) = engine.cos_sin(float(theta[n]))
        x[n] = float(c)
        y[n] = float(s)
    return (x, y)

def rms_error(engine, ncheck=4096, verbose=False):
    """Measure RMS error of the designated CORDIC engine."""
    theta   = np.linspace(-np.pi, np.pi, ncheck)
    ref     = np.exp(1j * theta)
    (x,y)   = cos_sin(engine, theta)
    rms     = np.sqrt(np.mean(np.abs(x + 1j*y - ref)**2))
    if verbose: print(f'{engine.label}: RMS={rms*1e6:.3f} ppm')
    return rms

def max_error(engine, ncheck=4096):
    """Measure worst-case error of the designated CORDIC engine."""
    theta   = np.linspace(-np.pi, np.pi, ncheck)
    (x,y)   = cos_sin(engine, theta)
    return max(np.max(np.abs(x - np.cos(theta))),
               np.max(np.abs(y - np.sin(theta))))

def sweep(numeric, counts, ncheck=1024, verbose=False):
    """RMS error for each iteration count in a list."""
    return np.array([rms_error(CordicEngine(n, numeric), ncheck, verbose) for n in counts])

def plot_sweep(formats, counts, ncheck=1024, show=True):
    """Plot RMS error vs. iteration count for each numeric format."""
    import matplotlib.pyplot as plt
    fig, ax = plt.subplots()
    for numeric in formats:
        ax.semilogy(counts, sweep(numeric, counts, ncheck), label=numeric.__name__)
    ax.set_xlabel('Iterations')
    ax.set_ylabel('RMS error')
    ax.grid(True)
    ax.legend()
    # Optionally display all plots.
    if show: plt.show()

def print_help():
    """ Print a message explaining command-line options. """
    print('Usage: python %s [cmd] [cmd] ...' % sys.argv[0])
    print('  Where each [cmd] is one of the following:')
    print('  * [any integer]: Set maximum iteration count.')
    print('  * float: Use floating-point arithmetic (default).')
    print('  * q[bits]: Use binary fixed-point, e.g., "q16".')
    print('  * sweep: Print RMS error for 1..N iterations.')
    print('  * plot: Plot RMS error for every format used so far.')
    print('Example: python %s 24 sweep q16 sweep plot' % sys.argv[0])

if __name__ == '__main__':
    # Help message if user doesn't specify any arguments.
    if len(sys.argv) < 2:
        print_help()
        sys.exit(-1)
    # Set default parameters, may be overriden later.
    numeric = FixedPoint
    maxiter = 32
    used = []
    # Parse each command-line argument:
    for cmd in sys.argv[1:]:
        if cmd == 'help':
            print_help()
        elif cmd.isdigit():
            maxiter = int(cmd)
        elif cmd == 'float':
            numeric = FixedPoint
        elif cmd.startswith('q') and cmd[1:].isdigit():
            numeric = qformat(int(cmd[1:]))
        elif cmd == 'sweep':
            sweep(numeric, range(1, maxiter+1), verbose=True)
            if numeric not in used: used.append(numeric)
        elif cmd == 'plot':
            plot_sweep(used or [numeric], range(1, maxiter+1))
        else:
            print('Unrecognized command: ' + cmd)
