# -*- coding: utf-8 -*-

# Copyright 2026 The Aerospace Corporation.
# This file is a part of SatCat5, licensed under CERN-OHL-W v2 or later.

'''
This unit test file is run using pytest.
ex: pytest test_cordic_design.py
Tests the error estimates used by the sim/python design tool.
'''

from cordic_design import max_error, rms_error, sweep
from cordic_engine import CordicEngine
from cordic_fixed import FixedPoint, qformat

def test_rms_error(capsys):
    """RMS error of a well-configured engine is tiny"""
    engine = CordicEngine(32)
    assert rms_error(engine, ncheck=256, verbose=True) < 1e-8
    assert engine.label in capsys.readouterr().out

def test_max_error():
    """Worst-case error of a Q16 engine"""
    assert max_error(CordicEngine(24, qformat(16)), ncheck=256) < 2e-3

def test_sweep():
    """Error decreases with iteration count"""
    rms = sweep(FixedPoint, [4, 8, 16, 24], ncheck=128)
    assert len(rms) == 4
    assert all(rms[:-1] > rms[1:])
