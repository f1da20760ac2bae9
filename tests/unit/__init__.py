"""
PySATL Numerics
===============

Unit tests for the numerical helper algorithms.
"""

__author__ = "PySATL contributors"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"
