#!/usr/bin/env python3
"""
Performance Regression Testing Framework

Measurement records, baseline storage, regression detection and reporting
built on the statistical engine.
"""

from .baseline_store import BaselineStore, InMemoryBaselineStore, JsonBaselineStore
from .detector import RegressionDetector, ThresholdResult
from .measurement import MeasurementSet, RunResult
from .reporting import format_comparison_report, format_statistics_report

__all__ = [
    'BaselineStore',
    'InMemoryBaselineStore',
    'JsonBaselineStore',
    'RegressionDetector',
    'ThresholdResult',
    'MeasurementSet',
    'RunResult',
    'format_comparison_report',
    'format_statistics_report',
]
