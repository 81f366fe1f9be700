#!/usr/bin/env python3
"""
Measurement records handed over by the benchmark harness.

A RunResult is one iteration of a workload: the primary sample (for example
GPU time in milliseconds) plus whichever auxiliary counters the device could
report for that iteration. A MeasurementSet is the ordered collection of runs
taken under one configuration.
"""

from dataclasses import dataclass, field
from datetime import datetime
from functools import cached_property
from typing import Any

from ..core.config import DEFAULT_CONFIDENCE_LEVEL, CriticalValueMethod
from ..core.errors import EmptySampleSetError
from ..statistics.descriptive import DescriptiveStatistics, compute_statistics, summarize_metrics


@dataclass
class RunResult:
    """Single iteration of a benchmark"""
    value: float
    metrics: dict[str, float | None] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        return {
            'value': self.value,
            'metrics': dict(self.metrics),
            'timestamp': self.timestamp.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'RunResult':
        timestamp = data.get('timestamp')
        return cls(
            value=float(data['value']),
            metrics={k: (None if v is None else float(v)) for k, v in data.get('metrics', {}).items()},
            timestamp=datetime.fromisoformat(timestamp) if timestamp else datetime.now(),
        )


@dataclass
class MeasurementSet:
    """Ordered runs of one workload configuration"""
    results: list[RunResult]
    label: str = "default"
    configuration: dict[str, Any] = field(default_factory=dict)
    created: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        if not self.results:
            raise EmptySampleSetError(self.label)
        self.results = list(self.results)

    @classmethod
    def from_samples(
        cls,
        samples: list[float],
        metrics: dict[str, list[float | None]] | None = None,
        label: str = "default",
        configuration: dict[str, Any] | None = None,
    ) -> 'MeasurementSet':
        """
        Build a set from parallel lists.

        Auxiliary metric lists are aligned with ``samples`` by position; shorter
        lists leave the remaining runs without that metric.
        """
        metrics = metrics or {}
        results = []
        for i, value in enumerate(samples):
            run_metrics = {}
            for name, values in metrics.items():
                if i < len(values):
                    run_metrics[name] = values[i]
            results.append(RunResult(value=float(value), metrics=run_metrics))
        return cls(results=results, label=label, configuration=dict(configuration or {}))

    @property
    def samples(self) -> list[float]:
        return [r.value for r in self.results]

    @property
    def iteration_count(self) -> int:
        return len(self.results)

    @property
    def metric_names(self) -> list[str]:
        names: list[str] = []
        for result in self.results:
            for name in result.metrics:
                if name not in names:
                    names.append(name)
        return names

    def metric_samples(self) -> dict[str, list[float]]:
        """Observed values of each auxiliary metric, skipping runs that lacked it."""
        collected: dict[str, list[float]] = {name: [] for name in self.metric_names}
        for result in self.results:
            for name, value in result.metrics.items():
                if value is not None:
                    collected[name].append(float(value))
        return collected

    @cached_property
    def statistics(self) -> DescriptiveStatistics:
        return compute_statistics(self.samples, label=self.label)

    def metric_statistics(
        self,
        confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
        method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
    ) -> dict[str, DescriptiveStatistics]:
        return summarize_metrics(self.metric_samples(), confidence_level, method)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'label': self.label,
            'configuration': dict(self.configuration),
            'created': self.created.isoformat(),
            'iteration_count': self.iteration_count,
            'results': [r.to_dict() for r in self.results],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'MeasurementSet':
        """Create from dictionary (JSON deserialization)"""
        created = data.get('created')
        return cls(
            results=[RunResult.from_dict(r) for r in data.get('results', [])],
            label=data.get('label', 'default'),
            configuration=dict(data.get('configuration', {})),
            created=datetime.fromisoformat(created) if created else datetime.now(),
        )


__all__ = ["RunResult", "MeasurementSet"]
