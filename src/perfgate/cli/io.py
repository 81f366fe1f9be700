"""
Sample file loading for the perfgate CLI.

Accepted JSON shapes:
    [10.1, 10.3, 9.9]
    {"label": "...", "samples": [...], "metrics": {"name": [...]}, "configuration": {...}}
    a serialized MeasurementSet ({"results": [...]})

Anything else raises SampleSetError naming the label and the offending field,
so the CLI reports it as an error rather than a verdict.
"""

import json
from pathlib import Path
from typing import Any

from ..core.errors import SampleSetError
from ..regression.measurement import MeasurementSet


def _malformed(label: str, field: str, reason: str) -> SampleSetError:
    return SampleSetError(
        f"Malformed sample data for '{label}': {reason}",
        {"label": label, "field": field}
    )


def _as_numbers(values: Any, label: str, field: str, allow_missing: bool = False) -> list[float | None]:
    if not isinstance(values, list):
        raise _malformed(label, field, f"'{field}' must be a list of numbers, got {type(values).__name__}")

    numbers: list[float | None] = []
    for index, value in enumerate(values):
        if value is None and allow_missing:
            numbers.append(None)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            numbers.append(float(value))
        else:
            raise _malformed(label, f"{field}[{index}]", f"expected a number, got {value!r}")
    return numbers


def measurements_from_data(data: Any, label: str) -> MeasurementSet:
    """Build a MeasurementSet from decoded JSON."""
    if isinstance(data, list):
        return MeasurementSet.from_samples(_as_numbers(data, label, "samples"), label=label)

    if isinstance(data, dict):
        if 'results' in data:
            if not isinstance(data['results'], list):
                raise _malformed(label, "results", "'results' must be a list of runs")
            try:
                measurements = MeasurementSet.from_dict(data)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise SampleSetError(
                    f"Malformed sample data for '{label}': invalid run entry",
                    {"label": label, "field": "results"},
                    cause=e
                ) from e
            if 'label' not in data:
                measurements.label = label
            return measurements
        if 'samples' in data:
            metrics = data.get('metrics') or {}
            if not isinstance(metrics, dict):
                raise _malformed(label, "metrics", "'metrics' must map metric names to lists of numbers")
            configuration = data.get('configuration')
            if configuration is not None and not isinstance(configuration, dict):
                raise _malformed(label, "configuration", "'configuration' must be an object")
            return MeasurementSet.from_samples(
                _as_numbers(data['samples'], label, "samples"),
                metrics={
                    name: _as_numbers(values, label, f"metrics.{name}", allow_missing=True)
                    for name, values in metrics.items()
                },
                label=data.get('label', label),
                configuration=configuration,
            )

    raise ValueError("Expected a list of numbers or an object with 'samples' or 'results'")


def load_measurements(path: str | Path, label: str | None = None) -> MeasurementSet:
    """
    Load a sample file.

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the content is not JSON or not a recognised shape
        SampleSetError: if a recognised shape holds non-numeric entries
        EmptySampleSetError: if it holds no samples
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sample file not found: {path}")

    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"{path} is not valid JSON: {e}") from e

    return measurements_from_data(data, label or path.stem)
