"""Metric observation model"""
import math
from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Union

from ..errors import ObservationError

# bool is excluded even though it subclasses int
ScalarValue = Union[int, float, str]


@dataclass(frozen=True)
class MetricObservation:
    """Single metric data point sent to the aggregator"""
    name: str
    value: ScalarValue
    labels: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ObservationError("Metric name must be a non-empty string")

        if isinstance(self.value, bool) or not isinstance(self.value, (int, float, str)):
            raise ObservationError(
                f"Metric value must be int, float or str, got {type(self.value).__name__}"
            )
        if isinstance(self.value, float) and not math.isfinite(self.value):
            raise ObservationError(f"Metric value must be finite, got {self.value!r}")

        # Copy so later caller mutations never leak into an observation
        object.__setattr__(self, "labels", self._validate_labels(self.labels))

    @staticmethod
    def _validate_labels(labels: Optional[Mapping[str, str]]) -> Dict[str, str]:
        if labels is None:
            return {}
        if not isinstance(labels, MappingABC):
            raise ObservationError(f"Labels must be a mapping, got {type(labels).__name__}")
        for key, value in labels.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ObservationError(f"Label {key!r} must map a string to a string")
        return dict(labels)

    def to_dict(self) -> Dict[str, Any]:
        """Wire representation of the observation"""
        return {
            "name": self.name,
            "value": self.value,
            "labels": dict(self.labels),
        }
