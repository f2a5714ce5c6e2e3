"""Core data types for perception classification hypotheses."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Sequence


class Label(enum.Enum):
    """Object category. Values are the wire codes of the upstream message schema."""

    UNKNOWN = 0
    CAR = 1
    TRUCK = 2
    BUS = 3
    TRAILER = 4
    MOTORCYCLE = 5
    BICYCLE = 6
    PEDESTRIAN = 7


class InvalidLabelName(ValueError):
    """Raised when a string is not one of the canonical label names."""

    def __init__(self, name: str):
        super().__init__(f"Invalid label name: {name!r}")
        self.name = name


@dataclass(frozen=True)
class Classification:
    """A single (label, probability) hypothesis for one object.

    The probability is carried as given; no range check is applied.
    """

    label: Label
    probability: float

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label.name, "probability": self.probability}

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Classification:
        """Build from a record dict. ``label`` may be a canonical name or an integer wire code."""
        raw = d["label"]
        if isinstance(raw, Label):
            label = raw
        elif isinstance(raw, str):
            from perception_utils.classification.object_classification import to_label

            label = to_label(raw)
        elif isinstance(raw, int) and not isinstance(raw, bool):
            label = Label(raw)
        else:
            raise ValueError(f"Not a label name or wire code: {raw!r}")
        return cls(label=label, probability=float(d["probability"]))


ClassificationList = Sequence[Classification]
