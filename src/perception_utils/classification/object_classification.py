"""Highest-probability selection and label/name conversion.

All functions are pure: they read their arguments and return a new value.
Ties on the maximum probability resolve to the first hypothesis in
sequence order.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence

from perception_utils.core.types import (
    Classification,
    ClassificationList,
    InvalidLabelName,
    Label,
)

logger = logging.getLogger(__name__)

# Single name table; both conversion directions read from it.
LABEL_TO_NAME: dict[Label, str] = {label: label.name for label in Label}
NAME_TO_LABEL: dict[str, Label] = {name: label for label, name in LABEL_TO_NAME.items()}

_VEHICLE_LABELS = frozenset(
    {Label.BICYCLE, Label.BUS, Label.CAR, Label.MOTORCYCLE, Label.TRAILER, Label.TRUCK}
)
_CAR_LIKE_LABELS = frozenset({Label.BUS, Label.CAR, Label.TRAILER, Label.TRUCK})
_LARGE_VEHICLE_LABELS = frozenset({Label.BUS, Label.TRAILER, Label.TRUCK})


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


def get_highest_prob_classification(classifications: ClassificationList) -> Classification:
    """Return the hypothesis with the greatest probability.

    An entry replaces the running best only when its probability is strictly
    greater, so the first of several tied entries wins. An empty input
    yields ``Classification(Label.UNKNOWN, 0.0)``.
    """
    best: Classification | None = None
    for c in classifications:
        if best is None or c.probability > best.probability:
            best = c
    if best is None:
        return Classification(label=Label.UNKNOWN, probability=0.0)
    return best


def get_highest_prob_label(classifications: ClassificationList) -> Label:
    """Label of :func:`get_highest_prob_classification`; UNKNOWN when empty."""
    return get_highest_prob_classification(classifications).label


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------


def to_label(name: str) -> Label:
    """Map a canonical uppercase name to its Label (exact, case-sensitive).

    Raises:
        InvalidLabelName: if ``name`` is not a canonical name.
    """
    try:
        return NAME_TO_LABEL[name]
    except (KeyError, TypeError):
        logger.debug("Rejected label name %r", name)
        raise InvalidLabelName(name) from None


def convert_label_to_string(value: Label | Classification | ClassificationList) -> str:
    """Canonical name of a Label, a Classification, or a list's top hypothesis.

    Raises:
        ValueError: for a raw integer code or a member of another enum.
        TypeError: for any other argument type.
    """
    if isinstance(value, Label):
        return LABEL_TO_NAME[value]
    if isinstance(value, Classification):
        return convert_label_to_string(value.label)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return convert_label_to_string(get_highest_prob_label(value))
    if isinstance(value, (enum.Enum, int)):
        raise ValueError(f"Not a label value: {value!r}")
    raise TypeError(f"Cannot convert {type(value).__name__} to a label name")


def to_object_classification(name: str, probability: float) -> Classification:
    return Classification(label=to_label(name), probability=probability)


def to_object_classifications(name: str, probability: float) -> list[Classification]:
    return [to_object_classification(name, probability)]


# ---------------------------------------------------------------------------
# Category predicates
# ---------------------------------------------------------------------------


def _resolve_label(value: Label | Classification | ClassificationList) -> Label:
    if isinstance(value, Label):
        return value
    if isinstance(value, Classification):
        return value.label
    return get_highest_prob_label(value)


def is_vehicle(value: Label | Classification | ClassificationList) -> bool:
    return _resolve_label(value) in _VEHICLE_LABELS


def is_car_like_vehicle(value: Label | Classification | ClassificationList) -> bool:
    """Four-wheeled road vehicles: bus, car, trailer, truck."""
    return _resolve_label(value) in _CAR_LIKE_LABELS


def is_large_vehicle(value: Label | Classification | ClassificationList) -> bool:
    return _resolve_label(value) in _LARGE_VEHICLE_LABELS
