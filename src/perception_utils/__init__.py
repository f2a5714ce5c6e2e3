"""Perception classification utilities."""

from perception_utils.classification import (
    convert_label_to_string,
    get_highest_prob_classification,
    get_highest_prob_label,
    is_car_like_vehicle,
    is_large_vehicle,
    is_vehicle,
    to_label,
    to_object_classification,
    to_object_classifications,
)
from perception_utils.core.types import Classification, InvalidLabelName, Label

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "InvalidLabelName",
    "Label",
    "convert_label_to_string",
    "get_highest_prob_classification",
    "get_highest_prob_label",
    "is_car_like_vehicle",
    "is_large_vehicle",
    "is_vehicle",
    "to_label",
    "to_object_classification",
    "to_object_classifications",
]
