"""Classification hypothesis selection and label conversion.

Stateless helpers consumed by detection, tracking and fusion stages to
collapse a per-object list of (label, probability) hypotheses into a
single category, and to move labels to and from their canonical names.
"""

from perception_utils.classification.object_classification import (
    LABEL_TO_NAME,
    NAME_TO_LABEL,
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

__all__ = [
    "LABEL_TO_NAME",
    "NAME_TO_LABEL",
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
