"""Class feature data models and their registry."""

from .registry import ClassFeatureDataModel, ClassFeatureRegistry
from .class_features import CLASS_FEATURES, register_class_features
from .arcanist import ArcanumDataModel
from .tinkerer import (
    AlchemyDataModel,
    GadgetRank,
    InfusionsDataModel,
    MagitechDataModel,
)

__all__ = [
    "ClassFeatureDataModel",
    "ClassFeatureRegistry",
    "CLASS_FEATURES",
    "register_class_features",
    "ArcanumDataModel",
    "AlchemyDataModel",
    "GadgetRank",
    "InfusionsDataModel",
    "MagitechDataModel",
]
