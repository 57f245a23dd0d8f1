"""
Class features shipped with the system.

Registration is a static table; register_class_features() wires it into
a registry at startup.
"""

from ..state.schema import SYSTEM
from .arcanist import ArcanumDataModel
from .registry import ClassFeatureDataModel, ClassFeatureRegistry
from .tinkerer import AlchemyDataModel, InfusionsDataModel, MagitechDataModel


CLASS_FEATURES: dict[str, type[ClassFeatureDataModel]] = {
    "arcanum": ArcanumDataModel,
    "alchemy": AlchemyDataModel,
    "magitech": MagitechDataModel,
    "infusions": InfusionsDataModel,
}


def register_class_features(registry: ClassFeatureRegistry) -> None:
    for key, model in CLASS_FEATURES.items():
        registry.register(SYSTEM, key, model)
