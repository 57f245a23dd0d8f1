"""
Tinkerer class features.

Each gadget family scales with the tinkerer's rank in it: basic,
advanced or superior.
"""

from enum import Enum

from pydantic import Field

from .registry import ClassFeatureDataModel


class GadgetRank(str, Enum):
    BASIC = "basic"
    ADVANCED = "advanced"
    SUPERIOR = "superior"


class AlchemyDataModel(ClassFeatureDataModel):
    translation: str = "FU.ClassFeatureAlchemy"

    rank: GadgetRank = GadgetRank.BASIC
    targets: list[str] = Field(default_factory=list)
    effects: list[str] = Field(default_factory=list)

    @property
    def dice(self) -> int:
        """Number of d20s rolled when mixing a potion."""
        return {GadgetRank.BASIC: 2, GadgetRank.ADVANCED: 3, GadgetRank.SUPERIOR: 4}[self.rank]


class InfusionsDataModel(ClassFeatureDataModel):
    translation: str = "FU.ClassFeatureInfusions"

    rank: GadgetRank = GadgetRank.BASIC
    description: str = ""


class MagitechDataModel(ClassFeatureDataModel):
    translation: str = "FU.ClassFeatureMagitech"

    rank: GadgetRank = GadgetRank.BASIC
    description: str = ""
