"""Arcanist class features."""

from pydantic import Field

from .registry import ClassFeatureDataModel


class ArcanumDataModel(ClassFeatureDataModel):
    """An arcanum: the domains it rules and its merge/dismiss effects."""
    translation: str = "FU.ClassFeatureArcanum"

    domains: list[str] = Field(default_factory=list)
    merge: str = ""
    dismiss: str = ""
