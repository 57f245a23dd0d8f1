"""
Registry of class feature data models.

Features are registered once at startup under "<namespace>.<key>" and
looked up by items that embed class feature data.
"""

import logging

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class ClassFeatureDataModel(BaseModel):
    """Base class for the data carried by a class feature item."""

    # Localization key of the feature's display name
    translation: str = ""


class ClassFeatureRegistry:
    """
    Maps qualified feature keys to data model classes.

    Registration is write-once: a second registration of the same key
    raises instead of replacing the first.
    """

    def __init__(self):
        self._features: dict[str, type[ClassFeatureDataModel]] = {}

    @staticmethod
    def qualify(namespace: str, key: str) -> str:
        return f"{namespace}.{key}"

    def register(self, namespace: str, key: str, model: type[ClassFeatureDataModel]) -> str:
        """
        Register a feature data model.

        Returns:
            The qualified key the model was registered under

        Raises:
            TypeError: If model is not a ClassFeatureDataModel subclass
            ValueError: If the key is already registered
        """
        if not (isinstance(model, type) and issubclass(model, ClassFeatureDataModel)):
            raise TypeError(f"{model!r} is not a ClassFeatureDataModel subclass")

        qualified = self.qualify(namespace, key)
        if qualified in self._features:
            raise ValueError(f"Class feature already registered: {qualified}")

        self._features[qualified] = model
        logger.debug(f"Registered class feature {qualified} -> {model.__name__}")
        return qualified

    def get(self, qualified_key: str) -> type[ClassFeatureDataModel] | None:
        return self._features.get(qualified_key)

    def keys(self) -> list[str]:
        return list(self._features)

    def __contains__(self, qualified_key: object) -> bool:
        return qualified_key in self._features

    def __len__(self) -> int:
        return len(self._features)
