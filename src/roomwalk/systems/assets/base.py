"""Base class for AssetManager."""

from abc import ABC, abstractmethod

from roomwalk.systems.base import BaseSystem


class AssetBaseManager(BaseSystem, ABC):
    """Base class for AssetManager."""

    role = "asset_manager"

    @abstractmethod
    def is_loaded(self) -> bool:
        """Check whether loaded assets have been handed over."""
        ...
