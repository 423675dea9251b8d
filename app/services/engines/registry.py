from typing import Type

from app.models.schemas import CipherCategory, CipherType
from app.services.engines.base import CipherEngine

_CATALOG_ORDER = {cipher_type: index for index, cipher_type in enumerate(CipherType)}


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engines and provides lookup by type or category.
    Engines are stateless, so a single shared instance per type is safe to
    use from any number of threads.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        # Lazy instantiation with caching
        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def get_engines_by_category(self, category: CipherCategory) -> list[CipherEngine]:
        """
        Get all engines belonging to a cipher category.

        Args:
            category: The cipher category

        Returns:
            List of engine instances in catalog order
        """
        return [
            engine
            for engine in self.get_all_engines()
            if engine.category == category
        ]

    def get_all_engines(self) -> list[CipherEngine]:
        """
        Get all registered engines.

        Returns:
            List of all engine instances in catalog order
        """
        return [
            self.get_engine(cipher_type)
            for cipher_type in self.list_registered()
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """
        List all registered cipher types.

        Returns:
            List of registered cipher types in catalog order
        """
        return sorted(cls._engines, key=_CATALOG_ORDER.__getitem__)


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from app.services.engines import (  # noqa: F401
        encoding,
        monoalphabetic,
        morse_based,
        polyalphabetic,
        polygraphic,
        transposition,
    )


# Load engines when module is imported
_load_engines()
