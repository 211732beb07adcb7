from typing import Any, Optional, cast

from forbid_imports.domain.config import ConfigurationLoader
from forbid_imports.infrastructure.config_file_loader import ConfigFileLoader
from forbid_imports.infrastructure.gateways.astroid_gateway import AstroidGateway
from forbid_imports.infrastructure.services.guidance_service import GuidanceService


class ForbidImportsContainer:
    """Dependency Injection Container for the forbid-imports plugin."""

    _instance: Optional["ForbidImportsContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations."""
        config_dict = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigurationLoader", ConfigurationLoader(config_dict))
        self.register_singleton("AstroidGateway", AstroidGateway())
        self.register_singleton("GuidanceService", GuidanceService())

    @classmethod
    def get_instance(cls) -> "ForbidImportsContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance (tests, or after the working directory changes)."""
        cls._instance = None

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        return self._singletons.get(key)

    def get_config_loader(self) -> ConfigurationLoader:
        return cast(ConfigurationLoader, self.get("ConfigurationLoader"))

    def get_astroid_gateway(self) -> AstroidGateway:
        return cast(AstroidGateway, self.get("AstroidGateway"))

    def get_guidance_service(self) -> GuidanceService:
        return cast(GuidanceService, self.get("GuidanceService"))
