from typing import Any, Optional

from rich.console import Console

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.domain.protocols import (
    AstSourceProtocol,
    FileSystemProtocol,
    ViolationReporterProtocol,
)
from frontend_rules.infrastructure.config_file_loader import ConfigFileLoader
from frontend_rules.infrastructure.gateways.estree_gateway import EstreeGateway
from frontend_rules.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from frontend_rules.infrastructure.reporters import (
    JsonViolationReporter,
    TerminalViolationReporter,
)


class FrontendRulesContainer:
    """Dependency Injection Container for the frontend rules CLI."""

    _instance: Optional["FrontendRulesContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        config_dict, _tool_section = ConfigFileLoader.load_config_from_fs()
        self.register_singleton("ConfigDict", config_dict)
        console = Console()
        self.register_singleton("Console", console)
        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("EstreeGateway", EstreeGateway(filesystem))
        self.register_singleton("TerminalViolationReporter", TerminalViolationReporter(console))
        self.register_singleton("JsonViolationReporter", JsonViolationReporter())

    @classmethod
    def get_instance(cls) -> "FrontendRulesContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register_singleton(self, key: str, instance: Any) -> None:
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        if key not in self._singletons:
            raise ValueError(f"Dependency not registered: {key}")
        return self._singletons[key]

    def get_config_dict(self) -> dict[str, object]:
        return self.get("ConfigDict")

    def get_configuration(self) -> LintConfiguration:
        """Build the configuration lazily so a bad config surfaces as a CLI error."""
        return LintConfiguration(self.get_config_dict())

    def get_console(self) -> Console:
        return self.get("Console")

    def get_filesystem_gateway(self) -> FileSystemProtocol:
        return self.get("FileSystemGateway")

    def get_ast_source(self) -> AstSourceProtocol:
        return self.get("EstreeGateway")

    def get_reporters(self) -> dict[str, ViolationReporterProtocol]:
        return {
            "terminal": self.get("TerminalViolationReporter"),
            "json": self.get("JsonViolationReporter"),
        }
