"""Unit tests for FrontendRulesContainer (infrastructure/di/container.py)."""

from unittest.mock import patch

import pytest

from frontend_rules.domain.config import LintConfiguration
from frontend_rules.infrastructure.di.container import FrontendRulesContainer
from frontend_rules.infrastructure.gateways.estree_gateway import EstreeGateway
from frontend_rules.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from frontend_rules.infrastructure.reporters import JsonViolationReporter, TerminalViolationReporter

LOADER = "frontend_rules.infrastructure.di.container.ConfigFileLoader.load_config_from_fs"


class TestFrontendRulesContainer:
    def test_registers_defaults(self) -> None:
        with patch(LOADER, return_value=({"extends": []}, {})):
            container = FrontendRulesContainer()
        assert container.get_config_dict() == {"extends": []}
        assert isinstance(container.get_configuration(), LintConfiguration)
        assert isinstance(container.get_filesystem_gateway(), FileSystemGateway)
        assert isinstance(container.get_ast_source(), EstreeGateway)
        reporters = container.get_reporters()
        assert isinstance(reporters["terminal"], TerminalViolationReporter)
        assert isinstance(reporters["json"], JsonViolationReporter)

    def test_unregistered_dependency(self) -> None:
        with patch(LOADER, return_value=({}, {})):
            container = FrontendRulesContainer()
        with pytest.raises(ValueError, match="Dependency not registered"):
            container.get("Missing")

    def test_get_instance_is_a_singleton(self) -> None:
        FrontendRulesContainer._instance = None
        try:
            with patch(LOADER, return_value=({}, {})):
                first = FrontendRulesContainer.get_instance()
                second = FrontendRulesContainer.get_instance()
            assert first is second
        finally:
            FrontendRulesContainer._instance = None
