"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from frontend_rules.infrastructure.di.container import FrontendRulesContainer
from frontend_rules.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = FrontendRulesContainer.get_instance()

    deps = CLIDependencies(
        config_dict=container.get_config_dict(),
        ast_source=container.get_ast_source(),
        filesystem=container.get_filesystem_gateway(),
        reporters=container.get_reporters(),
        console=container.get_console(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
