"""Main CLI entry point for LiveCharts.

Subcommands are imported only when invoked so that `livecharts --help`
stays fast.
"""

import importlib

import click


class LazyGroup(click.Group):
    """A click Group that imports its subcommands on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        base = super().list_commands(ctx)
        return sorted(set(base) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                self.add_command(attr)
                return attr

        raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")


LAZY_SUBCOMMANDS = {
    "simulate": "livecharts.cli.simulate",
    "config": "livecharts.cli.settings",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="livecharts")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """LiveCharts - incremental chart updates for running computations.

    \b
    Quick Start:
      livecharts simulate            # Stream a simulated equity curve
      livecharts simulate --json     # Emit each update as JSON
      livecharts config              # Show effective settings
    """
    ctx.ensure_object(dict)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
