from pathlib import Path
from typing import Annotated
from typing import Optional
from typing import TypeAlias

import typer
from pydantic import ValidationError
from rich.console import Console

from . import __version__
from .backend.index import backends
from .backend.index import load_machine_from_file
from .config import LoaderConfig
from .config import load_config
from .machine.base import MachineError

ConfigOption: TypeAlias = Annotated[
    Optional[Path],  # noqa
    typer.Option(
        "--config",
        resolve_path=True,
        readable=True,
        exists=True,
        dir_okay=False,
    ),
]


cli = typer.Typer(pretty_exceptions_enable=False)


def build_config(
    config_path: Path | None,
    program: Path | None,
    machine_type: str | None,
    warn_mode: bool | None,
) -> LoaderConfig:
    base = {} if config_path is None else load_config(config_path).model_dump()
    overrides = {
        "program": program,
        "machine_type": machine_type,
        "warn_mode": warn_mode,
    }
    return LoaderConfig.model_validate(
        base | {key: value for key, value in overrides.items() if value is not None}
    )


@cli.command()
def inspect(
    program: Optional[Path] = typer.Argument(default=None),  # noqa
    config_path: ConfigOption = None,
    machine_type: Optional[str] = typer.Option(None, "--vm-type"),  # noqa
    warn_mode: Optional[bool] = typer.Option(None, "--warn/--no-warn"),  # noqa
) -> None:
    """Load a program with the selected backend and print its hash."""
    console = Console()
    error_console = Console(stderr=True)

    try:
        config = build_config(config_path, program, machine_type, warn_mode)
    except ValidationError as exception:
        error_console.print(
            f"Invalid configuration: {exception}",
            style="red",
            markup=False,
            soft_wrap=True,
        )
        raise typer.Exit(1) from None

    try:
        machine = load_machine_from_file(
            config.program,
            config.warn_mode,
            config.machine_type.value,
        )
        machine_hash = machine.hash()
    except MachineError as exception:
        error_console.print(
            str(exception),
            style="red",
            markup=False,
            soft_wrap=True,
        )
        raise typer.Exit(1) from None

    console.print(config.machine_type.value)
    console.print(f"  program: {machine.path}", soft_wrap=True, markup=False)
    console.print(f"  hash: {machine_hash}", soft_wrap=True)


@cli.command()
def types() -> None:
    """List the available machine types."""
    console = Console()
    for machine_type in backends:
        console.print(machine_type.value)


def version_callback(print_version: bool) -> None:
    if not print_version:
        return
    print(f"avm version {__version__}")
    raise typer.Exit()


@cli.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Print version information.",
    ),
) -> None:
    pass


if __name__ == "__main__":
    cli()
