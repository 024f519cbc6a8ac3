"""Command-line interface for the web3 EIP-1193 provider adapter."""

import asyncio
import importlib
import inspect
import json
from pathlib import Path
from typing import Any

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .models import ProviderEvent, RequestArguments
from .provider import ProviderConfig, Web3Error, Web3ProvidersEip1193
from .utils import setup_logging, validate_config, validate_request

app = typer.Typer(
    name="web3-eip1193",
    help="Inspect and call EIP-1193 clients through the validating adapter",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


@app.command()
def events() -> None:
    """List the event names forwarded by the adapter."""
    table = Table(title="Provider Events")
    table.add_column("Name", style="cyan")
    table.add_column("Event")

    for event in ProviderEvent:
        table.add_row(event.name, event.value)

    console.print(table)


@app.command()
def check(
    client_target: str = typer.Argument(
        ...,
        help="Python path to the client object, class or factory (e.g., 'my_wallet:client')",
    ),
) -> None:
    """Check whether an object is a valid EIP-1193 client.

    Example:
        web3-eip1193 check my_wallet.provider:WalletProvider
    """
    client = load_client(client_target)

    try:
        Web3ProvidersEip1193.validate_client(client)
    except Web3Error as e:
        err_console.print(
            Panel.fit(
                escape(str(e)),
                title="[red]Invalid EIP-1193 client[/red]",
                border_style="red",
            )
        )
        raise typer.Exit(1)

    console.print(
        Panel.fit(
            f"[bold green]VALID[/bold green]\n\n"
            f"[bold]Client:[/bold] {client_target}\n"
            f"[bold]Type:[/bold] {type(client).__name__}",
            title="EIP-1193 Client",
            border_style="green",
        )
    )


@app.command()
def request(
    client_target: str = typer.Argument(
        ...,
        help="Python path to the client object, class or factory (e.g., 'my_wallet:client')",
    ),
    method: str = typer.Argument(..., help="RPC method to call (e.g., 'eth_chainId')"),
    params: str | None = typer.Option(
        None, "--params", "-p", help="JSON encoded method parameters"
    ),
    config_file: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to configuration file (YAML or JSON)",
        exists=True,
    ),
    log_level: str = typer.Option("WARNING", help="Log level"),
) -> None:
    """Send one request through the adapter and print the response.

    Example:
        web3-eip1193 request my_wallet:client eth_getBalance -p '["0xabc", "latest"]'
    """
    try:
        config = ProviderConfig(log_level=log_level)
    except ValidationError as e:
        err_console.print(f"[red]Error:[/red] Invalid log level: {escape(str(e))}")
        raise typer.Exit(1)

    if config_file:
        config = load_config(config_file, config)
    setup_logging(config.log_level)

    try:
        args = validate_request(
            {"method": method, "params": json.loads(params) if params else None},
            RequestArguments,
        )
    except ValueError as e:
        err_console.print(f"[red]Error:[/red] Invalid request: {escape(str(e))}")
        raise typer.Exit(1)

    client = load_client(client_target)

    async def send() -> Any:
        provider = Web3ProvidersEip1193(client, config)
        return await provider.request(args.model_dump(exclude_none=True))

    try:
        response = asyncio.run(send())
    except Web3Error as e:
        err_console.print(
            Panel.fit(escape(str(e)), title="[red]Invalid EIP-1193 client[/red]")
        )
        raise typer.Exit(1)
    except Exception as e:
        err_console.print(f"[red]Error:[/red] Request failed: {escape(str(e))}")
        raise typer.Exit(1)

    if isinstance(response, BaseModel):
        response = response.model_dump(mode="json")
    console.print_json(data=response, default=str)


def load_client(client_target: str) -> Any:
    """Import a client given as 'module:attribute'.

    Classes are instantiated and plain functions are called without
    arguments; any other object is returned as-is.
    """
    if ":" not in client_target:
        err_console.print(
            "[red]Error:[/red] Client must be in format 'module:attribute'"
        )
        raise typer.Exit(1)

    module_path, attribute = client_target.split(":", 1)

    try:
        module = importlib.import_module(module_path)
        target = getattr(module, attribute)
    except ImportError as e:
        err_console.print(
            f"[red]Error:[/red] Failed to import {module_path}: {escape(str(e))}"
        )
        raise typer.Exit(1)
    except AttributeError:
        err_console.print(
            f"[red]Error:[/red] {attribute} not found in {module_path}"
        )
        raise typer.Exit(1)

    if inspect.isclass(target) or inspect.isfunction(target):
        return target()
    return target


def load_config(config_file: Path, base_config: ProviderConfig) -> ProviderConfig:
    """Load configuration from file."""
    import yaml

    try:
        with open(config_file) as f:
            if config_file.suffix.lower() in [".yaml", ".yml"]:
                config_data = yaml.safe_load(f) or {}
            else:
                config_data = json.load(f)

        merged = {**base_config.model_dump(), **config_data}
        return validate_config(merged, ProviderConfig)

    except Exception as e:
        err_console.print(
            f"[red]Error:[/red] Failed to load config file: {escape(str(e))}"
        )
        raise typer.Exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
