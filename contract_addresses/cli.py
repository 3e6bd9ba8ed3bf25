import logging
import sys
from typing import Optional

import structlog
import typer
from eth_utils import to_checksum_address

from contract_addresses import default_settings
from contract_addresses.artifacts import ContractAddressError
from contract_addresses.constants import CONTRACT_NAMES
from contract_addresses.network import Network
from contract_addresses.resolver import AddressResolver

app = typer.Typer(help="Look up deployed contract addresses from build artifacts.")


class Messages:
    unknown_contract = "Unknown contract {}, choose one of: {}"
    lookup_failed = "Failed to resolve {}: {}"
    header = "Contract addresses on {} (chain id {})"


def configure_logging(verbose: bool):
    # sys.stderr is resolved per logger, it may be swapped after configuration
    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=lambda *args: structlog.PrintLogger(sys.stderr),
    )


def make_resolver(network_name: Optional[str], build_folder: Optional[str]) -> AddressResolver:
    try:
        network = Network.get_by_name(network_name or default_settings.network)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--network")

    return AddressResolver(network, build_folder or default_settings.build_folder)


def format_address(address: str, checksum: bool) -> str:
    return to_checksum_address(address) if checksum else address


@app.callback()
def main_callback(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs")):
    configure_logging(verbose)


@app.command()
def networks():
    """List the known networks and their chain ids."""
    for name in Network.get_network_names():
        typer.echo(f"{name}\t{Network.CHAIN_ID_MAPPING[name]}")


@app.command()
def show(
    network: Optional[str] = typer.Option(None, "--network", "-n", help="Network name"),
    build_folder: Optional[str] = typer.Option(None, "--build-folder", "-b"),
    checksum: bool = typer.Option(False, "--checksum", help="Print EIP-55 addresses"),
):
    """Print the address of every known contract."""
    resolver = make_resolver(network, build_folder)
    typer.echo(Messages.header.format(resolver.network.capitalized_name, resolver.network.chain_id))

    failed = False
    for contract_name in CONTRACT_NAMES:
        try:
            address = format_address(resolver.get_address(contract_name), checksum)
        except (ContractAddressError, ValueError) as exc:
            typer.echo(Messages.lookup_failed.format(contract_name, exc), err=True)
            failed = True
            continue
        typer.echo(f"{contract_name}\t{address}")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def get(
    contract_name: str = typer.Argument(...),
    network: Optional[str] = typer.Option(None, "--network", "-n", help="Network name"),
    build_folder: Optional[str] = typer.Option(None, "--build-folder", "-b"),
    checksum: bool = typer.Option(False, "--checksum", help="Print EIP-55 address"),
):
    """Print the address of a single contract."""
    if contract_name not in CONTRACT_NAMES:
        typer.echo(Messages.unknown_contract.format(contract_name, ", ".join(CONTRACT_NAMES)), err=True)
        raise typer.Exit(code=1)

    resolver = make_resolver(network, build_folder)
    try:
        address = format_address(resolver.get_address(contract_name), checksum)
    except (ContractAddressError, ValueError) as exc:
        typer.echo(Messages.lookup_failed.format(contract_name, exc), err=True)
        raise typer.Exit(code=1)

    typer.echo(address)


def main():
    app()


if __name__ == "__main__":
    main()
