#!/usr/bin/python3
from pathlib import Path

import click

from deployment.constants import (
    DOMAIN_IDS,
    DOMAIN_LABELS,
    LUMINA_CONTRACT,
    NETWORK_ROLES,
    SUPPORTED_NETWORKS,
)
from deployment.registry import contracts_by_network, unmerged_filepath


@click.command()
@click.option(
    "--registry",
    "-r",
    "registry_filepath",
    help="Filepath of the registry holding the deployments",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)
@click.option(
    "--contract-name",
    "-c",
    help="Registry name of the cross-chain contract",
    default=LUMINA_CONTRACT,
)
def cli(registry_filepath, contract_name):
    """Summarize the cross-chain deployments of a contract found in a registry."""
    addresses = contracts_by_network(filepath=registry_filepath, contract_name=contract_name)
    unmerged = unmerged_filepath(registry_filepath)
    if unmerged.exists():
        click.echo(f"! Unmerged deployments found in {unmerged}; registry may be out of date.")

    for network_name in SUPPORTED_NETWORKS:
        address = addresses.get(network_name, "not deployed")
        click.echo(
            f"{DOMAIN_LABELS[network_name]} ({NETWORK_ROLES[network_name]}, "
            f"domain {DOMAIN_IDS[network_name]}): {address}"
        )

    missing = [network for network in SUPPORTED_NETWORKS if network not in addresses]
    if missing:
        click.echo(f"! Missing deployments for: {', '.join(missing)}")
        return

    click.echo("\n(i) Link the deployments with setCrossChainContract():")
    for network_name in SUPPORTED_NETWORKS:
        for peer in SUPPORTED_NETWORKS:
            if peer == network_name:
                continue
            click.echo(
                f"\ton {DOMAIN_LABELS[network_name]}: "
                f"domain {DOMAIN_IDS[peer]} -> {addresses[peer]}"
            )
