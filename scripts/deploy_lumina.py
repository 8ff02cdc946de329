#!/usr/bin/python3
import sys

import click
from ape.cli import ConnectedProviderCommand, account_option

from deployment import report
from deployment.networks import get_network_name
from deployment.options import (
    autosign_option,
    params_option,
    registry_option,
    replace_option,
    verify_option,
)
from deployment.params import ContractDeployer, NetworkConfig, run_deployment
from deployment.types import DeploymentConfig
from deployment.utils import _load_yaml, get_artifact_filepath


@click.command(cls=ConnectedProviderCommand, name="deploy-lumina")
@account_option()
@params_option
@registry_option
@verify_option
@autosign_option
@replace_option
def cli(account, params_filepath, registry_filepath, verify, autosign, replace):
    """
    Deploys LuminaProtocol with the mailbox of the connected network.

    ape run deploy_lumina --network base:sepolia:infura
    ape run deploy_lumina --network ethereum:sepolia:infura
    """
    config = _load_yaml(params_filepath)
    network_config = NetworkConfig.from_config(config)
    registry_filepath = registry_filepath or get_artifact_filepath(config=config)

    network_name = get_network_name()
    deployment_config = DeploymentConfig(
        network_name=network_name,
        address_table=network_config,
        deploy_fn=None,
    )
    report.print_start(network_name, deployment_config.contract_name)

    # fail before an account is selected for networks without a mailbox
    try:
        mailbox = network_config.resolve(network_name)
    except NetworkConfig.UnknownNetwork as e:
        report.print_error(str(e))
        sys.exit(1)
    report.print_mailbox(mailbox)

    deployer = ContractDeployer(
        network_name=network_name,
        verify=verify,
        account=account,
        autosign=autosign,
    )
    result = run_deployment(deployment_config._replace(deploy_fn=deployer))
    report.print_result(result)

    if result.succeeded:
        try:
            deployer.finalize(registry_filepath=registry_filepath, replace=replace)
        except Exception as e:
            print(
                f"WARNING: {result.contract_name} is deployed at {result.deployed_address} "
                f"but publishing it failed: {e.__class__.__name__}: {e}",
                file=sys.stderr,
            )

    sys.exit(report.exit_code(result))
