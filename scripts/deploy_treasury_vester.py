#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from deployment.options import autosign_option, registry_option, target_network_option
from deployment.params import Deployer
from deployment.utils import run_deployment


@click.command(cls=ConnectedProviderCommand)
@network_option()
@account_option()
@target_network_option
@autosign_option
@registry_option
def cli(network, account, target_network, autosign, registry):
    """
    Deploys the TreasuryVester for the RADI token of the target network.

    ape run deploy_treasury_vester --network avalanche:fuji --target-network fuji
    """

    def deploy():
        deployer = Deployer(
            network_id=target_network, account=account, autosign=autosign, registry=registry
        )
        treasury_vester = deployer.deploy_treasury_vester()
        deployer.finalize(treasury_vester)
        return treasury_vester

    run_deployment(deploy)


if __name__ == "__main__":
    cli()
