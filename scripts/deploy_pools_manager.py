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
    Deploys the LiquidityPoolManager with the WAVAX, RADI, stable token and
    TreasuryVester addresses of the target network.

    ape run deploy_pools_manager --network avalanche:mainnet --target-network avalanche
    """

    def deploy():
        deployer = Deployer(
            network_id=target_network, account=account, autosign=autosign, registry=registry
        )
        liquidity_pool_manager = deployer.deploy_liquidity_pool_manager()
        deployer.finalize(liquidity_pool_manager)
        return liquidity_pool_manager

    run_deployment(deploy)


if __name__ == "__main__":
    cli()
