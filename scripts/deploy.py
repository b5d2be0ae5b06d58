#!/usr/bin/python3

import click
from ape.cli import ConnectedProviderCommand, account_option, network_option

from staking_deployment.deployer import ApeDeployer
from staking_deployment.options import autosign_option, verify_option
from staking_deployment.orchestrator import main


@click.command(cls=ConnectedProviderCommand)
@account_option()
@network_option(required=True)
@autosign_option
@verify_option
def cli(network, account, autosign, verify):
    """
    Deploys Gold, Staking and StakingReserve.

    ape run deploy --network ethereum:sepolia:infura --account deployer
    """
    deployer = ApeDeployer(account=account, autosign=autosign, verify=verify)
    raise SystemExit(main(client=deployer))


if __name__ == "__main__":
    cli()
