import json
import sys
import traceback
from pathlib import Path
from typing import Any, Callable

import click
from ape import networks, project
from ape.api.networks import LOCAL_NETWORK_NAME
from ape.contracts import ContractContainer

from deployment.confirm import confirm_continue
from deployment.constants import NetworkId
from deployment.types import DeploymentResult


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def is_local_network() -> bool:
    return networks.provider.network.name == LOCAL_NETWORK_NAME


def get_contract_container(contract: str) -> ContractContainer:
    try:
        return getattr(project, contract)
    except AttributeError:
        raise ValueError(f"No contract found with name '{contract}'.")


def check_network_consistency(network_id: NetworkId, chain_id: int, autosign: bool = False) -> bool:
    """
    Warns when the constants are resolved for a network other than the connected one.
    The deployment still goes ahead with the requested constants; returns True if they match.
    """
    if int(network_id) == int(chain_id):
        return True

    click.echo(
        f"WARNING: constructor arguments are resolved for {network_id.name} "
        f"(chain_id {int(network_id)}) but the connected network has chain_id {chain_id}.",
        err=True,
    )
    if not autosign:
        confirm_continue()
    return False


def report(result: DeploymentResult) -> None:
    print(f"{result.name} deployed to: {result.address}")


def run_deployment(procedure: Callable[[], Any]) -> Any:
    """
    Runs a deployment procedure; on any failure the traceback is printed
    to stderr and the process exits with status 1.
    """
    try:
        return procedure()
    except Exception:
        click.echo(traceback.format_exc(), err=True)
        sys.exit(1)
