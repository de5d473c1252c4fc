import json
from collections import defaultdict
from pathlib import Path
from typing import List, NamedTuple, Optional

import click
from eth_utils import to_checksum_address

from deployment.constants import ARTIFACTS_DIR, NetworkId
from deployment.types import DeploymentResult
from deployment.utils import _load_json

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class RegistryEntry(NamedTuple):
    """Represents a single deployed contract in a registry file."""

    chain_id: ChainId
    name: ContractName
    address: str
    tx_hash: Optional[str]
    block_number: Optional[int]
    deployer: Optional[str]


def registry_filepath_from_chain(chain_id: ChainId, artifacts_dir: Path = ARTIFACTS_DIR) -> Path:
    """Registry files are named after the network, or the raw chain id for other chains."""
    try:
        name = NetworkId(chain_id).name.lower()
    except ValueError:
        name = str(chain_id)
    return artifacts_dir / f"{name}.json"


def entry_from_deployment(result: DeploymentResult, chain_id: ChainId) -> RegistryEntry:
    # receipts report the chain they were mined on; prefer that over the caller's guess
    return RegistryEntry(
        chain_id=int(result.chain_id if result.chain_id is not None else chain_id),
        name=result.name,
        address=to_checksum_address(result.address),
        tx_hash=result.tx_hash,
        block_number=result.block_number,
        deployer=result.deployer,
    )


def read_registry(filepath: Path) -> List[RegistryEntry]:
    data = _load_json(filepath)
    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                address=artifacts["address"],
                tx_hash=artifacts.get("tx_hash"),
                block_number=artifacts.get("block_number"),
                deployer=artifacts.get("deployer"),
            )
            registry_entries.append(registry_entry)
    return registry_entries


def write_registry(entries: List[RegistryEntry], filepath: Path) -> Path:
    """
    Writes registry entries to a file, merging them into any existing registry.
    An existing entry for the same chain and contract name is replaced.
    """
    if not entries:
        print("No entries provided.")
        return filepath

    merged = dict()
    if filepath.exists():
        print(f"Updating existing registry at {filepath}.")
        for entry in read_registry(filepath):
            merged[(entry.chain_id, entry.name)] = entry
    else:
        print(f"Creating new registry at {filepath}.")

    for entry in entries:
        previous = merged.get((entry.chain_id, entry.name))
        if previous is not None and previous.address != entry.address:
            print(f"(i) Replacing {entry.name} at {previous.address} with {entry.address}")
        merged[(entry.chain_id, entry.name)] = entry

    # Sort registry entries to enforce common order
    data = defaultdict(dict)
    for entry in sorted(merged.values(), key=lambda e: (str(e.chain_id), e.name)):
        data[str(entry.chain_id)][entry.name] = {
            "address": entry.address,
            "tx_hash": entry.tx_hash,
            "block_number": entry.block_number,
            "deployer": entry.deployer,
        }

    filepath.parent.mkdir(parents=True, exist_ok=True)
    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


def registry_from_deployment(
    result: DeploymentResult, network_id: NetworkId, output_filepath: Optional[Path] = None
) -> Path:
    """Records a confirmed deployment in the registry of the chain it was deployed to."""
    entry = entry_from_deployment(result=result, chain_id=network_id.value)
    if entry.chain_id != network_id:
        click.echo(
            f"WARNING: {entry.name} was deployed to chain_id {entry.chain_id} "
            f"with constructor arguments for {network_id.name}.",
            err=True,
        )
    output_filepath = output_filepath or registry_filepath_from_chain(entry.chain_id)
    output_filepath = write_registry(entries=[entry], filepath=output_filepath)
    print(f"(i) Registry written to {output_filepath}!")
    return output_filepath
