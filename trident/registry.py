import json
from pathlib import Path
from typing import Dict, List, NamedTuple

from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

ChainId = int
ContractName = str


class RegistryError(ValueError):
    pass


class RegistryEntry(NamedTuple):
    """Represents a single deployed contract in a json contract registry."""

    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    abi: List[dict]
    tx_hash: str
    block_number: int
    deployer: str


def read_registry(filepath: Path) -> List[RegistryEntry]:
    if not filepath.exists():
        raise RegistryError(f"No registry found at {filepath}")

    with open(filepath, "r") as file:
        data = json.load(file)

    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                address=to_checksum_address(artifacts["address"]),
                abi=artifacts.get("abi", []),
                tx_hash=artifacts.get("tx_hash", ""),
                block_number=int(artifacts.get("block_number", 0)),
                deployer=artifacts.get("deployer", ""),
            )
            registry_entries.append(registry_entry)
    return registry_entries


def registry_entries_for_chain(
    filepath: Path, chain_id: ChainId
) -> Dict[ContractName, RegistryEntry]:
    """Returns the registry entries deployed on a single chain, keyed by contract name."""
    entries = dict()
    for registry_entry in read_registry(filepath=filepath):
        if registry_entry.chain_id != chain_id:
            continue
        entries[registry_entry.name] = registry_entry
    return entries


def get_registry_entry(
    filepath: Path, chain_id: ChainId, contract_name: ContractName
) -> RegistryEntry:
    entries = registry_entries_for_chain(filepath=filepath, chain_id=chain_id)
    try:
        return entries[contract_name]
    except KeyError:
        raise RegistryError(
            f"Contract '{contract_name}' not found in registry, '{filepath}', "
            f"for chain {chain_id}"
        )
