import json
from collections import defaultdict
from pathlib import Path
from typing import Dict, List, NamedTuple

from ape.contracts import ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from eth_typing import ABI

from deployment.constants import DOMAIN_IDS
from deployment.utils import _load_json

ChainId = int
ContractName = str


STANDARD_REGISTRY_JSON_FORMAT = {"indent": 4, "separators": (",", ": ")}


class RegistryEntry(NamedTuple):
    """Represents a single entry in a contract registry."""

    chain_id: ChainId
    name: ContractName
    address: ChecksumAddress
    abi: ABI
    tx_hash: str
    block_number: int
    deployer: str


def _get_abi(contract_instance: ContractInstance) -> ABI:
    """Returns the ABI of a contract instance."""
    contract_abi = list()
    for entry in contract_instance.contract_type.abi:
        contract_abi.append(entry.model_dump(mode="json", by_alias=True))
    return contract_abi


def _get_entry(contract_instance: ContractInstance) -> RegistryEntry:
    receipt = contract_instance.receipt
    entry = RegistryEntry(
        name=contract_instance.contract_type.name,
        address=to_checksum_address(contract_instance.address),
        abi=_get_abi(contract_instance),
        chain_id=receipt.chain_id,
        tx_hash=receipt.txn_hash,
        block_number=receipt.block_number,
        deployer=receipt.transaction.sender,
    )
    return entry


def read_registry(filepath: Path) -> List[RegistryEntry]:
    data = _load_json(filepath)
    registry_entries = list()
    for chain_id, entries in data.items():
        for contract_name, artifacts in entries.items():
            registry_entry = RegistryEntry(
                chain_id=int(chain_id),
                name=contract_name,
                address=artifacts["address"],
                abi=artifacts["abi"],
                tx_hash=artifacts["tx_hash"],
                block_number=artifacts["block_number"],
                deployer=artifacts["deployer"],
            )
            registry_entries.append(registry_entry)
    return registry_entries


def unmerged_filepath(filepath: Path) -> Path:
    """Where deployments that would overwrite a registry are written instead."""
    return filepath.with_suffix(".unmerged.json")


def write_registry(
    entries: List[RegistryEntry], filepath: Path, silent: bool = False, replace: bool = False
) -> Path:
    """
    Writes a contract registry to a file.

    Entries for chains already present in an existing registry are written to a separate
    unmerged registry, unless `replace` is set, in which case they overwrite the existing
    entries of the same name on that chain.
    """

    if not entries:
        print("No entries provided.")
        return filepath

    # Sort registry entries to enforce common order
    entries = sorted(entries, key=lambda entry: (str(entry.chain_id), entry.name))

    data = defaultdict(dict)
    for entry in entries:
        entry_abi = list(entry.abi)
        entry_abi.sort(key=lambda d: (d["type"], d.get("name") or ""))

        data[str(entry.chain_id)][entry.name] = {
            "address": entry.address,
            "abi": entry_abi,
            "tx_hash": entry.tx_hash,
            "block_number": int(entry.block_number),
            "deployer": entry.deployer,
        }

    # Create the parent directory if it does not exist
    filepath.parent.mkdir(parents=True, exist_ok=True)

    # If the file already exists, attempt to merge the data, if not create a new file
    if filepath.exists():
        if not silent:
            print(f"Updating existing registry at {filepath}.")
        existing_data = _load_json(filepath)

        overlapping = [chain_id for chain_id in data if chain_id in existing_data]
        if overlapping and not replace:
            filepath = unmerged_filepath(filepath)
            if not silent:
                print(
                    "Cannot merge registries with overlapping chain IDs.\n"
                    f"Writing to {filepath} to avoid overwriting existing data."
                )
        else:
            if overlapping and not silent:
                print(f"Replacing existing entries for chain IDs {', '.join(overlapping)}.")
            for chain_id, chain_entries in data.items():
                existing_data.setdefault(chain_id, dict()).update(chain_entries)
            data = existing_data
    elif not silent:
        print(f"Creating new registry at {filepath}.")

    with open(filepath, "w") as file:
        json.dump(data, file, **STANDARD_REGISTRY_JSON_FORMAT)

    return filepath


def registry_from_ape_deployments(
    deployments: List[ContractInstance], output_filepath: Path, replace: bool = False
) -> Path:
    """Creates a contract registry from ape deployments API."""
    entries = [_get_entry(contract_instance=instance) for instance in deployments]
    output_filepath = write_registry(entries=entries, filepath=output_filepath, replace=replace)
    print(f"(i) Registry written to {output_filepath}!")
    return output_filepath


def contracts_by_network(
    filepath: Path, contract_name: ContractName
) -> Dict[str, ChecksumAddress]:
    """
    Returns the registered address of a contract for each known network.
    Networks are matched by chain ID, which is also their cross-chain domain ID.
    """
    networks_by_chain_id = {chain_id: network for network, chain_id in DOMAIN_IDS.items()}
    addresses = dict()
    for entry in read_registry(filepath=filepath):
        if entry.name != contract_name:
            continue
        network_name = networks_by_chain_id.get(entry.chain_id)
        if network_name:
            addresses[network_name] = entry.address
    return addresses
