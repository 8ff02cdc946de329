import json

from deployment.constants import BASE_SEPOLIA, DOMAIN_IDS, LUMINA_CONTRACT, SEPOLIA
from deployment.registry import (
    RegistryEntry,
    contracts_by_network,
    read_registry,
    unmerged_filepath,
    write_registry,
)

ABI = [
    {"type": "function", "name": "setCrossChainContract", "inputs": [], "outputs": []},
    {"type": "constructor", "inputs": [{"name": "_mailbox", "type": "address"}]},
]
DEPLOYER = "0x3B42d26E19FF860bC4dEbB920DD8caA53F93c600"


def _entry(network_name, address, name=LUMINA_CONTRACT):
    return RegistryEntry(
        chain_id=DOMAIN_IDS[network_name],
        name=name,
        address=address,
        abi=ABI,
        tx_hash="0x" + "ab" * 32,
        block_number=42,
        deployer=DEPLOYER,
    )


def test_write_new_registry(tmp_path):
    filepath = tmp_path / "artifacts" / "lumina.json"
    entry = _entry(BASE_SEPOLIA, "0x68E95C2548363Bf5856667065Bc1B89CC498969F")

    output_filepath = write_registry(entries=[entry], filepath=filepath)

    assert output_filepath == filepath
    with open(filepath, "r") as file:
        data = json.load(file)
    artifacts = data["84532"][LUMINA_CONTRACT]
    assert artifacts["address"] == entry.address
    assert artifacts["deployer"] == DEPLOYER
    assert artifacts["block_number"] == 42
    # abi entries are sorted by type
    assert [d["type"] for d in artifacts["abi"]] == ["constructor", "function"]
    assert read_registry(filepath) == [entry._replace(abi=artifacts["abi"])]


def test_write_registry_merges_other_chains(tmp_path):
    filepath = tmp_path / "lumina.json"
    write_registry(entries=[_entry(BASE_SEPOLIA, DEPLOYER)], filepath=filepath)
    write_registry(entries=[_entry(SEPOLIA, DEPLOYER)], filepath=filepath)

    with open(filepath, "r") as file:
        data = json.load(file)
    assert set(data) == {"84532", "11155111"}


def test_write_registry_does_not_overwrite_chain(tmp_path):
    filepath = tmp_path / "lumina.json"
    write_registry(entries=[_entry(SEPOLIA, DEPLOYER)], filepath=filepath)
    redeployment = _entry(SEPOLIA, "0x68E95C2548363Bf5856667065Bc1B89CC498969F")

    output_filepath = write_registry(entries=[redeployment], filepath=filepath)

    assert output_filepath == tmp_path / "lumina.unmerged.json"
    assert read_registry(filepath)[0].address == DEPLOYER
    assert read_registry(output_filepath)[0].address == redeployment.address


def test_write_empty_registry(tmp_path):
    filepath = tmp_path / "lumina.json"
    assert write_registry(entries=[], filepath=filepath) == filepath
    assert not filepath.exists()


def test_contracts_by_network(tmp_path):
    filepath = tmp_path / "lumina.json"
    source = "0x68E95C2548363Bf5856667065Bc1B89CC498969F"
    entries = [
        _entry(BASE_SEPOLIA, source),
        _entry(SEPOLIA, DEPLOYER, name="Mailbox"),
        RegistryEntry(1, LUMINA_CONTRACT, DEPLOYER, ABI, "0x00", 1, DEPLOYER),
    ]
    write_registry(entries=entries, filepath=filepath)

    assert contracts_by_network(filepath, LUMINA_CONTRACT) == {BASE_SEPOLIA: source}
    assert contracts_by_network(filepath, "Mailbox") == {SEPOLIA: DEPLOYER}


def test_write_registry_replaces_chain_entries(tmp_path):
    filepath = tmp_path / "lumina.json"
    write_registry(
        entries=[_entry(SEPOLIA, DEPLOYER), _entry(SEPOLIA, DEPLOYER, name="Mailbox")],
        filepath=filepath,
    )
    write_registry(entries=[_entry(BASE_SEPOLIA, DEPLOYER)], filepath=filepath)
    redeployment = _entry(SEPOLIA, "0x68E95C2548363Bf5856667065Bc1B89CC498969F")

    output_filepath = write_registry(entries=[redeployment], filepath=filepath, replace=True)

    assert output_filepath == filepath
    assert not unmerged_filepath(filepath).exists()
    assert contracts_by_network(filepath, LUMINA_CONTRACT) == {
        BASE_SEPOLIA: DEPLOYER,
        SEPOLIA: redeployment.address,
    }
    # other contracts on the replaced chain are kept
    assert contracts_by_network(filepath, "Mailbox") == {SEPOLIA: DEPLOYER}
