import pytest

from deployment.constants import BASE_SEPOLIA, SEPOLIA
from deployment.networks import get_network_name, is_local_network


@pytest.mark.parametrize(
    "ecosystem_name,network_name,expected",
    [
        ("base", "sepolia", BASE_SEPOLIA),
        ("ethereum", "sepolia", SEPOLIA),
        ("ethereum", "mainnet", "ethereum:mainnet"),
        ("base", "local", "base:local"),
    ],
)
def test_get_network_name(fake_network, ecosystem_name, network_name, expected):
    fake_network(ecosystem_name, network_name)
    assert get_network_name() == expected


def test_is_local_network(fake_network):
    fake_network("ethereum", "local")
    assert is_local_network()

    fake_network("base", "sepolia")
    assert not is_local_network()
