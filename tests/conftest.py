from types import SimpleNamespace

import pytest

from deployment.constants import LUMINA_PARAMS_FILEPATH
from deployment.params import NetworkConfig

DEPLOYED_ADDRESS = "0xABC0000000000000000000000000000000000123"


class FakeDeployFunction:
    """Records deployment requests and answers them like a confirmed deployment."""

    def __init__(self, address=DEPLOYED_ADDRESS, error=None):
        self.address = address
        self.error = error
        self.calls = list()

    def __call__(self, contract_name, *args):
        self.calls.append((contract_name, args))
        if self.error:
            raise self.error
        return SimpleNamespace(address=self.address)


# Fixtures
@pytest.fixture
def network_config():
    return NetworkConfig.from_yaml(LUMINA_PARAMS_FILEPATH)


@pytest.fixture
def deployed_address():
    return DEPLOYED_ADDRESS


@pytest.fixture
def deploy_fn():
    return FakeDeployFunction()


@pytest.fixture
def failing_deploy_fn():
    return FakeDeployFunction(error=RuntimeError("insufficient funds for gas"))


@pytest.fixture
def fake_network(monkeypatch):
    """Points the ape network manager used by deployment modules at a fake provider."""

    def _use(ecosystem_name, network_name, chain_id=1337):
        network = SimpleNamespace(
            name=network_name,
            chain_id=chain_id,
            ecosystem=SimpleNamespace(name=ecosystem_name),
        )
        manager = SimpleNamespace(provider=SimpleNamespace(network=network))
        monkeypatch.setattr("deployment.networks.networks", manager)
        monkeypatch.setattr("deployment.params.networks", manager)
        monkeypatch.setattr("deployment.utils.networks", manager)
        return network

    return _use
