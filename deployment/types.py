from enum import Enum
from typing import Any, Callable, Mapping, NamedTuple, Optional

from eth_typing import ChecksumAddress

from deployment.constants import LUMINA_CONTRACT

# (contract name, *constructor args) -> deployed contract handle with an `address`
DeployFunction = Callable[..., Any]


class DeploymentStatus(Enum):
    SUCCESS = "success"
    FAILURE = "failure"


class DeploymentConfig(NamedTuple):
    """Explicit inputs of a single contract deployment."""

    network_name: str
    address_table: Mapping[str, ChecksumAddress]
    deploy_fn: DeployFunction
    contract_name: str = LUMINA_CONTRACT


class DeploymentResult(NamedTuple):
    """Outcome of a single contract deployment."""

    status: DeploymentStatus
    network_name: str
    contract_name: str
    mailbox_address: Optional[ChecksumAddress] = None
    deployed_address: Optional[ChecksumAddress] = None
    error_detail: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status == DeploymentStatus.SUCCESS
