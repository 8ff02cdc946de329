import typing
from collections import OrderedDict
from collections.abc import Mapping
from pathlib import Path
from typing import Any, List

from ape import networks
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import is_hex_address
from web3.auto import w3

from deployment.confirm import _confirm_resolution
from deployment.registry import registry_from_ape_deployments
from deployment.types import DeploymentConfig, DeploymentResult, DeploymentStatus
from deployment.utils import _load_yaml, check_plugins, get_contract_container, verify_contracts

MAILBOXES_KEY = "mailboxes"


class DeploymentConfigError(ValueError):
    pass


class NetworkConfig(Mapping):
    """Represents the mailbox address of each network a contract can be deployed to."""

    class UnknownNetwork(DeploymentConfigError):
        """Raised when there is no mailbox configured for a network"""

    def __init__(self, mailboxes: typing.Dict[str, str]):
        validate_mailboxes(mailboxes)
        self._mailboxes = OrderedDict(mailboxes)

    def __getitem__(self, network_name: str) -> ChecksumAddress:
        return self._mailboxes[network_name]

    def __iter__(self):
        return iter(self._mailboxes)

    def __len__(self) -> int:
        return len(self._mailboxes)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self._mailboxes)})"

    @classmethod
    def from_config(cls, config: typing.Dict) -> "NetworkConfig":
        """Loads the mailbox addresses from a params config."""
        mailboxes = config.get(MAILBOXES_KEY)
        if not mailboxes:
            raise DeploymentConfigError(f"'{MAILBOXES_KEY}' is not set in params file.")
        if not isinstance(mailboxes, dict):
            raise DeploymentConfigError(f"Malformed '{MAILBOXES_KEY}' in params file.")
        return cls(mailboxes=mailboxes)

    @classmethod
    def from_yaml(cls, filepath: Path) -> "NetworkConfig":
        config = _load_yaml(filepath)
        return cls.from_config(config)

    def resolve(self, network_name: str) -> ChecksumAddress:
        """Resolves the mailbox address for a single network."""
        return resolve_mailbox(network_name, self)


def validate_mailboxes(mailboxes: typing.Dict[str, str]) -> None:
    for network_name, address in mailboxes.items():
        if not address:
            raise DeploymentConfigError(f"Empty mailbox address for network '{network_name}'.")
        if not isinstance(address, str) or not is_hex_address(address):
            raise DeploymentConfigError(
                f"Mailbox address '{address}' for network '{network_name}' is not a valid address."
            )


def resolve_mailbox(
    network_name: str, address_table: typing.Mapping[str, ChecksumAddress]
) -> ChecksumAddress:
    mailbox = address_table.get(network_name)
    if not mailbox:
        raise NetworkConfig.UnknownNetwork(f"No mailbox for network: {network_name}")
    return mailbox


def run_deployment(config: DeploymentConfig) -> DeploymentResult:
    """
    Deploys a contract with the mailbox of the configured network as its only
    constructor parameter. Failures are reported in the result; the deploy
    function is never called for a network without a mailbox.
    """
    try:
        mailbox = resolve_mailbox(config.network_name, config.address_table)
    except NetworkConfig.UnknownNetwork as e:
        return DeploymentResult(
            status=DeploymentStatus.FAILURE,
            network_name=config.network_name,
            contract_name=config.contract_name,
            error_detail=str(e),
        )

    try:
        instance = config.deploy_fn(config.contract_name, mailbox)
    except Exception as e:
        return DeploymentResult(
            status=DeploymentStatus.FAILURE,
            network_name=config.network_name,
            contract_name=config.contract_name,
            mailbox_address=mailbox,
            error_detail=f"{e.__class__.__name__}: {e}",
        )

    return DeploymentResult(
        status=DeploymentStatus.SUCCESS,
        network_name=config.network_name,
        contract_name=config.contract_name,
        mailbox_address=mailbox,
        deployed_address=instance.address,
    )


def _resolve_constructor_params(container: ContractContainer, args: List[Any]) -> OrderedDict:
    """Names the constructor arguments after the constructor ABI, validating them."""
    contract_name = container.contract_type.name
    abi_inputs = container.constructor.abi.inputs
    if len(args) != len(abi_inputs):
        raise DeploymentConfigError(
            f"Constructor parameters length mismatch - "
            f"{contract_name} ABI requires {len(abi_inputs)}, Got {len(args)}."
        )

    resolved_params = OrderedDict()
    for position, (abi_input, value) in enumerate(zip(abi_inputs, args)):
        if not w3.is_encodable(abi_input.type, value):
            raise DeploymentConfigError(
                f"Constructor param name '{abi_input.name}' at position {position} has a value "
                f"'{value}' whose type does not match expected ABI type '{abi_input.type}'"
            )
        resolved_params[abi_input.name] = value
    return resolved_params


class ContractDeployer:
    """
    Represents an ape account plus validated/annotated execution of contract deployments.
    Instances are callable as the deploy function of a deployment config.
    """

    def __init__(
        self,
        network_name: str,
        verify: bool = False,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
    ):
        if account is None:
            self._account = select_account()
        else:
            self._account = account
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
        self._autosign = autosign
        self._account.set_autosign(autosign)

        check_plugins(verify=verify)
        self.network_name = network_name
        self.verify = verify
        self.deployments: List[ContractInstance] = list()
        self._print_deployment_info()

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def __call__(self, contract_name: str, *args) -> ContractInstance:
        container = get_contract_container(contract_name)
        resolved_params = _resolve_constructor_params(container, list(args))
        if not self._autosign:
            _confirm_resolution(resolved_params, contract_name, self.network_name)

        # blocks until the deployment receipt is available
        instance = self._account.deploy(container, *resolved_params.values(), publish=False)
        self.deployments.append(instance)
        return instance

    def finalize(self, registry_filepath: Path, replace: bool = False) -> Path:
        """
        Publishes the deployments to the registry and optionally to block explorers.
        """
        output_filepath = registry_from_ape_deployments(
            deployments=self.deployments,
            output_filepath=registry_filepath,
            replace=replace,
        )
        if self.verify:
            verify_contracts(contracts=self.deployments)
        return output_filepath

    def _print_deployment_info(self):
        print(
            f"Account: {self.get_account().address}",
            f"Verify: {self.verify}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.network.chain_id}",
            sep="\n",
        )
