import typing
from typing import Any, NamedTuple, Optional

from ape import networks
from ape.api import AccountAPI, ReceiptAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer

from deployment.confirm import confirm_arguments, confirm_continue
from deployment.constants import (
    CONSTANT_TABLE,
    LIQUIDITY_POOL_MANAGER,
    TREASURY_VESTER_CONTRACT,
    ConstantTable,
    NetworkId,
)
from deployment.registry import registry_from_deployment
from deployment.types import DeploymentResult
from deployment.utils import (
    check_network_consistency,
    get_contract_container,
    is_local_network,
    report,
)

#
# Constructor arguments
#


class PoolManagerArguments(NamedTuple):
    """LiquidityPoolManager constructor arguments, in constructor order."""

    wavax: str
    radi: str
    stable_token: str
    treasury_vester: str


class VesterArguments(NamedTuple):
    """TreasuryVester constructor arguments."""

    radi: str


def resolve_constants(
    network_id: NetworkId, table: ConstantTable = CONSTANT_TABLE
) -> PoolManagerArguments:
    """
    Resolves the LiquidityPoolManager constructor arguments for a single network.
    All four values come from the same network entry. A network missing from the
    table raises KeyError; addresses are passed through without validation.
    """
    return PoolManagerArguments(
        wavax=table.wavax[network_id].address,
        radi=table.radi[network_id].address,
        stable_token=table.stable_token[network_id].address,
        treasury_vester=table.treasury_vester[network_id],
    )


def resolve_vester_constants(
    network_id: NetworkId, table: ConstantTable = CONSTANT_TABLE
) -> VesterArguments:
    """Resolves the TreasuryVester constructor argument for a single network."""
    return VesterArguments(radi=table.radi[network_id].address)


#
# Deployment collaborator
#


class PendingContract(typing.Protocol):
    def deployed(self) -> DeploymentResult:
        """Blocks until the contract is live on-chain."""


class ContractFactory(typing.Protocol):
    def deploy(self, *args: Any) -> PendingContract:
        """Broadcasts the contract creation transaction."""


class DeploymentBackend(typing.Protocol):
    def get_contract_factory(self, contract_name: str) -> ContractFactory:
        ...


class ApePendingContract:
    """A broadcast contract creation transaction awaiting confirmation."""

    def __init__(
        self, container: ContractContainer, receipt: ReceiptAPI, required_confirmations: int
    ):
        self.container = container
        self.receipt = receipt
        self.required_confirmations = required_confirmations

    def deployed(self) -> DeploymentResult:
        # the receipt was obtained without waiting; restore the network's confirmation count
        self.receipt.required_confirmations = self.required_confirmations
        self.receipt.await_confirmations()
        self.receipt.raise_for_status()
        return DeploymentResult(
            name=self.container.contract_type.name,
            address=self.receipt.contract_address,
            chain_id=self.receipt.transaction.chain_id,
            tx_hash=self.receipt.txn_hash,
            block_number=self.receipt.block_number,
            deployer=self.receipt.transaction.sender,
        )


class ApeContractFactory:
    """Deploys a project contract from an ape account."""

    def __init__(
        self,
        container: ContractContainer,
        account: AccountAPI,
        required_confirmations: Optional[int] = None,
    ):
        self.container = container
        self.account = account
        self.required_confirmations = required_confirmations

    def deploy(self, *args: Any) -> ApePendingContract:
        required_confirmations = self.required_confirmations
        if required_confirmations is None:
            required_confirmations = networks.provider.network.required_confirmations

        txn = self.container.constructor.serialize_transaction(*args)
        txn.sender = self.account.address
        # broadcast only; ApePendingContract.deployed awaits required_confirmations
        txn.required_confirmations = 0
        receipt = self.account.call(txn)
        return ApePendingContract(
            container=self.container,
            receipt=receipt,
            required_confirmations=required_confirmations,
        )


#
# Orchestration
#


def deploy_contract(
    backend: DeploymentBackend,
    contract_name: str,
    arguments: NamedTuple,
    confirm: bool = False,
) -> DeploymentResult:
    """
    Deploys a single contract with the given constructor arguments, waits for
    the deployment to be confirmed and prints the resulting address.
    No retries; any failure propagates to the caller.
    """
    if confirm:
        confirm_arguments(contract_name, arguments._asdict())
    factory = backend.get_contract_factory(contract_name)
    pending_contract = factory.deploy(*arguments)
    result = pending_contract.deployed()
    report(result)
    return result


def deploy_liquidity_pool_manager(
    backend: DeploymentBackend, network_id: NetworkId, confirm: bool = False
) -> DeploymentResult:
    arguments = resolve_constants(network_id)
    return deploy_contract(backend, LIQUIDITY_POOL_MANAGER, arguments, confirm=confirm)


def deploy_treasury_vester(
    backend: DeploymentBackend, network_id: NetworkId, confirm: bool = False
) -> DeploymentResult:
    arguments = resolve_vester_constants(network_id)
    return deploy_contract(backend, TREASURY_VESTER_CONTRACT, arguments, confirm=confirm)


class Deployer:
    """
    Represents an ape account deploying contracts with the constants
    of a single target network.
    """

    def __init__(
        self,
        network_id: NetworkId,
        account: Optional[AccountAPI] = None,
        autosign: bool = False,
        registry: bool = False,
    ):
        if account is None:
            account = select_account()
        self._account = account
        self.network_id = network_id
        self.autosign = autosign
        self.registry = registry
        if autosign:
            print("WARNING: Autosign is enabled. Transactions will be signed automatically.")
            # only keyfile accounts can be told to autosign; test accounts always do
            set_autosign = getattr(self._account, "set_autosign", None)
            if set_autosign is not None:
                set_autosign(True)

        self._print_deployment_info()
        if not is_local_network():
            check_network_consistency(
                network_id=network_id,
                chain_id=networks.provider.network.chain_id,
                autosign=autosign,
            )
        if not autosign:
            # Confirms the start of the deployment.
            confirm_continue()

    def get_account(self) -> AccountAPI:
        return self._account

    def get_contract_factory(self, contract_name: str) -> ApeContractFactory:
        container = get_contract_container(contract_name)
        return ApeContractFactory(container=container, account=self._account)

    def deploy_liquidity_pool_manager(self) -> DeploymentResult:
        return deploy_liquidity_pool_manager(self, self.network_id, confirm=not self.autosign)

    def deploy_treasury_vester(self) -> DeploymentResult:
        return deploy_treasury_vester(self, self.network_id, confirm=not self.autosign)

    def finalize(self, result: DeploymentResult) -> None:
        """Records the deployment in the registry when enabled."""
        if self.registry:
            registry_from_deployment(result=result, network_id=self.network_id)

    def _print_deployment_info(self):
        print(
            f"Account: {self._account.address}",
            f"Target Network: {self.network_id.name}",
            f"Registry: {'enabled' if self.registry else 'disabled'}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.network.chain_id}",
            f"Gas Price: {networks.provider.gas_price}",
            sep="\n",
        )
