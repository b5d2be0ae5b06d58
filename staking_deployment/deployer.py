import typing
from typing import List

from ape import networks
from ape.api import AccountAPI
from ape.cli.choices import select_account
from ape.contracts.base import ContractContainer, ContractInstance
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address

from staking_deployment.client import ContractFactory, DeploymentHandle, NetworkClient
from staking_deployment.confirm import _confirm_resolution
from staking_deployment.utils import check_plugins, get_contract_container


class ApeDeploymentHandle(DeploymentHandle):
    def __init__(self, instance: ContractInstance):
        self.instance = instance

    def await_confirmation(self) -> ChecksumAddress:
        # the receipt is already mined; wait for the network's required confirmations
        self.instance.receipt.await_confirmations()
        return to_checksum_address(self.instance.address)


class ApeContractFactory(ContractFactory):
    def __init__(self, deployer: "ApeDeployer", container: ContractContainer):
        self.deployer = deployer
        self.container = container

    def deploy(self, *args) -> ApeDeploymentHandle:
        instance = self.deployer.deploy(self.container, *args)
        return ApeDeploymentHandle(instance)


class ApeDeployer(NetworkClient):
    """
    Represents an ape account plus validated/annotated contract deployment.
    """

    def __init__(
        self,
        account: typing.Optional[AccountAPI] = None,
        autosign: bool = False,
        verify: bool = False,
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
        self.verify = verify
        self.deployments: List[ContractInstance] = list()
        self._print_deployment_info()

    def get_account(self) -> AccountAPI:
        """Returns the deployer account."""
        return self._account

    def get_factory(self, contract_name: str) -> ApeContractFactory:
        container = get_contract_container(contract_name)
        return ApeContractFactory(deployer=self, container=container)

    def _get_kwargs(self) -> typing.Dict[str, typing.Any]:
        """Returns the deployment kwargs."""
        return {"publish": self.verify}

    def deploy(self, container: ContractContainer, *args) -> ContractInstance:
        contract_name = container.contract_type.name
        if not self._autosign:
            _confirm_resolution(args, contract_name)

        instance = self._account.deploy(container, *args, **self._get_kwargs())
        self.deployments.append(instance)
        return instance

    def _print_deployment_info(self):
        print(
            f"Account: {self.get_account().address}",
            f"Verify: {self.verify}",
            f"Ecosystem: {networks.provider.network.ecosystem.name}",
            f"Network: {networks.provider.network.name}",
            f"Chain ID: {networks.provider.network.chain_id}",
            f"Gas Price: {networks.provider.gas_price}",
            sep="\n",
        )
