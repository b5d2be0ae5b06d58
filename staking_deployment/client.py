from abc import ABC, abstractmethod

from eth_typing import ChecksumAddress


class DeploymentHandle(ABC):
    """A submitted contract-creation transaction."""

    @abstractmethod
    def await_confirmation(self) -> ChecksumAddress:
        """Blocks until the deployment is confirmed and returns the contract address."""
        raise NotImplementedError


class ContractFactory(ABC):
    """Builds one contract type from its compiled artifacts."""

    @abstractmethod
    def deploy(self, *args) -> DeploymentHandle:
        raise NotImplementedError


class NetworkClient(ABC):
    """
    Represents the signing account and network connection used to deploy contracts.
    Passed explicitly to the orchestrator.
    """

    @abstractmethod
    def get_factory(self, contract_name: str) -> ContractFactory:
        raise NotImplementedError
