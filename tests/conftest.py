import pytest

from staking_deployment.client import ContractFactory, DeploymentHandle, NetworkClient


class FakeHandle(DeploymentHandle):
    def __init__(self, address):
        self.address = address

    def await_confirmation(self):
        return self.address


class FakeFactory(ContractFactory):
    def __init__(self, client, contract_name):
        self.client = client
        self.contract_name = contract_name

    def deploy(self, *args):
        self.client.deployments.append((self.contract_name, args))
        failure = self.client.failures.get(self.contract_name)
        if failure is not None:
            raise failure
        return FakeHandle(self.client.addresses.pop(0))


class FakeNetworkClient(NetworkClient):
    """Records every deploy call and hands out addresses in order."""

    def __init__(self, addresses, failures=None):
        self.addresses = list(addresses)
        self.failures = failures or dict()
        self.deployments = list()

    def get_factory(self, contract_name):
        return FakeFactory(self, contract_name)


@pytest.fixture
def make_client():
    def _make_client(addresses=("0xA", "0xB", "0xC"), failures=None):
        return FakeNetworkClient(addresses=addresses, failures=failures)

    return _make_client
