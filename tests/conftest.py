import itertools

import pytest

from deployment.types import DeploymentResult

_addresses = itertools.count(1)


def next_address() -> str:
    return "0x" + format(next(_addresses), "040x")


class FakePendingContract:
    def __init__(self, name, error=None):
        self.name = name
        self.error = error

    def deployed(self):
        if self.error is not None:
            raise self.error
        return DeploymentResult(name=self.name, address=next_address(), chain_id=43114)


class FakeContractFactory:
    def __init__(self, backend, name):
        self.backend = backend
        self.name = name

    def deploy(self, *args):
        self.backend.deployments.append((self.name, args))
        return FakePendingContract(self.name, error=self.backend.error)


class FakeBackend:
    """Records every deployment instead of broadcasting it."""

    def __init__(self, error=None):
        self.error = error
        self.deployments = []

    def get_contract_factory(self, contract_name):
        return FakeContractFactory(self, contract_name)


# Fixtures
@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def failing_backend():
    return FakeBackend(error=RuntimeError("transaction reverted: insufficient funds"))
