import sys
import traceback
import typing
from collections import OrderedDict
from typing import List, Optional

from eth_typing import ChecksumAddress

from staking_deployment.client import NetworkClient
from staking_deployment.params import STAKING_DEPLOYMENT, DeploymentPlan, DeploymentStep


class StepResult(typing.NamedTuple):
    """Outcome of one deployment step: an address on success, the cause on failure."""

    step: DeploymentStep
    address: Optional[ChecksumAddress] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, step: DeploymentStep, address: ChecksumAddress) -> "StepResult":
        return cls(step=step, address=address)

    @classmethod
    def failure(cls, step: DeploymentStep, error: Exception) -> "StepResult":
        return cls(step=step, error=error)


class DeploymentOutcome(typing.NamedTuple):
    results: List[StepResult]

    @property
    def succeeded(self) -> bool:
        return all(result.ok for result in self.results)

    @property
    def failure(self) -> Optional[StepResult]:
        for result in self.results:
            if not result.ok:
                return result
        return None

    @property
    def addresses(self) -> "OrderedDict[str, ChecksumAddress]":
        return OrderedDict(
            (result.step.contract_name, result.address) for result in self.results if result.ok
        )


def deploy_step(
    client: NetworkClient, step: DeploymentStep, deployed: typing.Dict[str, ChecksumAddress]
) -> StepResult:
    """Deploys a single contract and waits for its confirmation."""
    try:
        args = step.resolve(deployed)
        factory = client.get_factory(step.contract_name)
        handle = factory.deploy(*args)
        address = handle.await_confirmation()
    except Exception as e:
        return StepResult.failure(step, e)
    return StepResult.success(step, address)


def run(client: NetworkClient, plan: DeploymentPlan = STAKING_DEPLOYMENT) -> DeploymentOutcome:
    """
    Deploys every contract of the plan in order, feeding each confirmed address
    into the constructor arguments of the steps that follow.
    Stops at the first failed step; earlier deployments are left in place.
    """
    deployed = OrderedDict()
    results = list()
    for step in plan:
        result = deploy_step(client=client, step=step, deployed=deployed)
        results.append(result)
        if not result.ok:
            break
        deployed[step.contract_name] = result.address
        print(f"{step.display_name} deployed to: {result.address}")

    return DeploymentOutcome(results=results)


def main(client: NetworkClient, plan: DeploymentPlan = STAKING_DEPLOYMENT) -> int:
    """Runs the deployment and returns the process exit status."""
    outcome = run(client=client, plan=plan)
    failure = outcome.failure
    if failure is None:
        return 0

    error = failure.error
    traceback.print_exception(type(error), error, error.__traceback__, file=sys.stderr)
    return 1
