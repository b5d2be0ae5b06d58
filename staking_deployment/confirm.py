from typing import Any, Sequence

from ape.utils import ZERO_ADDRESS


class DeploymentAborted(Exception):
    """Raised when the operator declines a deployment."""


def _declined(answer: str) -> bool:
    return answer.lower().strip() == "n"


def _confirm_deployment(contract_name: str) -> None:
    """Asks the user to confirm the deployment of a single contract."""
    answer = input(f"Deploy {contract_name} Y/N? ")
    if _declined(answer):
        print("Aborting deployment!")
        raise DeploymentAborted(f"Deployment of {contract_name} declined")


def _confirm_zero_address(contract_name: str) -> None:
    answer = input("Zero Address detected for deployment parameter; Continue? Y/N? ")
    if _declined(answer):
        print("Aborting deployment!")
        raise DeploymentAborted(f"Zero address parameter for {contract_name} declined")


def _confirm_resolution(resolved_args: Sequence[Any], contract_name: str) -> None:
    """Asks the user to confirm the resolved constructor arguments for a single contract."""
    if len(resolved_args) == 0:
        print(f"\n(i) No constructor parameters for {contract_name}")
        _confirm_deployment(contract_name)
        return

    print(f"\nConstructor parameters for {contract_name}")
    contains_zero_address = False
    for position, resolved_value in enumerate(resolved_args):
        print(f"\t[{position}]={resolved_value}")
        if not contains_zero_address:
            contains_zero_address = resolved_value == ZERO_ADDRESS
    _confirm_deployment(contract_name)
    if contains_zero_address:
        _confirm_zero_address(contract_name)
