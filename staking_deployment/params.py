import typing
from collections import OrderedDict
from typing import Any, Dict, List

from eth_typing import ChecksumAddress

from staking_deployment.constants import GOLD, REPORT_NAMES, STAKING, STAKING_RESERVE

VARIABLE_PREFIX = "$"


def is_variable(param: Any) -> bool:
    """Returns True if the param is a variable."""
    return isinstance(param, str) and param.startswith(VARIABLE_PREFIX)


def _variable_name(param: str) -> str:
    return param[len(VARIABLE_PREFIX) :]


def _resolve_param(value: Any, deployed: Dict[str, ChecksumAddress]) -> Any:
    """Resolves a single parameter value or a list of parameter values."""
    if isinstance(value, (list, tuple)):
        return [_resolve_param(v, deployed) for v in value]

    if not is_variable(value):
        return value  # literally a value

    contract_name = _variable_name(value)
    try:
        return deployed[contract_name]
    except KeyError:
        raise ValueError(f"Variable {value} cannot be resolved; {contract_name} is not deployed")


def _variables(value: Any) -> List[str]:
    if isinstance(value, (list, tuple)):
        return [name for v in value for name in _variables(v)]
    if is_variable(value):
        return [_variable_name(value)]
    return []


class DeploymentStep(typing.NamedTuple):
    """A single contract deployment and its constructor arguments."""

    contract_name: str
    constructor: typing.Tuple[Any, ...] = ()
    report_name: typing.Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.report_name or self.contract_name

    def dependencies(self) -> List[str]:
        """Names of the contracts whose addresses this step needs."""
        return _variables(self.constructor)

    def resolve(self, deployed: Dict[str, ChecksumAddress]) -> List[Any]:
        """Resolves the constructor arguments against already deployed contracts."""
        return [_resolve_param(value, deployed) for value in self.constructor]


class DeploymentPlan:
    """An ordered set of deployment steps."""

    class Invalid(Exception):
        """Raised when a step depends on a contract that is not deployed before it"""

    def __init__(self, steps: typing.Sequence[DeploymentStep]):
        self.steps = list(steps)
        self._validate()

    def _validate(self) -> None:
        earlier = OrderedDict()
        for position, step in enumerate(self.steps):
            if step.contract_name in earlier:
                raise self.Invalid(
                    f"{step.contract_name} appears more than once in the deployment plan."
                )
            for dependency in step.dependencies():
                if dependency not in earlier:
                    raise self.Invalid(
                        f"{step.contract_name} constructor parameter ${dependency} at step "
                        f"{position} does not refer to a contract deployed before it."
                    )
            earlier[step.contract_name] = step

    @property
    def contract_names(self) -> List[str]:
        return [step.contract_name for step in self.steps]

    def __iter__(self) -> typing.Iterator[DeploymentStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)


def _step(contract_name: str, *constructor: Any) -> DeploymentStep:
    return DeploymentStep(
        contract_name=contract_name,
        constructor=tuple(constructor),
        report_name=REPORT_NAMES.get(contract_name),
    )


STAKING_DEPLOYMENT = DeploymentPlan(
    [
        _step(GOLD),
        _step(STAKING, f"${GOLD}"),
        _step(STAKING_RESERVE, f"${GOLD}", f"${STAKING}"),
    ]
)
