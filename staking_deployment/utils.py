import importlib
import os
from types import ModuleType
from typing import Iterator

from ape import networks, project
from ape.contracts import ContractContainer

from staking_deployment.constants import (
    DEFAULT_EXPLORER_API_KEY_ENVVAR,
    EXPLORER_API_KEY_ENVVARS,
    INFURA_PROVIDER_NAME,
)
from staking_deployment.networks import is_local_network


def _require_plugin(module_name: str, plugin_name: str) -> ModuleType:
    try:
        return importlib.import_module(module_name)
    except ImportError:
        raise ImportError(f"Please install the {plugin_name} plugin to deploy to a live network.")


def explorer_api_key_envvar(ecosystem_name: str) -> str:
    """Environment variable holding the block explorer API key for an ecosystem."""
    return EXPLORER_API_KEY_ENVVARS.get(ecosystem_name, DEFAULT_EXPLORER_API_KEY_ENVVAR)


def check_etherscan_plugin() -> None:
    """
    Checks that contracts can be published to the block explorer of the connected
    ecosystem: ape-etherscan must be installed and its API key variable set.
    """
    if is_local_network():
        return
    _require_plugin("ape_etherscan", "ape-etherscan")
    envvar = explorer_api_key_envvar(networks.provider.network.ecosystem.name)
    if not os.environ.get(envvar):
        raise ValueError(f"{envvar} is not set.")


def check_infura_plugin() -> None:
    """Checks that an Infura provider has an API key to work with."""
    if is_local_network() or networks.provider.name != INFURA_PROVIDER_NAME:
        return
    provider_module = _require_plugin("ape_infura.provider", "ape-infura")
    envvars = provider_module._ENVIRONMENT_VARIABLE_NAMES
    if not any(os.environ.get(envvar) for envvar in envvars):
        raise ValueError(
            f"No Infura API key found in environment variables: {', '.join(envvars)}"
        )


def check_plugins(verify: bool = False) -> None:
    print("Checking plugins...")
    if verify:
        check_etherscan_plugin()
    check_infura_plugin()


def _contract_sources() -> Iterator:
    """The project itself, then each installed dependency."""
    yield project
    for dependency_name, versions in project.dependencies.items():
        if len(versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency; {len(versions)} versions")
        yield from versions.values()


def get_contract_container(contract_name: str) -> ContractContainer:
    """Finds the compiled contract with this name."""
    for source in _contract_sources():
        container = getattr(source, contract_name, None)
        if container is not None:
            return container
    raise ValueError(
        f"No compiled contract named '{contract_name}' in the project or its dependencies."
    )
