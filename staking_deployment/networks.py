from ape import networks

from staking_deployment.constants import LOCAL_BLOCKCHAIN_ENVIRONMENTS


def is_local_network() -> bool:
    """Returns True if the connected network is a local development chain."""
    return networks.provider.network.name in LOCAL_BLOCKCHAIN_ENVIRONMENTS
