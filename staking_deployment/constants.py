#
# Networks
#

LOCAL_BLOCKCHAIN_ENVIRONMENTS = ["local"]

INFURA_PROVIDER_NAME = "infura"

# block explorer API key per ecosystem
DEFAULT_EXPLORER_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"
EXPLORER_API_KEY_ENVVARS = {
    "ethereum": DEFAULT_EXPLORER_API_KEY_ENVVAR,
    "arbitrum": "ARBISCAN_API_KEY",
    "base": "BASESCAN_API_KEY",
    "optimism": "OPTIMISTIC_ETHERSCAN_API_KEY",
    "polygon": "POLYGONSCAN_API_KEY",
}

#
# Contracts
#

GOLD = "Gold"
STAKING = "Staking"
STAKING_RESERVE = "StakingReserve"

# operator-facing names, where they differ from the contract name
REPORT_NAMES = {
    STAKING_RESERVE: "Reserve",
}
