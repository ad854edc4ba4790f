#
# Networks
#

MAINNET = 1
KOVAN = 42
POLYGON = 137
ARBITRUM = 42161
SEPOLIA = 11155111

# the original tooling always defaulted to kovan tokens
REFERENCE_CHAIN_ID = KOVAN

#
# Default pool tokens (chain id -> (wrapped native, USDC))
#

DEFAULT_POOL_TOKENS = {
    MAINNET: (
        "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
    ),
    KOVAN: (
        "0xd0A1E359811322d97991E03f863a0C30C2cF029C",
        "0xb7a4F3E9097C08dA09517b5aB877F7a917224ede",
    ),
    POLYGON: (
        "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270",
        "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
    ),
    ARBITRUM: (
        "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
        "0xFF970A61A04b1cA14834A43f5dE4533eBDDB5CC8",
    ),
    SEPOLIA: (
        "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
    ),
}

DEFAULT_FEE_TIER = 30  # 0.30%
DEFAULT_TWAP_ENABLED = True

#
# Contracts
#

MASTER_DEPLOYER = "MasterDeployer"
CONSTANT_PRODUCT_POOL = "ConstantProductPool"
CONSTANT_PRODUCT_POOL_FACTORY = "ConstantProductPoolFactory"

# ConstantProductPool deploy data: (token0, token1, swapFee, twapSupport)
POOL_DEPLOY_DATA_TYPES = ["address", "address", "uint256", "bool"]

# ConstantProductPool constructor: (bytes _deployData, IMasterDeployer _masterDeployer)
POOL_CONSTRUCTOR_TYPES = ["bytes", "address"]

NULL_ADDRESS = "0x" + "0" * 40

# EIP-1014
CREATE2_PREFIX = b"\xff"

#
# Explorer
#

ETHERSCAN_API_KEY_ENVVAR = "ETHERSCAN_API_KEY"
ETHERSCAN_API_URL = "https://api.etherscan.io/v2/api"
ETHERSCAN_STANDARD_JSON_FORMAT = "solidity-standard-json-input"
ETHERSCAN_PENDING_PREFIX = "Pending"  # e.g. "Pending in queue"
ETHERSCAN_ALREADY_VERIFIED_RESULT = "Already Verified"
ETHERSCAN_POLL_INTERVAL = 5  # seconds
ETHERSCAN_MAX_STATUS_CHECKS = 20

# https://etherscan.io/contract-license-types
MIT_LICENSE_TYPE = 3
GPL3_LICENSE_TYPE = 5
