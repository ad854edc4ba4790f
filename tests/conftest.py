import json

import pytest

from trident.constants import (
    CONSTANT_PRODUCT_POOL_FACTORY,
    DEFAULT_POOL_TOKENS,
    KOVAN,
    MASTER_DEPLOYER,
)
from trident.pool import PoolSpec

# Common constants
WETH9_KOVAN, USDC_KOVAN = DEFAULT_POOL_TOKENS[KOVAN]
TOKEN_LOW = "0x1111111111111111111111111111111111111111"
TOKEN_HIGH = "0x9999999999999999999999999999999999999999"
MASTER_DEPLOYER_ADDRESS = "0x3333333333333333333333333333333333333333"
POOL_FACTORY_ADDRESS = "0x4444444444444444444444444444444444444444"

# stand-in for compiled ConstantProductPool creation code
POOL_CREATION_CODE = bytes.fromhex("6080604052348015600f57600080fd5b50")

WORD_SIZE = 32


# Utility functions
def word(data: bytes, index: int) -> bytes:
    return data[index * WORD_SIZE : (index + 1) * WORD_SIZE]


def registry_data(chain_id=KOVAN):
    def entry(address, block_number):
        return {
            "address": address,
            "abi": [],
            "tx_hash": "0x" + "ab" * 32,
            "block_number": block_number,
            "deployer": "0x000000000000000000000000000000000000dEaD",
        }

    return {
        str(chain_id): {
            MASTER_DEPLOYER: entry(MASTER_DEPLOYER_ADDRESS, 100),
            CONSTANT_PRODUCT_POOL_FACTORY: entry(POOL_FACTORY_ADDRESS, 101),
        }
    }


# Fixtures
@pytest.fixture
def reference_pool():
    return PoolSpec(token_a=WETH9_KOVAN, token_b=USDC_KOVAN, fee_tier=30, twap_enabled=True)


@pytest.fixture
def registry_filepath(tmp_path):
    filepath = tmp_path / "registry.json"
    with open(filepath, "w") as file:
        json.dump(registry_data(), file, indent=4)
    return filepath


@pytest.fixture
def standard_json():
    return {
        "language": "Solidity",
        "sources": {"contracts/pool/ConstantProductPool.sol": {"content": "contract Pool {}"}},
        "settings": {"optimizer": {"enabled": True, "runs": 999999}},
    }


@pytest.fixture
def source_config(tmp_path, standard_json):
    with open(tmp_path / "ConstantProductPool.json", "w") as file:
        json.dump(standard_json, file)

    filepath = tmp_path / "constant-product-pool.yml"
    filepath.write_text(
        "contract:\n"
        "  name: contracts/pool/ConstantProductPool.sol:ConstantProductPool\n"
        "  compiler_version: v0.8.7+commit.e28d00a7\n"
        "  standard_json: ConstantProductPool.json\n"
    )
    return filepath
