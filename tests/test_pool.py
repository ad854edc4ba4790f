import pytest
from eth_utils import to_checksum_address

from tests.conftest import TOKEN_HIGH, TOKEN_LOW, USDC_KOVAN, WETH9_KOVAN, word
from trident.constants import KOVAN, MAINNET
from trident.pool import (
    PoolParameterError,
    PoolSpec,
    canonicalize,
    encode_deploy_data,
    resolve_pool_spec,
)


def test_canonicalize_is_order_independent():
    assert canonicalize(TOKEN_LOW, TOKEN_HIGH) == (TOKEN_LOW, TOKEN_HIGH)
    assert canonicalize(TOKEN_HIGH, TOKEN_LOW) == (TOKEN_LOW, TOKEN_HIGH)
    assert canonicalize(WETH9_KOVAN, USDC_KOVAN) == canonicalize(USDC_KOVAN, WETH9_KOVAN)


def test_canonicalize_ignores_address_case():
    token_a = "0xAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAAA"
    token_b = "0x0bbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbbb"
    expected = (to_checksum_address(token_b), to_checksum_address(token_a))
    assert canonicalize(token_a, token_b) == expected
    assert canonicalize(token_a.lower(), token_b.upper().replace("0X", "0x")) == expected


def test_canonicalize_same_token():
    assert canonicalize(TOKEN_LOW, TOKEN_LOW) == (TOKEN_LOW, TOKEN_LOW)


def test_canonicalize_returns_checksum_addresses():
    token0, token1 = canonicalize(USDC_KOVAN.lower(), WETH9_KOVAN.lower())
    assert token0 == to_checksum_address(USDC_KOVAN)
    assert token1 == to_checksum_address(WETH9_KOVAN)


def test_resolve_pool_spec_defaults():
    pool = resolve_pool_spec(chain_id=KOVAN)
    token0, token1 = canonicalize(WETH9_KOVAN, USDC_KOVAN)
    assert pool == PoolSpec(token_a=token0, token_b=token1, fee_tier=30, twap_enabled=True)


def test_resolve_pool_spec_overrides():
    pool = resolve_pool_spec(
        chain_id=KOVAN, token_a=TOKEN_HIGH, token_b=TOKEN_LOW, fee_tier=5, twap_enabled=False
    )
    assert pool == PoolSpec(token_a=TOKEN_LOW, token_b=TOKEN_HIGH, fee_tier=5, twap_enabled=False)


def test_resolve_pool_spec_partial_override():
    pool = resolve_pool_spec(chain_id=KOVAN, token_b=TOKEN_LOW)
    assert pool.token_a == TOKEN_LOW
    assert pool.token_b == to_checksum_address(WETH9_KOVAN)


def test_resolve_pool_spec_uses_injected_defaults():
    defaults = {1234: (TOKEN_HIGH, TOKEN_LOW)}
    pool = resolve_pool_spec(chain_id=1234, defaults=defaults)
    assert (pool.token_a, pool.token_b) == (TOKEN_LOW, TOKEN_HIGH)

    with pytest.raises(PoolParameterError, match="chain 42"):
        resolve_pool_spec(chain_id=KOVAN, defaults=defaults)


def test_resolve_pool_spec_unknown_network():
    with pytest.raises(PoolParameterError):
        resolve_pool_spec(chain_id=999999)

    # no defaults needed when both tokens are given
    pool = resolve_pool_spec(chain_id=999999, token_a=TOKEN_LOW, token_b=TOKEN_HIGH)
    assert pool.fee_tier == 30


def test_resolve_pool_spec_defaults_differ_per_network():
    assert resolve_pool_spec(chain_id=KOVAN) != resolve_pool_spec(chain_id=MAINNET)


def test_encode_reference_pool(reference_pool):
    deploy_data = encode_deploy_data(reference_pool)
    token0, token1 = canonicalize(WETH9_KOVAN, USDC_KOVAN)

    assert len(deploy_data) == 4 * 32
    assert word(deploy_data, 0) == bytes(12) + bytes.fromhex(token0[2:])
    assert word(deploy_data, 1) == bytes(12) + bytes.fromhex(token1[2:])
    assert word(deploy_data, 2) == (30).to_bytes(32, "big")
    assert word(deploy_data, 3) == (1).to_bytes(32, "big")


def test_encode_twap_disabled(reference_pool):
    deploy_data = encode_deploy_data(reference_pool._replace(twap_enabled=False))
    assert word(deploy_data, 3) == bytes(32)


def test_encode_is_deterministic(reference_pool):
    assert encode_deploy_data(reference_pool) == encode_deploy_data(reference_pool)
    assert encode_deploy_data(reference_pool) == encode_deploy_data(
        PoolSpec(*reference_pool)
    )


def test_encode_ignores_token_order(reference_pool):
    swapped = reference_pool._replace(
        token_a=reference_pool.token_b, token_b=reference_pool.token_a
    )
    assert encode_deploy_data(swapped) == encode_deploy_data(reference_pool)


def test_encode_invalid_fee(reference_pool):
    with pytest.raises(PoolParameterError):
        encode_deploy_data(reference_pool._replace(fee_tier=-1))
    with pytest.raises(PoolParameterError):
        encode_deploy_data(reference_pool._replace(fee_tier=2**256))
