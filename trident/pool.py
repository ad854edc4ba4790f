import typing
from typing import Dict, Optional, Tuple

from eth_abi import encode
from eth_typing import ChecksumAddress
from eth_utils import to_checksum_address
from web3.auto import w3

from trident.constants import (
    DEFAULT_FEE_TIER,
    DEFAULT_POOL_TOKENS,
    DEFAULT_TWAP_ENABLED,
    POOL_DEPLOY_DATA_TYPES,
)


class PoolParameterError(ValueError):
    pass


class PoolSpec(typing.NamedTuple):
    """Constructor parameters of a single constant product pool."""

    token_a: ChecksumAddress
    token_b: ChecksumAddress
    fee_tier: int
    twap_enabled: bool

    def canonical(self) -> "PoolSpec":
        """Returns the same pool with its token pair in factory order."""
        token0, token1 = canonicalize(self.token_a, self.token_b)
        return self._replace(token_a=token0, token_b=token1)

    def values(self) -> list:
        return list(self)


def canonicalize(token_a: str, token_b: str) -> Tuple[ChecksumAddress, ChecksumAddress]:
    """
    Orders a token pair ascending by numeric address value,
    the same comparison the pool factory applies on chain.
    """
    token_a, token_b = to_checksum_address(token_a), to_checksum_address(token_b)
    if int(token_a, 16) > int(token_b, 16):
        return token_b, token_a
    return token_a, token_b


def resolve_pool_spec(
    chain_id: int,
    token_a: Optional[str] = None,
    token_b: Optional[str] = None,
    fee_tier: Optional[int] = None,
    twap_enabled: Optional[bool] = None,
    defaults: Optional[Dict[int, Tuple[str, str]]] = None,
) -> PoolSpec:
    """
    Fills in omitted pool parameters and returns the canonical pool.

    Token defaults are looked up by chain id in ``defaults`` (the wrapped native
    token and USDC of each supported network); the fee tier defaults to 30 basis
    points and twap support to enabled.
    """
    defaults = DEFAULT_POOL_TOKENS if defaults is None else defaults
    if token_a is None or token_b is None:
        try:
            default_token_a, default_token_b = defaults[chain_id]
        except KeyError:
            raise PoolParameterError(
                f"No default pool tokens for chain {chain_id}; provide both token addresses."
            )
        token_a = default_token_a if token_a is None else token_a
        token_b = default_token_b if token_b is None else token_b

    pool = PoolSpec(
        token_a=to_checksum_address(token_a),
        token_b=to_checksum_address(token_b),
        fee_tier=DEFAULT_FEE_TIER if fee_tier is None else int(fee_tier),
        twap_enabled=DEFAULT_TWAP_ENABLED if twap_enabled is None else bool(twap_enabled),
    )
    return pool.canonical()


def _validate_deploy_data(values: list) -> None:
    for abi_type, value in zip(POOL_DEPLOY_DATA_TYPES, values):
        if not w3.is_encodable(abi_type, value):
            raise PoolParameterError(
                f"Pool parameter '{value}' cannot be encoded as ABI type '{abi_type}'"
            )


def encode_deploy_data(pool: PoolSpec) -> bytes:
    """ABI encodes the canonical (token0, token1, swapFee, twapSupport) tuple."""
    values = pool.canonical().values()
    _validate_deploy_data(values)
    return encode(POOL_DEPLOY_DATA_TYPES, values)
