from typing import Callable, Optional, Union

from eth_abi import encode
from eth_typing import ChecksumAddress
from eth_utils import keccak, to_bytes, to_canonical_address, to_checksum_address
from hexbytes import HexBytes

from trident.constants import CREATE2_PREFIX, POOL_CONSTRUCTOR_TYPES
from trident.pool import PoolSpec, encode_deploy_data

BytesLike = Union[bytes, str]


class AddressResolutionError(ValueError):
    pass


def _as_bytes(value: BytesLike) -> bytes:
    if isinstance(value, str):
        return to_bytes(hexstr=value)
    return bytes(value)


def compute_create2_address(deployer: str, salt: BytesLike, init_code: BytesLike) -> ChecksumAddress:
    """EIP-1014: keccak256(0xff ++ deployer ++ salt ++ keccak256(init_code))[12:]"""
    salt = _as_bytes(salt)
    if len(salt) != 32:
        raise ValueError(f"CREATE2 salt must be 32 bytes, got {len(salt)}")
    preimage = (
        CREATE2_PREFIX + to_canonical_address(deployer) + salt + keccak(_as_bytes(init_code))
    )
    return to_checksum_address(keccak(preimage)[12:])


def encode_pool_constructor_args(deploy_data: bytes, master_deployer: str) -> bytes:
    """ABI encodes the ConstantProductPool constructor arguments."""
    return encode(POOL_CONSTRUCTOR_TYPES, [deploy_data, to_checksum_address(master_deployer)])


def compute_pool_address(
    pool: PoolSpec,
    pool_factory: str,
    master_deployer: str,
    creation_code: BytesLike,
) -> ChecksumAddress:
    """
    Computes the address a pool factory deploys a constant product pool to.

    The factory salts CREATE2 with keccak256 of the canonical deploy data, and
    the pool is constructed with (deploy data, master deployer).
    """
    deploy_data = encode_deploy_data(pool)
    salt = keccak(deploy_data)
    init_code = _as_bytes(creation_code) + encode_pool_constructor_args(
        deploy_data, master_deployer
    )
    return compute_create2_address(deployer=pool_factory, salt=salt, init_code=init_code)


class PoolAddressResolver:
    """
    Resolves the deterministic address of a constant product pool.

    When ``is_registered`` is provided it is consulted with the derived address
    (e.g. ``MasterDeployer.pools``); unknown pools fail resolution.
    """

    def __init__(
        self,
        pool_factory: str,
        master_deployer: str,
        creation_code: BytesLike,
        is_registered: Optional[Callable[[ChecksumAddress], bool]] = None,
    ):
        if not _as_bytes(creation_code):
            raise AddressResolutionError("Empty pool creation bytecode")
        self.pool_factory = to_checksum_address(pool_factory)
        self.master_deployer = to_checksum_address(master_deployer)
        self.creation_code = HexBytes(creation_code)
        self.is_registered = is_registered

    def resolve(self, pool: PoolSpec) -> ChecksumAddress:
        address = compute_pool_address(
            pool=pool,
            pool_factory=self.pool_factory,
            master_deployer=self.master_deployer,
            creation_code=self.creation_code,
        )
        if self.is_registered is not None and not self.is_registered(address):
            canonical_pool = pool.canonical()
            raise AddressResolutionError(
                f"No constant product pool deployed at {address} for "
                f"({canonical_pool.token_a}, {canonical_pool.token_b}, "
                f"fee={canonical_pool.fee_tier}, twap={canonical_pool.twap_enabled}); "
                f"pool is not registered with MasterDeployer {self.master_deployer}."
            )
        return address
