from typing import Any, List, Protocol

from eth_typing import ChecksumAddress
from eth_utils import is_same_address, to_checksum_address

from trident.address import AddressResolutionError
from trident.constants import NULL_ADDRESS
from trident.pool import PoolSpec, encode_deploy_data


class AddressResolver(Protocol):
    def resolve(self, pool: PoolSpec) -> ChecksumAddress:
        ...


class Verifier(Protocol):
    def verify(self, address: str, constructor_arguments: List[Any]) -> Any:
        ...


def verify_pool(
    pool: PoolSpec,
    master_deployer: str,
    resolver: AddressResolver,
    verifier: Verifier,
) -> ChecksumAddress:
    """
    Resolves the deterministic address of a constant product pool and submits
    it for explorer verification with its (deploy data, master deployer)
    constructor arguments. Failures of either collaborator propagate.
    """
    pool = pool.canonical()
    deploy_data = encode_deploy_data(pool)

    address = resolver.resolve(pool)
    if not address or is_same_address(address, NULL_ADDRESS):
        raise AddressResolutionError(f"No address resolved for pool {tuple(pool)}")
    address = to_checksum_address(address)

    print(f"Verify cpp {address}")

    verifier.verify(
        address,
        constructor_arguments=[deploy_data, to_checksum_address(master_deployer)],
    )
    return address
