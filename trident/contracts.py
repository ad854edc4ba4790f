from pathlib import Path
from typing import Callable

from ape import Contract, project
from ape.contracts import ContractContainer
from eth_typing import ChecksumAddress

from trident.address import PoolAddressResolver
from trident.constants import (
    CONSTANT_PRODUCT_POOL,
    CONSTANT_PRODUCT_POOL_FACTORY,
    MASTER_DEPLOYER,
)
from trident.registry import ChainId, RegistryEntry, get_registry_entry


def _get_dependency_contract_container(contract: str) -> ContractContainer:
    for dependency_name, dependency_versions in project.dependencies.items():
        if len(dependency_versions) > 1:
            raise ValueError(f"Ambiguous {dependency_name} dependency for {contract}")
        try:
            dependency_api = list(dependency_versions.values())[0]
            return getattr(dependency_api, contract)
        except AttributeError:
            continue
    raise ValueError(f"No contract found with name '{contract}'.")


def get_contract_container(contract: str) -> ContractContainer:
    try:
        contract_container = getattr(project, contract)
    except AttributeError:
        # not in root project; check dependencies
        contract_container = _get_dependency_contract_container(contract)

    return contract_container


def get_pool_creation_code() -> str:
    """Returns the compiled ConstantProductPool creation bytecode."""
    contract_type = get_contract_container(CONSTANT_PRODUCT_POOL).contract_type
    bytecode = contract_type.deployment_bytecode
    if bytecode is None or not bytecode.bytecode:
        raise ValueError(f"No deployment bytecode compiled for {CONSTANT_PRODUCT_POOL}.")
    return bytecode.bytecode


def master_deployer_pools(master_deployer: RegistryEntry) -> Callable[[ChecksumAddress], bool]:
    """Returns the MasterDeployer `pools(address)` lookup of registered pools."""
    instance = Contract(master_deployer.address, abi=master_deployer.abi)
    return instance.pools


def pool_address_resolver_from_registry(
    registry_filepath: Path, chain_id: ChainId, check_registration: bool = True
) -> PoolAddressResolver:
    """Builds a pool address resolver for the factory deployments in a registry."""
    master_deployer = get_registry_entry(
        filepath=registry_filepath, chain_id=chain_id, contract_name=MASTER_DEPLOYER
    )
    pool_factory = get_registry_entry(
        filepath=registry_filepath, chain_id=chain_id, contract_name=CONSTANT_PRODUCT_POOL_FACTORY
    )
    is_registered = master_deployer_pools(master_deployer) if check_registration else None
    return PoolAddressResolver(
        pool_factory=pool_factory.address,
        master_deployer=master_deployer.address,
        creation_code=get_pool_creation_code(),
        is_registered=is_registered,
    )
