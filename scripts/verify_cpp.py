import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from trident.contracts import pool_address_resolver_from_registry
from trident.explorer import EtherscanVerifier, VerificationSource
from trident.options import pool_options, registry_filepath_option, source_config_option
from trident.pool import resolve_pool_spec
from trident.utils import get_etherscan_api_key
from trident.verify import verify_pool


@click.command(cls=ConnectedProviderCommand, name="cpp-verify")
@network_option(required=True)
@pool_options
@registry_filepath_option
@source_config_option
def cli(network, token_a, token_b, fee_tier, twap_enabled, registry_filepath, source_config):
    """Constant Product Pool verify."""
    api_key = get_etherscan_api_key()
    chain_id = networks.active_provider.chain_id

    pool = resolve_pool_spec(
        chain_id=chain_id,
        token_a=token_a,
        token_b=token_b,
        fee_tier=fee_tier,
        twap_enabled=twap_enabled,
    )
    resolver = pool_address_resolver_from_registry(
        registry_filepath=registry_filepath, chain_id=chain_id
    )
    verifier = EtherscanVerifier(
        chain_id=chain_id,
        api_key=api_key,
        source=VerificationSource.from_yaml(source_config),
    )

    address = verify_pool(
        pool=pool,
        master_deployer=resolver.master_deployer,
        resolver=resolver,
        verifier=verifier,
    )
    click.secho(f"Verified ConstantProductPool at {address}", fg="green")


if __name__ == "__main__":
    cli()
