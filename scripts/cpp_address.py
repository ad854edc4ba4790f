import click
from ape import networks
from ape.cli import ConnectedProviderCommand, network_option

from trident.contracts import pool_address_resolver_from_registry
from trident.options import pool_options, registry_filepath_option
from trident.pool import encode_deploy_data, resolve_pool_spec


@click.command(cls=ConnectedProviderCommand, name="cpp-address")
@network_option(required=True)
@pool_options
@registry_filepath_option
@click.option(
    "--check-registration/--no-check-registration",
    help="Require the pool to be registered with the MasterDeployer",
    default=True,
    show_default=True,
)
def cli(network, token_a, token_b, fee_tier, twap_enabled, registry_filepath, check_registration):
    """Constant Product Pool deterministic address."""
    chain_id = networks.active_provider.chain_id
    pool = resolve_pool_spec(
        chain_id=chain_id,
        token_a=token_a,
        token_b=token_b,
        fee_tier=fee_tier,
        twap_enabled=twap_enabled,
    )
    resolver = pool_address_resolver_from_registry(
        registry_filepath=registry_filepath,
        chain_id=chain_id,
        check_registration=check_registration,
    )
    address = resolver.resolve(pool)

    click.secho("ConstantProductPool", fg="green")
    click.secho(f"    token0={pool.token_a}", fg="cyan")
    click.secho(f"    token1={pool.token_b}", fg="cyan")
    click.secho(f"    fee={pool.fee_tier}", fg="cyan")
    click.secho(f"    twap={pool.twap_enabled}", fg="cyan")
    click.secho(f"    deployData=0x{encode_deploy_data(pool).hex()}", fg="cyan")
    click.secho(f"    address={address}", fg="yellow")


if __name__ == "__main__":
    cli()
