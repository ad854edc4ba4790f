from pathlib import Path

import click

from trident.constants import DEFAULT_TWAP_ENABLED
from trident.types import ChecksumAddress, FeeTier

token_a_option = click.option(
    "--token-a",
    "-a",
    help="Token A; defaults to the wrapped native token of the network",
    type=ChecksumAddress(),
    required=False,
)

token_b_option = click.option(
    "--token-b",
    "-b",
    help="Token B; defaults to USDC on the network",
    type=ChecksumAddress(),
    required=False,
)

fee_option = click.option(
    "--fee",
    "-f",
    "fee_tier",
    help="Fee tier in basis points; defaults to 30 (0.30%)",
    type=FeeTier(),
    default=None,
)

twap_option = click.option(
    "--twap/--no-twap",
    "twap_enabled",
    help="Twap enabled",
    default=DEFAULT_TWAP_ENABLED,
    show_default=True,
)

registry_filepath_option = click.option(
    "--registry-filepath",
    "-r",
    help="Registry holding the MasterDeployer and ConstantProductPoolFactory deployments",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)

source_config_option = click.option(
    "--source-config",
    "-s",
    help="YAML file describing the ConstantProductPool verification source",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    required=True,
)


def pool_options(func):
    """Applies the constant product pool parameter options."""
    for option in reversed((token_a_option, token_b_option, fee_option, twap_option)):
        func = option(func)
    return func
