import click
from eth_utils import is_address, to_checksum_address

# uint256
MAX_FEE_TIER = 2**256 - 1


class FeeTier(click.ParamType):
    """Pool swap fee in basis points (30 = 0.30%)."""

    name = "fee_tier"

    def convert(self, value, param, ctx):
        try:
            fee_tier = int(value)
        except (TypeError, ValueError):
            self.fail(f"{value} is not a valid integer", param, ctx)
        if not 0 <= fee_tier <= MAX_FEE_TIER:
            self.fail(f"{value} is not a valid uint256 fee tier", param, ctx)
        return fee_tier


class ChecksumAddress(click.ParamType):
    name = "checksum_address"

    def convert(self, value, param, ctx):
        if not is_address(value):
            self.fail(f"{value} is not a valid ethereum address", param, ctx)
        return to_checksum_address(value)
