import json
import os
from pathlib import Path

import yaml

from trident.constants import ETHERSCAN_API_KEY_ENVVAR


def _load_yaml(filepath: Path) -> dict:
    """Loads a YAML file."""
    with open(filepath, "r") as file:
        return yaml.safe_load(file)


def _load_json(filepath: Path) -> dict:
    """Loads a JSON file."""
    with open(filepath, "r") as file:
        return json.load(file)


def get_etherscan_api_key() -> str:
    """Returns the explorer API key, which must be set in the environment."""
    api_key = os.environ.get(ETHERSCAN_API_KEY_ENVVAR)
    if not api_key:
        raise ValueError(f"{ETHERSCAN_API_KEY_ENVVAR} is not set.")
    return api_key
