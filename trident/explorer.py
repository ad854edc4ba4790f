import json
import time
import typing
from pathlib import Path
from typing import Any, Dict, List, Optional

import requests
from eth_utils import to_checksum_address

from trident.address import encode_pool_constructor_args
from trident.constants import (
    ETHERSCAN_ALREADY_VERIFIED_RESULT,
    ETHERSCAN_API_URL,
    ETHERSCAN_MAX_STATUS_CHECKS,
    ETHERSCAN_PENDING_PREFIX,
    ETHERSCAN_POLL_INTERVAL,
    ETHERSCAN_STANDARD_JSON_FORMAT,
    GPL3_LICENSE_TYPE,
)
from trident.utils import _load_json, _load_yaml


class VerificationError(RuntimeError):
    pass


class VerificationSource(typing.NamedTuple):
    """Compiler inputs an explorer needs to rebuild the pool bytecode."""

    contract_name: str  # fully qualified, e.g. contracts/pool/Pool.sol:Pool
    compiler_version: str
    standard_json: Dict[str, Any]
    license_type: int = GPL3_LICENSE_TYPE

    @classmethod
    def from_yaml(cls, filepath: Path) -> "VerificationSource":
        """
        Loads a verification source config. The standard json input path is
        relative to the config file unless absolute.
        """
        config = _load_yaml(filepath) or dict()
        contract = config.get("contract")
        if not contract:
            raise ValueError(f"Verification source config {filepath} missing 'contract' field.")

        for field in ("name", "compiler_version", "standard_json"):
            if not contract.get(field):
                raise ValueError(f"'{field}' is not set for contract in {filepath}.")

        standard_json_filepath = Path(contract["standard_json"])
        if not standard_json_filepath.is_absolute():
            standard_json_filepath = filepath.parent / standard_json_filepath
        if not standard_json_filepath.exists():
            raise ValueError(
                f"Standard json input {standard_json_filepath} not found; "
                f"export the solc input of the {contract['name']} build."
            )

        return cls(
            contract_name=contract["name"],
            compiler_version=contract["compiler_version"],
            standard_json=_load_json(standard_json_filepath),
            license_type=int(contract.get("license_type", GPL3_LICENSE_TYPE)),
        )


class EtherscanVerifier:
    """Submits constant product pool source verifications to the Etherscan v2 API."""

    def __init__(
        self,
        chain_id: int,
        api_key: str,
        source: VerificationSource,
        api_url: str = ETHERSCAN_API_URL,
        poll_interval: float = ETHERSCAN_POLL_INTERVAL,
        max_status_checks: int = ETHERSCAN_MAX_STATUS_CHECKS,
        session: Optional[requests.Session] = None,
    ):
        self.chain_id = chain_id
        self.api_key = api_key
        self.source = source
        self.api_url = api_url
        self.poll_interval = poll_interval
        self.max_status_checks = max_status_checks
        self.session = session or requests.Session()

    def _request(self, method: str, **kwargs) -> Dict[str, Any]:
        params = {"chainid": self.chain_id}
        params.update(kwargs.pop("params", {}))
        try:
            response = self.session.request(method, self.api_url, params=params, **kwargs)
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise VerificationError(f"Explorer request failed: {e}") from e
        except ValueError as e:
            raise VerificationError(f"Explorer returned a malformed response: {e}") from e

    def submit(self, address: str, constructor_arguments: List[Any]) -> str:
        """Submits a verification request and returns the explorer's GUID."""
        deploy_data, master_deployer = constructor_arguments
        encoded_arguments = encode_pool_constructor_args(deploy_data, master_deployer)
        data = {
            "apikey": self.api_key,
            "module": "contract",
            "action": "verifysourcecode",
            "contractaddress": to_checksum_address(address),
            "sourceCode": json.dumps(self.source.standard_json),
            "codeformat": ETHERSCAN_STANDARD_JSON_FORMAT,
            "contractname": self.source.contract_name,
            "compilerversion": self.source.compiler_version,
            "constructorArguements": encoded_arguments.hex(),  # sic
            "licenseType": self.source.license_type,
        }
        result = self._request("POST", data=data)
        if result.get("status") != "1":
            reason = result.get("result") or result.get("message")
            raise VerificationError(f"Verification of {address} rejected: {reason}")
        return result["result"]

    def check_status(self, guid: str) -> str:
        params = {
            "apikey": self.api_key,
            "module": "contract",
            "action": "checkverifystatus",
            "guid": guid,
        }
        result = self._request("GET", params=params)
        status_message = result.get("result", "")
        if status_message == ETHERSCAN_ALREADY_VERIFIED_RESULT:
            raise VerificationError(f"Verification failed: {status_message}")
        if result.get("status") == "1":
            return status_message
        if status_message.startswith(ETHERSCAN_PENDING_PREFIX):
            return status_message
        raise VerificationError(f"Verification failed: {status_message or result.get('message')}")

    def verify(self, address: str, constructor_arguments: List[Any]) -> str:
        guid = self.submit(address, constructor_arguments)
        print(f"(i) Verification submitted for {address}; GUID {guid}")
        for _ in range(self.max_status_checks):
            status = self.check_status(guid)
            if not status.startswith(ETHERSCAN_PENDING_PREFIX):
                print(f"(i) {status}")
                return status
            time.sleep(self.poll_interval)
        raise VerificationError(
            f"Verification of {address} still pending after {self.max_status_checks} checks; "
            f"GUID {guid}"
        )
