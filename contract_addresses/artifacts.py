import json
from pathlib import Path
from typing import Any, Dict, Union

from contract_addresses import log
from contract_addresses.constants import ARTIFACT_FILE_EXTENSION


class ContractAddressError(Exception):
    pass


class ArtifactNotFoundError(ContractAddressError):
    pass


class ArtifactFormatError(ContractAddressError):
    pass


class AddressNotDeployedError(ContractAddressError):
    pass


class ContractArtifact:
    """Build artifact of a single contract, as written by the toolchain.

    Only the ``networks`` section is of interest here. It maps each chain id
    (as a string, JSON object keys always are) to the deployment details of
    the contract on that chain::

        {"networks": {"15": {"address": "0x...", "transactionHash": "0x..."}}}

    The file is read on every call to ``load``, nothing is cached.
    """

    def __init__(self, contract_name: str, build_folder: Union[Path, str]):
        self.contract_name = contract_name
        self.build_folder = Path(build_folder)

    @property
    def file_path(self) -> Path:
        return self.build_folder.joinpath(f"{self.contract_name}{ARTIFACT_FILE_EXTENSION}")

    def load(self) -> Dict[str, Any]:
        log.debug(f"reading artifact {self.file_path}")
        try:
            with self.file_path.open(encoding="utf-8") as artifact_file:
                data = json.load(artifact_file)
        except OSError as exc:
            log.warning(f"Failed to read artifact {self.file_path}: {exc}")
            raise ArtifactNotFoundError(
                f"Could not read artifact for {self.contract_name} at {self.file_path}"
            ) from exc
        except ValueError as exc:
            log.warning(f"Failed to parse artifact {self.file_path}: {exc}")
            raise ArtifactFormatError(
                f"Artifact for {self.contract_name} at {self.file_path} is not valid JSON"
            ) from exc

        if not isinstance(data, dict):
            log.warning(f"Artifact {self.file_path} is not a JSON object")
            raise ArtifactFormatError(
                f"Artifact for {self.contract_name} at {self.file_path} is not a JSON object"
            )
        return data

    def get_address(self, chain_id: int) -> str:
        data = self.load()
        try:
            address = data["networks"][str(chain_id)]["address"]
        except (TypeError, KeyError) as exc:
            log.warning(f"{self.contract_name} lookup failed on chain id {chain_id}: {exc!r}")
            raise AddressNotDeployedError(
                f"{self.contract_name} is not deployed on chain id {chain_id}"
            ) from exc

        if not isinstance(address, str) or not address:
            log.warning(f"{self.contract_name} has no usable address on chain id {chain_id}: {address!r}")
            raise AddressNotDeployedError(
                f"{self.contract_name} has no address recorded for chain id {chain_id}"
            )
        return address
