import json
import shutil
from pathlib import Path


def write_artifact(build_folder: Path, contract_name: str, data) -> Path:
    build_folder.mkdir(parents=True, exist_ok=True)
    file_path = build_folder.joinpath(f"{contract_name}.json")
    with file_path.open("w", encoding="utf-8") as artifact_file:
        if isinstance(data, str):
            artifact_file.write(data)
        else:
            json.dump(data, artifact_file, ensure_ascii=False)
    return file_path


def write_deployment(build_folder: Path, chain_id: int, addresses: dict):
    for contract_name, address in addresses.items():
        write_artifact(
            build_folder,
            contract_name,
            {
                "contractName": contract_name,
                "networks": {str(chain_id): {"address": address, "transactionHash": "0x00"}},
            },
        )


def remove_folder(folder: Path):
    shutil.rmtree(folder, ignore_errors=True)
