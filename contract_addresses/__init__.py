import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import structlog
import toml

from contract_addresses.constants import (
    ENV_BUILD_FOLDER,
    ENV_NETWORK,
    SETTINGS_FILE_NAME,
)

log = structlog.get_logger()


ROOT_FOLDER = Path(__file__).resolve().parent


@dataclass
class Settings:
    network: str
    build_folder: str = "build/contracts"

    @property
    def build_folder_path(self) -> Path:
        return Path(self.build_folder)


def get_resource_folder_path():
    # Find absolute path for non-code resources (configuration files). When
    # running from source or an installed package it is the resources folder
    # inside the package. When bundled by pyinstaller, it will be placed on
    # the folder indicated by sys._MEIPASS

    root_folder = getattr(sys, "_MEIPASS", ROOT_FOLDER)
    return os.path.join(root_folder, "resources")


def load_settings(file_path: Optional[Union[Path, str]] = None) -> Settings:
    if file_path is None:
        file_path = os.path.join(get_resource_folder_path(), "conf", SETTINGS_FILE_NAME)

    configuration_data = toml.load(file_path)

    network_name = os.environ.get(ENV_NETWORK)
    if network_name:
        configuration_data["network"] = network_name

    build_folder = os.environ.get(ENV_BUILD_FOLDER)
    if build_folder:
        configuration_data["build_folder"] = build_folder

    # network names are validated by AddressResolver.from_settings
    settings = Settings(**configuration_data)
    settings.network = settings.network.lower()
    return settings


default_settings = load_settings()
