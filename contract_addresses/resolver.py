from pathlib import Path
from typing import Dict, Union

from contract_addresses import Settings, default_settings, log
from contract_addresses.artifacts import ContractArtifact
from contract_addresses.constants import (
    CONTRACT_CAPPED_STO_FACTORY,
    CONTRACT_ERC20_DIVIDEND_CHECKPOINT_FACTORY,
    CONTRACT_ETHER_DIVIDEND_CHECKPOINT_FACTORY,
    CONTRACT_NAMES,
    CONTRACT_POLY_TOKEN,
    CONTRACT_SECURITY_TOKEN_REGISTRY,
    CONTRACT_TICKER_REGISTRY,
    CONTRACT_USD_TIERED_STO_FACTORY,
)
from contract_addresses.network import Network


class AddressResolver:
    def __init__(self, network: Network, build_folder: Union[Path, str]):
        self.network = network
        self.build_folder = Path(build_folder)

    @classmethod
    def from_settings(cls, settings: Settings):
        return cls(Network.get_by_name(settings.network), settings.build_folder_path)

    def get_address(self, contract_name: str) -> str:
        fixed_address = self.network.get_fixed_address(contract_name)
        if fixed_address is not None:
            log.debug(f"{contract_name} has a fixed address on {self.network.name}")
            return fixed_address

        artifact = ContractArtifact(contract_name, self.build_folder)
        return artifact.get_address(self.network.chain_id)

    def get_all_addresses(self) -> Dict[str, str]:
        return {name: self.get_address(name) for name in CONTRACT_NAMES}

    def ticker_registry_address(self) -> str:
        return self.get_address(CONTRACT_TICKER_REGISTRY)

    def security_token_registry_address(self) -> str:
        return self.get_address(CONTRACT_SECURITY_TOKEN_REGISTRY)

    def capped_sto_factory_address(self) -> str:
        return self.get_address(CONTRACT_CAPPED_STO_FACTORY)

    def usd_tiered_sto_factory_address(self) -> str:
        return self.get_address(CONTRACT_USD_TIERED_STO_FACTORY)

    def poly_token_address(self) -> str:
        return self.get_address(CONTRACT_POLY_TOKEN)

    def ether_dividend_checkpoint_factory_address(self) -> str:
        return self.get_address(CONTRACT_ETHER_DIVIDEND_CHECKPOINT_FACTORY)

    def erc20_dividend_checkpoint_factory_address(self) -> str:
        return self.get_address(CONTRACT_ERC20_DIVIDEND_CHECKPOINT_FACTORY)


def get_default_resolver() -> AddressResolver:
    return AddressResolver.from_settings(default_settings)


def ticker_registry_address() -> str:
    return get_default_resolver().ticker_registry_address()


def security_token_registry_address() -> str:
    return get_default_resolver().security_token_registry_address()


def capped_sto_factory_address() -> str:
    return get_default_resolver().capped_sto_factory_address()


def usd_tiered_sto_factory_address() -> str:
    return get_default_resolver().usd_tiered_sto_factory_address()


def poly_token_address() -> str:
    return get_default_resolver().poly_token_address()


def ether_dividend_checkpoint_factory_address() -> str:
    return get_default_resolver().ether_dividend_checkpoint_factory_address()


def erc20_dividend_checkpoint_factory_address() -> str:
    return get_default_resolver().erc20_dividend_checkpoint_factory_address()
