from __future__ import annotations

from typing import Dict, Optional

from contract_addresses.constants import CONTRACT_POLY_TOKEN, KOVAN_POLY_TOKEN_ADDRESS


class Network:
    CHAIN_ID_MAPPING = {"ganache": 15, "mainnet": 1, "ropsten": 3, "kovan": 42}

    # Contracts whose address is known up front and must not be read from
    # the build artifacts on this network
    FIXED_CONTRACT_ADDRESSES: Dict[str, str] = {}

    def __init__(self):
        self.chain_id = self.CHAIN_ID_MAPPING[self.name]

    @property
    def name(self):
        return self.__class__.__name__.lower()

    @property
    def capitalized_name(self):
        return self.name.capitalize()

    def get_fixed_address(self, contract_name: str) -> Optional[str]:
        return self.FIXED_CONTRACT_ADDRESSES.get(contract_name)

    def __eq__(self, other):
        return isinstance(other, Network) and self.chain_id == other.chain_id

    def __hash__(self):
        return hash(self.chain_id)

    def __repr__(self):
        return f"<{self.capitalized_name} chain_id={self.chain_id}>"

    @staticmethod
    def get_network_names():
        return list(Network.CHAIN_ID_MAPPING.keys())

    @staticmethod
    def get_by_chain_id(chain_id: int) -> Network:
        names = [name for name, cid in Network.CHAIN_ID_MAPPING.items() if cid == chain_id]
        if not names:
            raise ValueError(f"{chain_id} is not a known chain id")
        return Network.get_by_name(names.pop())

    @staticmethod
    def get_by_name(name: str) -> Network:
        try:
            network_class = NETWORK_CLASSES[name.lower()]
        except KeyError:
            raise ValueError(
                f"{name} is not a known network, choose one of "
                f"{', '.join(Network.get_network_names())}"
            )
        return network_class()


class Ganache(Network):
    pass


class Mainnet(Network):
    pass


class Ropsten(Network):
    pass


class Kovan(Network):
    # TODO: confirm with the token team whether the faucet address is
    # permanent or should come from a PolyTokenFaucet artifact like elsewhere
    FIXED_CONTRACT_ADDRESSES = {CONTRACT_POLY_TOKEN: KOVAN_POLY_TOKEN_ADDRESS}


NETWORK_CLASSES = {
    "ganache": Ganache,
    "mainnet": Mainnet,
    "ropsten": Ropsten,
    "kovan": Kovan,
}
