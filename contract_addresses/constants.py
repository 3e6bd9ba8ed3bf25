# artifact names, as written by the build toolchain under the build folder
CONTRACT_TICKER_REGISTRY = "TickerRegistry"
CONTRACT_SECURITY_TOKEN_REGISTRY = "SecurityTokenRegistry"
CONTRACT_CAPPED_STO_FACTORY = "CappedSTOFactory"
CONTRACT_USD_TIERED_STO_FACTORY = "USDTieredSTOFactory"
CONTRACT_POLY_TOKEN = "PolyTokenFaucet"
CONTRACT_ETHER_DIVIDEND_CHECKPOINT_FACTORY = "EtherDividendCheckpointFactory"
CONTRACT_ERC20_DIVIDEND_CHECKPOINT_FACTORY = "ERC20DividendCheckpointFactory"

CONTRACT_NAMES = [
    CONTRACT_TICKER_REGISTRY,
    CONTRACT_SECURITY_TOKEN_REGISTRY,
    CONTRACT_CAPPED_STO_FACTORY,
    CONTRACT_USD_TIERED_STO_FACTORY,
    CONTRACT_POLY_TOKEN,
    CONTRACT_ETHER_DIVIDEND_CHECKPOINT_FACTORY,
    CONTRACT_ERC20_DIVIDEND_CHECKPOINT_FACTORY,
]

ARTIFACT_FILE_EXTENSION = ".json"

# PolyToken on Kovan is not deployed by us, so there is no artifact for it
KOVAN_POLY_TOKEN_ADDRESS = "0xb06d72a24df50d4e2cac133b320c5e7de3ef94cb"

# configuration
SETTINGS_FILE_NAME = "settings.toml"
ENV_NETWORK = "CONTRACT_ADDRESSES_NETWORK"
ENV_BUILD_FOLDER = "CONTRACT_ADDRESSES_BUILD_FOLDER"
