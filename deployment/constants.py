from pathlib import Path

#
# Filesystem
#

DEPLOYMENT_DIR = Path(__file__).parent
CONSTRUCTOR_PARAMS_DIR = DEPLOYMENT_DIR / "constructor_params"
ARTIFACTS_DIR = DEPLOYMENT_DIR / "artifacts"

LUMINA_PARAMS_FILEPATH = CONSTRUCTOR_PARAMS_DIR / "lumina.yml"

#
# Networks
#

BASE_SEPOLIA = "baseSepolia"
SEPOLIA = "sepolia"

SUPPORTED_NETWORKS = [BASE_SEPOLIA, SEPOLIA]

# ape network choice -> network identifier
APE_NETWORKS = {
    "base:sepolia": BASE_SEPOLIA,
    "ethereum:sepolia": SEPOLIA,
}

LOCAL_NETWORKS = ["local"]

#
# Cross-chain messaging
#

# Domain IDs match the chain IDs of the respective networks
DOMAIN_IDS = {
    BASE_SEPOLIA: 84532,
    SEPOLIA: 11155111,
}

DOMAIN_LABELS = {
    BASE_SEPOLIA: "Base Sepolia",
    SEPOLIA: "Ethereum Sepolia",
}

SOURCE = "source"
DESTINATION = "destination"

NETWORK_ROLES = {
    BASE_SEPOLIA: SOURCE,
    SEPOLIA: DESTINATION,
}

#
# Contracts
#

LUMINA_CONTRACT = "LuminaProtocol"

NEXT_STEPS = [
    "Deploy to both networks",
    "Configure cross-chain contracts using setCrossChainContract()",
    "Update frontend with new addresses",
    "Test the fixed cross-chain confirmation!",
]
