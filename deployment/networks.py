from ape import networks

from deployment.constants import APE_NETWORKS, LOCAL_NETWORKS


def is_local_network() -> bool:
    """Returns True if the connected provider is on a local network."""
    return networks.provider.network.name in LOCAL_NETWORKS


def get_network_name() -> str:
    """
    Returns the identifier of the network the connected provider points at.
    Networks without a known identifier are returned as '<ecosystem>:<network>'.
    """
    network = networks.provider.network
    choice = f"{network.ecosystem.name}:{network.name}"
    return APE_NETWORKS.get(choice, choice)
