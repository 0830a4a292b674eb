from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network


def active_network_name() -> str:
    return get_active_network().name


def verify_if_live(contract: VyperContract) -> None:
    """
    Submits a deployed contract for explorer verification and waits for it.

    Skipped on local and forked networks, and on networks without an explorer.
    """
    active_network = get_active_network()
    if active_network.has_explorer() and active_network.is_local_or_forked_network() is False:
        result = active_network.moccasin_verify(contract)
        result.wait_for_verification()
