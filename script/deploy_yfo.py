from moccasin.boa_tools import VyperContract

from contracts import yfo_token
from script.network import verify_if_live


def deploy_yfo_token() -> VyperContract:
    """
    Deploys the YFO reward token. The deployer is its initial owner.

    Returns:
        VyperContract: The deployed YFO token instance.
    """
    yfo = yfo_token.deploy()
    verify_if_live(yfo)
    print(f"YFO Token deployed at: {yfo.address}")
    return yfo


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework.

    Returns:
        VyperContract: The deployed YFO token instance.
    """
    return deploy_yfo_token()
