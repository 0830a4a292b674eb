from moccasin.boa_tools import VyperContract

from contracts import mock_erc20

LP_TOKEN_SUPPLY = 1000
LP_TOKEN_NAMES = ("LP0", "LP1", "LP2")


def deploy_lp_token(name: str, supply: int = LP_TOKEN_SUPPLY) -> VyperContract:
    """
    Deploys a mock ERC20 standing in for an LP token.

    Args:
        name: Used as both the token name and symbol.
        supply: Raw amount minted to the deployer.

    Returns:
        VyperContract: The deployed mock token instance.
    """
    lp_token = mock_erc20.deploy(name, name, supply)
    print(f"{name} deployed at: {lp_token.address}")
    return lp_token


def deploy_lp_tokens() -> list[VyperContract]:
    """
    Deploys LP0, LP1 and LP2, in that order.

    Returns:
        list[VyperContract]: The deployed mock tokens, in pool order.
    """
    return [deploy_lp_token(name) for name in LP_TOKEN_NAMES]


def moccasin_main() -> list[VyperContract]:
    """
    Main deployment function for Moccasin framework.

    Returns:
        list[VyperContract]: The deployed mock LP token instances.
    """
    return deploy_lp_tokens()
