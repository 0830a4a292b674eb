from pathlib import Path
from typing import NamedTuple, Sequence

import boa
from moccasin.boa_tools import VyperContract

from contracts import yfo_distribution
from script.deploy_mocks import deploy_lp_tokens
from script.deploy_yfo import deploy_yfo_token
from script.network import verify_if_live
from script.save_address import DEPLOYMENTS_FOLDER, save_address

YFO_PER_BLOCK = 4359654017857142
START_BLOCK = 8881500
ALLOC_POINTS = (4, 3, 2)
RECORD_NAME = "YFO_Migrate"


class YFODeployment(NamedTuple):
    lp_tokens: list[VyperContract]
    yfo: VyperContract
    distribution: VyperContract
    record_path: Path


def deploy_yfo_distribution(
    yfo: VyperContract,
    lp_tokens: Sequence[VyperContract],
    yfo_per_block: int = YFO_PER_BLOCK,
    start_block: int = START_BLOCK,
    alloc_points: Sequence[int] = ALLOC_POINTS,
) -> VyperContract:
    """
    Deploys the YFO distribution contract with one pool per LP token.

    Args:
        yfo: The deployed YFO reward token.
        lp_tokens: LP tokens, in pool order.
        yfo_per_block: YFO emitted per block across all pools.
        start_block: Block from which rewards accrue.
        alloc_points: Pool weights, parallel to ``lp_tokens``.

    Returns:
        VyperContract: The deployed distribution contract instance.
    """
    if len(lp_tokens) != len(alloc_points):
        raise ValueError(
            f"Got {len(lp_tokens)} LP tokens but {len(alloc_points)} allocation points"
        )
    distribution: VyperContract = yfo_distribution.deploy(
        yfo.address,
        yfo_per_block,
        start_block,
        [lp_token.address for lp_token in lp_tokens],
        list(alloc_points),
    )
    verify_if_live(distribution)
    print(f"YFODistribution deployed at: {distribution.address}")
    return distribution


def build_record(
    lp_tokens: Sequence[VyperContract], yfo: VyperContract, distribution: VyperContract
) -> dict[str, str]:
    record = {f"LP{i}_Addr": str(lp_token.address) for i, lp_token in enumerate(lp_tokens)}
    record["YFO_Addr"] = str(yfo.address)
    record["YFODistribution_Addr"] = str(distribution.address)
    return record


def deploy_yfo_migration(
    start_block: int = START_BLOCK, folder: Path | str = DEPLOYMENTS_FOLDER
) -> YFODeployment:
    """
    Deploys the LP mocks, the YFO token and the distribution contract in order,
    hands YFO ownership to the distribution contract and saves the addresses.

    Any failed deployment or transaction aborts the remaining steps.

    Returns:
        YFODeployment: The deployed contracts and the saved record path.
    """
    print(f"Deployer account: {boa.env.eoa}")

    lp_tokens = deploy_lp_tokens()
    yfo = deploy_yfo_token()
    distribution = deploy_yfo_distribution(yfo, lp_tokens, start_block=start_block)

    yfo.transferOwnership(distribution.address)
    print(f"YFO ownership transferred to {distribution.address}")

    path = save_address(RECORD_NAME, build_record(lp_tokens, yfo, distribution), folder)
    return YFODeployment(lp_tokens, yfo, distribution, path)


def moccasin_main() -> YFODeployment:
    """
    Main deployment function for Moccasin framework.

    Returns:
        YFODeployment: The deployed contracts and the saved record path.
    """
    return deploy_yfo_migration()
