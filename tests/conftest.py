import boa
import pytest
from moccasin.config import get_active_network

from script.deploy import deploy_yfo_distribution, deploy_yfo_migration
from script.deploy_mocks import deploy_lp_tokens
from script.deploy_yfo import deploy_yfo_token

STAKER = boa.env.generate_address("staker")
STAKE_AMOUNT = 100


@pytest.fixture(scope="session")
def account():
    return get_active_network().get_default_account()


@pytest.fixture(scope="function")
def migration(tmp_path):
    return deploy_yfo_migration(folder=tmp_path)


@pytest.fixture(scope="function")
def lp_tokens():
    return deploy_lp_tokens()


@pytest.fixture(scope="function")
def yfo():
    return deploy_yfo_token()


@pytest.fixture(scope="function")
def distribution(yfo, lp_tokens):
    # Rewards start at the current block so tests don't have to travel to 8881500
    yfo_distribution = deploy_yfo_distribution(yfo, lp_tokens, start_block=0)
    yfo.transferOwnership(yfo_distribution.address)
    return yfo_distribution


@pytest.fixture(scope="function")
def staked(distribution, lp_tokens, account):
    """Gives STAKER some LP0 and LP1 and stakes it in pools 0 and 1."""
    with boa.env.prank(account.address):
        for lp_token in lp_tokens[:2]:
            lp_token.transfer(STAKER, STAKE_AMOUNT)

    with boa.env.prank(STAKER):
        for pid, lp_token in enumerate(lp_tokens[:2]):
            lp_token.approve(distribution.address, STAKE_AMOUNT)
            distribution.deposit(pid, STAKE_AMOUNT)
    return STAKER
