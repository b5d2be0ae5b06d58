from unittest.mock import MagicMock

import pytest
from eth_utils import to_checksum_address

from staking_deployment import deployer as deployer_module
from staking_deployment.confirm import DeploymentAborted
from staking_deployment.deployer import ApeDeployer, ApeDeploymentHandle
from staking_deployment.orchestrator import main

GOLD_ADDRESS = "0x" + "ab" * 20
STAKING_ADDRESS = "0x" + "cd" * 20
RESERVE_ADDRESS = "0x" + "ef" * 20


def _container(name):
    container = MagicMock(name=name)
    container.contract_type.name = name
    return container


def _instance(address):
    instance = MagicMock()
    instance.address = address
    return instance


@pytest.fixture
def containers(monkeypatch):
    containers = {name: _container(name) for name in ("Gold", "Staking", "StakingReserve")}
    monkeypatch.setattr(deployer_module, "get_contract_container", containers.__getitem__)
    return containers


@pytest.fixture
def account():
    account = MagicMock()
    account.deploy.side_effect = [
        _instance(GOLD_ADDRESS),
        _instance(STAKING_ADDRESS),
        _instance(RESERVE_ADDRESS),
    ]
    return account


@pytest.fixture
def make_deployer(monkeypatch, account):
    monkeypatch.setattr(deployer_module, "check_plugins", lambda verify: None)
    monkeypatch.setattr(ApeDeployer, "_print_deployment_info", lambda self: None)

    def _make_deployer(**kwargs):
        kwargs.setdefault("account", account)
        return ApeDeployer(**kwargs)

    return _make_deployer


def test_autosign_is_applied_to_account(make_deployer, account, capsys):
    make_deployer(autosign=True)

    account.set_autosign.assert_called_once_with(True)
    assert "WARNING: Autosign is enabled" in capsys.readouterr().out


def test_full_deployment_through_ape(make_deployer, account, containers, capsys):
    deployer = make_deployer(autosign=True)

    assert main(client=deployer) == 0

    gold, staking, reserve = (containers[n] for n in ("Gold", "Staking", "StakingReserve"))
    gold_address = to_checksum_address(GOLD_ADDRESS)
    staking_address = to_checksum_address(STAKING_ADDRESS)
    assert [c.args for c in account.deploy.call_args_list] == [
        (gold,),
        (staking, gold_address),
        (reserve, gold_address, staking_address),
    ]
    for c in account.deploy.call_args_list:
        assert c.kwargs == {"publish": False}

    assert len(deployer.deployments) == 3
    for instance in deployer.deployments:
        instance.receipt.await_confirmations.assert_called_once_with()

    out = capsys.readouterr().out
    assert f"Reserve deployed to: {to_checksum_address(RESERVE_ADDRESS)}" in out


def test_verify_publishes_deployment(make_deployer, account, containers):
    deployer = make_deployer(autosign=True, verify=True)

    deployer.get_factory("Gold").deploy()

    account.deploy.assert_called_once_with(containers["Gold"], publish=True)


def test_handle_returns_checksum_address():
    instance = _instance(GOLD_ADDRESS)
    handle = ApeDeploymentHandle(instance)

    assert handle.await_confirmation() == to_checksum_address(GOLD_ADDRESS)
    instance.receipt.await_confirmations.assert_called_once_with()


def test_declined_confirmation_aborts(make_deployer, account, containers, monkeypatch, capsys):
    deployer = make_deployer(autosign=False)
    monkeypatch.setattr("builtins.input", lambda prompt: "n")

    with pytest.raises(DeploymentAborted):
        deployer.get_factory("Gold").deploy()

    account.deploy.assert_not_called()
    assert deployer.deployments == []


def test_declined_confirmation_fails_run(make_deployer, account, containers, monkeypatch, capsys):
    answers = iter(["y", "n"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))
    deployer = make_deployer(autosign=False)

    assert main(client=deployer) == 1

    assert account.deploy.call_count == 1
    captured = capsys.readouterr()
    assert "Constructor parameters for Staking" in captured.out
    assert "DeploymentAborted" in captured.err

