"""
Tests for the substrate-interface wrapper
"""

from types import SimpleNamespace
from unittest import mock

import pytest
from substrateinterface.exceptions import SubstrateRequestException

from pw_scripts.chain import UNIT, ChainClient, token
from pw_scripts.exceptions import SubmissionRejected


def scale(value):
    return SimpleNamespace(value=value)


@pytest.fixture
def substrate():
    return mock.Mock()


@pytest.fixture
def client(substrate):
    return ChainClient(substrate)


def test_token():
    assert token(1) == UNIT == 10**12
    assert token(1_000_000) == 10**18
    assert token(0.5) == 5 * 10**11


def test_account_nonce(client, substrate):
    substrate.query.return_value = scale({"nonce": 7, "data": {"free": 0}})

    assert client.account_nonce("addr") == 7
    substrate.query.assert_called_once_with("System", "Account", ["addr"])


def test_submit_uses_given_nonce_and_does_not_wait(client, substrate, fake_accounts):
    substrate.submit_extrinsic.return_value = SimpleNamespace(extrinsic_hash="0xabc")
    keypair = fake_accounts["root"]

    receipt = client.submit("call", keypair, 3)

    assert receipt.extrinsic_hash == "0xabc"
    substrate.create_signed_extrinsic.assert_called_once_with(call="call", keypair=keypair, nonce=3)
    args, kwargs = substrate.submit_extrinsic.call_args
    assert args == (substrate.create_signed_extrinsic.return_value,)
    assert kwargs == {"wait_for_inclusion": False}


def test_pool_rejection(client, substrate, fake_accounts):
    substrate.submit_extrinsic.side_effect = SubstrateRequestException(
        {"code": 1010, "message": "Invalid Transaction", "data": "Transaction is outdated"}
    )

    with pytest.raises(SubmissionRejected) as info:
        client.submit("call", fake_accounts["eve"], 2)

    assert info.value.account == "addr-eve"
    assert info.value.nonce == 2
    assert info.value.call == "call"


def test_sudo_wraps_call(client, substrate):
    client.sudo_call("inner")

    substrate.compose_call.assert_called_once_with(
        call_module="Sudo", call_function="sudo", call_params={"call": "inner"}
    )


def test_query_returns_plain_values(client, substrate):
    substrate.query.return_value = scale(3)
    assert client.query("PwNftSale", "PreorderIndex") == 3
    substrate.query.assert_called_with("PwNftSale", "PreorderIndex", [])

    substrate.query.return_value = None
    assert client.query("PwNftSale", "Overlord") is None


def test_query_map_returns_pairs(client, substrate):
    substrate.query_map.return_value = [(scale(0), scale(None)), (scale(4), scale(None))]

    assert client.query_map("Uniques", "Account", ["addr", 1]) == [(0, None), (4, None)]
    substrate.query_map.assert_called_once_with("Uniques", "Account", ["addr", 1])
