"""
Tests for shared script plumbing
"""

from unittest import mock

import pytest

from pw_scripts import runner
from pw_scripts.config import load_settings
from pw_scripts.exceptions import ConfigurationError, SubmissionRejected


def test_run_success():
    assert runner.run(lambda: None) == 0


def test_run_failure_exit_status():
    def main():
        raise SubmissionRejected("Invalid Transaction", account="addr-root", nonce=1)

    assert runner.run(main) == 1


def test_run_interrupted():
    def main():
        raise KeyboardInterrupt

    assert runner.run(main) == 130


def test_load_accounts():
    settings = load_settings(env={"ROOT_PRIVKEY": "//Alice", "OVERLORD_PRIVKEY": "//Bob"})

    accounts = runner.load_accounts(settings, ["root", "overlord"])

    assert accounts["root"].ss58_address == "5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY"
    assert set(accounts) == {"root", "overlord"}


def test_load_accounts_missing_key():
    settings = load_settings(env={"ROOT_PRIVKEY": "//Alice"})

    with pytest.raises(ConfigurationError, match="ferdie"):
        runner.load_accounts(settings, ["root", "ferdie"])


def test_phase_script_uses_settings(chain, fake_accounts):
    settings = load_settings(env={"PW_BARRIER_TIMEOUT": "5", "PW_POLL_INTERVAL": "0.5"})

    script = runner.phase_script(chain, settings, fake_accounts)

    assert script.barrier_timeout == 5.0
    assert script.poll_interval == 0.5


def test_with_client_closes_on_error():
    client = mock.Mock()
    settings = load_settings(env={})

    with mock.patch.object(runner, "connect", return_value=client):
        with pytest.raises(RuntimeError):
            runner.with_client(settings, mock.Mock(side_effect=RuntimeError("boom")))

    client.close.assert_called_once_with()
