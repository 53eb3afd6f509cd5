"""
Unit Tests for the Nonce Tracker
"""

import pytest

from pw_scripts.exceptions import NonceTrackerError
from pw_scripts.nonce import NonceTracker

from conftest import FakeChain


class TestNonceTracker:

    def test_initialize_reads_chain_once(self):
        chain = FakeChain(nonces={"A": 5})
        tracker = NonceTracker(chain)

        assert tracker.initialize("A") == 5
        assert chain.reads == 1
        assert tracker.peek("A") == 5

    def test_next_counts_up_without_remote_reads(self):
        chain = FakeChain(nonces={"A": 5})
        tracker = NonceTracker(chain)
        tracker.initialize("A")

        assert [tracker.next("A") for _ in range(3)] == [5, 6, 7]
        assert chain.reads == 1
        assert tracker.peek("A") == 8

    def test_accounts_are_independent(self):
        chain = FakeChain(nonces={"A": 5, "B": 10})
        tracker = NonceTracker(chain)
        tracker.initialize("A")
        tracker.initialize("B")

        tracker.next("A")
        tracker.next("A")
        assert tracker.next("B") == 10
        assert tracker.peek("A") == 7
        assert tracker.peek("B") == 11

    def test_unknown_account(self):
        tracker = NonceTracker(FakeChain())

        with pytest.raises(NonceTrackerError):
            tracker.next("nobody")
        with pytest.raises(LookupError):
            tracker.peek("nobody")
        assert "nobody" not in tracker

    def test_initialize_again_resyncs(self):
        chain = FakeChain(nonces={"A": 1})
        tracker = NonceTracker(chain)
        tracker.initialize("A")
        tracker.next("A")
        chain.bump("A")
        chain.bump("A")

        assert tracker.initialize("A") == 3
