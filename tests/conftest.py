"""
Shared fixtures: an in-memory chain with per-account nonces and a fake clock
"""

from collections import namedtuple

import pytest

from pw_scripts.exceptions import SubmissionRejected

FakeKeypair = namedtuple("FakeKeypair", ["ss58_address"])
FakeReceipt = namedtuple("FakeReceipt", ["extrinsic_hash"])


class FakeClock:
    """time.monotonic / time.sleep pair where sleeping moves time forward"""

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class FakeChain:
    """
    Enough of ChainClient for the tracker, poller and phases

    The pool accepts the next sequential nonce per account, like a node's
    transaction pool. Accepted extrinsics are included (visible through
    account_nonce) immediately, or after `include_after_reads` nonce reads.
    """

    def __init__(self, nonces=None, include_after_reads=0, storage=None, maps=None):
        self.included = dict(nonces or {})
        self.pool = dict(self.included)
        self.include_after_reads = include_after_reads
        self.storage = dict(storage or {})
        self.maps = dict(maps or {})
        self.reads = 0
        self.submitted = []
        self._waiting = []

    def account_nonce(self, address):
        self.reads += 1
        still_waiting = []
        for entry in self._waiting:
            entry["reads_left"] -= 1
            if entry["reads_left"] <= 0:
                self.included[entry["address"]] = max(self.included.get(entry["address"], 0), entry["nonce"] + 1)
            else:
                still_waiting.append(entry)
        self._waiting = still_waiting
        return self.included.get(address, 0)

    def compose_call(self, module, function, params=None):
        return {"call_module": module, "call_function": function, "call_args": dict(params or {})}

    def sudo_call(self, call):
        return self.compose_call("Sudo", "sudo", {"call": call})

    def submit(self, call, keypair, nonce):
        address = keypair.ss58_address
        expected = self.pool.get(address, 0)
        if nonce != expected:
            raise SubmissionRejected(
                f"Invalid Transaction: nonce {nonce}, expected {expected}",
                account=address, nonce=nonce, call=call,
            )
        self.pool[address] = nonce + 1
        self.submitted.append({"address": address, "nonce": nonce, "call": call})
        if self.include_after_reads:
            self._waiting.append({"address": address, "nonce": nonce, "reads_left": self.include_after_reads})
        else:
            self.included[address] = nonce + 1
        return FakeReceipt(f"0x{len(self.submitted):064x}")

    def bump(self, address):
        """Someone else used the account's next nonce"""
        self.pool[address] = self.pool.get(address, 0) + 1
        self.included[address] = self.pool[address]

    def query(self, module, storage, params=None):
        return self.storage.get((module, storage, tuple(params or ())))

    def query_map(self, module, storage, params=None):
        return list(self.maps.get((module, storage, tuple(params or ())), []))

    def close(self):
        pass

    def calls_by(self, address):
        return [(s["call"]["call_module"], s["call"]["call_function"]) for s in self.submitted
                if s["address"] == address]


ROLES = ("root", "user", "overlord", "charlie", "david", "eve", "ferdie")


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def chain():
    return FakeChain()


@pytest.fixture
def fake_accounts():
    """Role -> keypair stand-in with a readable address"""
    return {role: FakeKeypair(f"addr-{role}") for role in ROLES}


@pytest.fixture(scope="session")
def dev_accounts():
    """Real sr25519 keypairs from dev URIs, for anything that signs"""
    from substrateinterface import Keypair
    return {role: Keypair.create_from_uri(f"//{role.capitalize()}") for role in ROLES}
