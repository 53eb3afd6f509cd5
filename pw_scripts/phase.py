"""
Phase Script
Runs an ordered list of phases, each an ordered list of submissions and
confirmation barriers, against one chain connection.

Submissions for different accounts are sent back to back; the chain orders
them per account by nonce. A step that depends on an earlier extrinsic
(a collection id, an enabled sale status) must come after a Barrier on the
account that sent it.

Any rejection aborts the run. There is no retry or resumption: the log
shows the last phase and step reached.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from loguru import logger

from .exceptions import BarrierTimeout, ConfigurationError
from .nonce import NonceTracker
from .poller import wait_for_nonce

Params = Union[Dict[str, Any], Callable[[], Dict[str, Any]], None]


@dataclass
class Submit:
    """Sign `module.function(params)` with the account's next nonce"""
    account: str
    module: str
    function: str
    params: Params = None
    sudo: bool = False


@dataclass
class Barrier:
    """Wait until the account's previous submissions are on chain"""
    account: str
    timeout: Optional[float] = None
    strict: bool = False


@dataclass
class Pause:
    seconds: float


Step = Union[Submit, Barrier, Pause]


@dataclass
class Phase:
    name: str
    steps: List[Step] = field(default_factory=list)


class PhaseScript:
    """
    Owns the nonce tracker for one run

    Args:
        client: ChainClient (or a fake with the same methods)
        accounts: Role name -> Keypair
        barrier_timeout: Default seconds a Barrier waits
        poll_interval: Seconds between nonce reads while waiting
    """

    def __init__(
        self,
        client,
        accounts: Dict[str, Any],
        barrier_timeout: float = 60.0,
        poll_interval: float = 0.1,
        sleep: Callable[[float], None] = time.sleep,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.client = client
        self.accounts = dict(accounts)
        self.barrier_timeout = barrier_timeout
        self.poll_interval = poll_interval
        self.sleep = sleep
        self.clock = clock
        self.nonces = NonceTracker(client)
        self.submitted: List[Dict[str, Any]] = []

    def keypair(self, account: str):
        try:
            return self.accounts[account]
        except KeyError:
            raise ConfigurationError(f"Unknown account role: {account}") from None

    def address(self, account: str) -> str:
        return self.keypair(account).ss58_address

    def initialize(self, accounts: Optional[Iterable[str]] = None) -> Dict[str, int]:
        """Read the starting nonce of each account once"""
        names = list(accounts) if accounts is not None else list(self.accounts)
        started = {}
        for name in names:
            started[name] = self.nonces.initialize(self.address(name))
            logger.info(f"{name}: {self.address(name)} nonce {started[name]}")
        return started

    def submit(self, account: str, module: str, function: str, params: Params = None, sudo: bool = False):
        """
        Compose, sign and send one extrinsic

        The tracked nonce only advances once the node accepted the extrinsic,
        so a rejected submission leaves the counter where it was.
        """
        keypair = self.keypair(account)
        address = keypair.ss58_address
        if address not in self.nonces:
            self.nonces.initialize(address)
        if callable(params):
            params = params()

        call = self.client.compose_call(module, function, params or {})
        if sudo:
            call = self.client.sudo_call(call)

        nonce = self.nonces.peek(address)
        name = f"Sudo({module}.{function})" if sudo else f"{module}.{function}"
        logger.info(f"{account} -> {name} (nonce {nonce})")
        receipt = self.client.submit(call, keypair, nonce)
        self.nonces.next(address)

        self.submitted.append({
            "account": account,
            "call": name,
            "nonce": nonce,
            "extrinsic_hash": getattr(receipt, "extrinsic_hash", None),
        })
        return receipt

    def wait(self, account: str, timeout: Optional[float] = None, strict: bool = False) -> bool:
        """
        Barrier on the account's last submission

        Waits for exactly one increment past the last nonce used, i.e. for
        the on-chain nonce to reach the tracked expected nonce.
        """
        address = self.address(account)
        target = self.nonces.peek(address)
        timeout = self.barrier_timeout if timeout is None else timeout
        ok = wait_for_nonce(
            self.client,
            address,
            target,
            timeout,
            poll_interval=self.poll_interval,
            clock=self.clock,
            sleep=self.sleep,
        )
        if not ok and strict:
            raise BarrierTimeout(f"{account} did not reach nonce {target} within {timeout}s")
        return ok

    def execute(self, step: Step):
        if isinstance(step, Submit):
            return self.submit(step.account, step.module, step.function, step.params, sudo=step.sudo)
        if isinstance(step, Barrier):
            return self.wait(step.account, timeout=step.timeout, strict=step.strict)
        if isinstance(step, Pause):
            logger.debug(f"Pausing {step.seconds}s")
            self.sleep(step.seconds)
            return None
        raise TypeError(f"Unsupported step: {step!r}")

    def run_phase(self, phase: Phase):
        logger.info(f"{phase.name}...")
        for index, step in enumerate(phase.steps, start=1):
            try:
                self.execute(step)
            except Exception:
                logger.error(f"{phase.name}: failed at step {index}/{len(phase.steps)} ({step})")
                raise
        logger.success(f"{phase.name}...Done")

    def run(self, phases: Iterable[Phase]):
        for phase in phases:
            self.run_phase(phase)
        return self.submitted
