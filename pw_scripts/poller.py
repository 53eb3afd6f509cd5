"""
Confirmation Poller
Fixed-cadence polling of chain state up to a deadline
"""

import time
from typing import Callable, Optional

from loguru import logger


class Deadline:
    """
    Point in time after which waiting stops

    cancel() ends the wait early; a cancelled deadline reports expired.
    """

    def __init__(self, timeout: float, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.started = clock()
        self.timeout = timeout
        self._cancelled = False

    @property
    def elapsed(self) -> float:
        return self.clock() - self.started

    @property
    def remaining(self) -> float:
        if self._cancelled:
            return 0.0
        return max(0.0, self.timeout - self.elapsed)

    @property
    def expired(self) -> bool:
        return self._cancelled or self.elapsed >= self.timeout

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self):
        self._cancelled = True


def check_until(
    predicate: Callable[[], bool],
    timeout: float,
    interval: float = 0.1,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    deadline: Optional[Deadline] = None,
) -> bool:
    """
    Evaluate predicate every `interval` seconds until it holds

    Returns:
        True as soon as the predicate holds, False once `timeout` seconds
        have elapsed (or the deadline was cancelled)
    """
    if deadline is None:
        deadline = Deadline(timeout, clock=clock)
    while True:
        if predicate():
            return True
        if deadline.expired:
            return False
        sleep(min(interval, deadline.remaining))


def wait_for_nonce(
    client,
    address: str,
    target_nonce: int,
    timeout: float,
    poll_interval: float = 0.1,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
    deadline: Optional[Deadline] = None,
) -> bool:
    """
    Block until the account's on-chain nonce reaches target_nonce

    One System.Account read per poll. A nonce past the target also counts:
    the extrinsics before it were accepted either way.
    """
    logger.debug(f"Waiting for nonce {target_nonce} on {address} (timeout {timeout}s)")

    def reached() -> bool:
        return client.account_nonce(address) >= target_nonce

    ok = check_until(
        reached,
        timeout,
        interval=poll_interval,
        clock=clock,
        sleep=sleep,
        deadline=deadline,
    )
    if ok:
        logger.debug(f"Nonce {target_nonce} reached on {address}")
    else:
        logger.warning(f"Timed out after {timeout}s waiting for nonce {target_nonce} on {address}")
    return ok
