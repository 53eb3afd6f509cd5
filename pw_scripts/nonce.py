"""
Nonce Tracker
Local shadow of each signing account's next nonce so extrinsics can be sent
back to back without waiting for the previous one to land
"""

from typing import Dict

from loguru import logger

from .exceptions import NonceTrackerError


class NonceTracker:
    """
    Expected next nonce per account

    The chain is read once per account in initialize(); after that the
    counter only moves forward locally. Nothing here detects a stale nonce:
    the node rejects the extrinsic instead.
    """

    def __init__(self, client):
        """
        Args:
            client: Anything with account_nonce(address) (ChainClient)
        """
        self.client = client
        self._expected: Dict[str, int] = {}

    def initialize(self, address: str) -> int:
        """Read the account's current nonce from chain and start tracking it"""
        nonce = self.client.account_nonce(address)
        self._expected[address] = nonce
        logger.debug(f"Nonce for {address} initialized at {nonce}")
        return nonce

    def peek(self, address: str) -> int:
        """Expected nonce of the next submission, without consuming it"""
        try:
            return self._expected[address]
        except KeyError:
            raise NonceTrackerError(f"Nonce for {address} was never initialized") from None

    def next(self, address: str) -> int:
        """Hand out the expected nonce and advance the counter"""
        nonce = self.peek(address)
        self._expected[address] = nonce + 1
        return nonce

    def __contains__(self, address) -> bool:
        return address in self._expected
