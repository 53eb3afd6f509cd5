"""Errors raised by the campaign scripts"""


class PwScriptError(Exception):
    """Base class for every error a campaign script raises on purpose"""


class ConfigurationError(PwScriptError):
    """Missing or unusable endpoint / key material"""


class NonceTrackerError(PwScriptError, LookupError):
    """Nonce requested for an account that was never initialized"""


class SubmissionRejected(PwScriptError):
    """The node refused an extrinsic (stale nonce, bad state, low balance)"""

    def __init__(self, message, account=None, nonce=None, call=None):
        super().__init__(message)
        self.account = account
        self.nonce = nonce
        self.call = call


class BarrierTimeout(PwScriptError):
    """A strict confirmation barrier ran out of time"""


class PreconditionError(PwScriptError):
    """Expected on-chain configuration is absent"""
