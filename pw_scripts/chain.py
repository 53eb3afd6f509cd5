"""
Chain access
Thin wrapper over substrate-interface used by every campaign script
"""

from typing import Any, List, Optional, Tuple

from loguru import logger
from substrateinterface import Keypair, KeypairType, SubstrateInterface
from substrateinterface.exceptions import SubstrateRequestException

from .exceptions import ConfigurationError, SubmissionRejected

# PHA has 12 decimals
UNIT = 10**12


def token(n) -> int:
    """Convert whole tokens to planck"""
    return int(n * UNIT)


def keypair_from_uri(uri: Optional[str], role: str = "account") -> Keypair:
    """
    Derive an sr25519 keypair from a secret URI

    Accepts dev URIs (//Alice), mnemonics with optional derivation paths and
    0x-prefixed hex seeds.
    """
    if not uri:
        raise ConfigurationError(f"No key material configured for {role}")
    try:
        return Keypair.create_from_uri(uri, crypto_type=KeypairType.SR25519)
    except (ValueError, TypeError) as e:
        raise ConfigurationError(f"Invalid key material for {role}: {e}") from e


class ChainClient:
    """
    Query/submit interface to one node

    Everything the scripts need from the chain goes through here, which keeps
    the nonce tracker, poller and phases testable against an in-memory chain.
    """

    def __init__(self, substrate: SubstrateInterface):
        self.substrate = substrate

    def describe(self) -> str:
        return f"{self.substrate.chain} ({self.substrate.version})"

    def account_nonce(self, address: str) -> int:
        info = self.substrate.query("System", "Account", [address])
        return int(info.value["nonce"])

    def compose_call(self, module: str, function: str, params: Optional[dict] = None):
        return self.substrate.compose_call(
            call_module=module,
            call_function=function,
            call_params=params or {},
        )

    def sudo_call(self, call):
        return self.compose_call("Sudo", "sudo", {"call": call})

    def submit(self, call, keypair: Keypair, nonce: int):
        """
        Sign with an explicit nonce and hand the extrinsic to the node

        Does not wait for inclusion. Pool rejections (stale nonce, invalid
        transaction, unpayable fee) raise SubmissionRejected.
        """
        extrinsic = self.substrate.create_signed_extrinsic(
            call=call, keypair=keypair, nonce=nonce
        )
        try:
            receipt = self.substrate.submit_extrinsic(extrinsic, wait_for_inclusion=False)
        except SubstrateRequestException as e:
            raise SubmissionRejected(
                f"Extrinsic from {keypair.ss58_address} with nonce {nonce} rejected: {e}",
                account=keypair.ss58_address,
                nonce=nonce,
                call=call,
            ) from e
        logger.debug(f"Submitted {receipt.extrinsic_hash} (nonce {nonce})")
        return receipt

    def query(self, module: str, storage: str, params: Optional[list] = None) -> Any:
        result = self.substrate.query(module, storage, params or [])
        return result.value if result is not None else None

    def query_map(self, module: str, storage: str, params: Optional[list] = None) -> List[Tuple[Any, Any]]:
        result = self.substrate.query_map(module, storage, params or [])
        return [(key.value, value.value) for key, value in result]

    def close(self):
        self.substrate.close()


def connect(url: str) -> ChainClient:
    """Open a WebSocket connection to the node"""
    logger.info(f"Connecting to {url}...")
    substrate = SubstrateInterface(url=url)
    client = ChainClient(substrate)
    logger.info(f"Connected to {client.describe()}")
    return client
