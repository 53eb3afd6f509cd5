"""
Overlord signatures

The runtime accepts spirit redemptions and whitelisted Prime Origin of Shell
purchases only with an overlord signature over a SCALE encoded
OverlordMessage for the claiming account.
"""

from typing import Tuple

from scalecodec.base import RuntimeConfigurationObject
from substrateinterface import Keypair
from substrateinterface.utils.ss58 import ss58_decode

from .enums import PurposeType

CUSTOM_TYPES = {
    "types": {
        "PurposeType": {
            "type": "enum",
            "value_list": [purpose.value for purpose in PurposeType],
        },
        "OverlordMessage": {
            "type": "struct",
            "type_mapping": [
                ["account", "[u8; 32]"],
                ["purpose", "PurposeType"],
            ],
        },
    }
}

_registry = None


def type_registry() -> RuntimeConfigurationObject:
    global _registry
    if _registry is None:
        _registry = RuntimeConfigurationObject()
        _registry.update_type_registry(CUSTOM_TYPES)
    return _registry


def encode_overlord_message(address: str, purpose) -> bytes:
    """SCALE bytes of OverlordMessage { account, purpose }"""
    message = type_registry().create_scale_object("OverlordMessage")
    encoded = message.encode({
        "account": "0x" + ss58_decode(address),
        "purpose": PurposeType(purpose).value,
    })
    return bytes(encoded.data)


def sign_overlord_message(overlord: Keypair, address: str, purpose) -> str:
    """Hex sr25519 signature of the overlord over the account's message"""
    signature = overlord.sign(encode_overlord_message(address, purpose))
    return "0x" + signature.hex()


def encode_metadata(metadata) -> bytes:
    """SCALE bytes of a BoundedVec<u8> (compact length prefix + raw bytes)"""
    if isinstance(metadata, str):
        metadata = metadata.encode()
    encoded = type_registry().create_scale_object("Bytes").encode(metadata)
    return bytes(encoded.data)


def sign_metadata(overlord: Keypair, metadata) -> Tuple[str, str, bool]:
    """
    Sign NFT metadata the way the sale expects it

    Returns:
        (signature hex, encoded metadata hex, signature verifies)
    """
    encoded = encode_metadata(metadata)
    signature = overlord.sign(encoded)
    valid = overlord.verify(encoded, signature)
    return "0x" + signature.hex(), "0x" + encoded.hex(), valid
