"""
Read-only campaign queries

Every function takes a ChainClient and returns plain Python values so the
queries script can dump them as JSON.
"""

from typing import Any, Dict, List

from .campaign import Pallets
from .enums import OriginOfShellType
from .exceptions import PreconditionError

SALE_FLAGS = {
    "can_claim_spirits": "CanClaimSpirits",
    "can_purchase_rare_origin_of_shells": "CanPurchaseRareOriginOfShells",
    "can_purchase_prime_origin_of_shells": "CanPurchasePrimeOriginOfShells",
    "can_preorder_origin_of_shells": "CanPreorderOriginOfShells",
    "last_day_of_sale": "LastDayOfSale",
}


def collection_id(client, storage: str, label: str, pallets: Pallets = Pallets()) -> int:
    """Configured collection id, or PreconditionError when the overlord never set it"""
    value = client.query(pallets.sale, storage)
    if value is None:
        raise PreconditionError(f"{label} Collection ID not configured")
    return value


def owned_nfts(client, address: str, collection: int) -> List[Dict[str, int]]:
    """NFT ids the account holds in one collection"""
    return [
        {"account": address, "collection_id": collection, "nft_id": nft_id}
        for nft_id, _ in client.query_map("Uniques", "Account", [address, collection])
    ]


def spirits(client, address: str, pallets: Pallets = Pallets()) -> List[Dict[str, int]]:
    collection = collection_id(client, "SpiritCollectionId", "Spirit", pallets)
    return owned_nfts(client, address, collection)


def origin_of_shells(client, address: str, pallets: Pallets = Pallets()) -> List[Dict[str, int]]:
    collection = collection_id(client, "OriginOfShellCollectionId", "Origin of Shell", pallets)
    return owned_nfts(client, address, collection)


def preorder_index(client, pallets: Pallets = Pallets()) -> int:
    return client.query(pallets.sale, "PreorderIndex") or 0


def pending_preorders(client, pallets: Pallets = Pallets()) -> Dict[int, Any]:
    """Preorders not yet resolved, by id"""
    return {preorder_id: info for preorder_id, info in client.query_map(pallets.sale, "Preorders")}


def preorder_results(client, address: str, pallets: Pallets = Pallets()) -> Dict[int, Any]:
    """Resolved preorders of one account, by id"""
    return {
        preorder_id: info
        for preorder_id, info in client.query_map(pallets.sale, "PreorderResults", [address])
    }


def inventory(client, origin_of_shell_type, pallets: Pallets = Pallets()) -> Dict[str, Any]:
    """NftSaleInfo per race for one Origin of Shell type"""
    origin_of_shell_type = OriginOfShellType(origin_of_shell_type).value
    return {
        str(race): info
        for race, info in client.query_map(pallets.sale, "OriginOfShellsInventory", [origin_of_shell_type])
    }


def sale_flags(client, pallets: Pallets = Pallets()) -> Dict[str, bool]:
    return {name: bool(client.query(pallets.sale, storage)) for name, storage in SALE_FLAGS.items()}


def incubation_status(client, pallets: Pallets = Pallets()) -> Dict[str, Any]:
    return {
        "can_start_incubation": bool(client.query(pallets.incubation, "CanStartIncubation")),
        "official_hatch_time": client.query(pallets.incubation, "OfficialHatchTime"),
        "shell_collection_id": client.query(pallets.incubation, "ShellCollectionId"),
    }


def campaign_report(client, address: str, pallets: Pallets = Pallets()) -> Dict[str, Any]:
    """Everything the queries script prints for one account"""
    return {
        "account": address,
        "overlord": client.query(pallets.sale, "Overlord"),
        "spirits": spirits(client, address, pallets),
        "origin_of_shells": origin_of_shells(client, address, pallets),
        "preorder_index": preorder_index(client, pallets),
        "pending_preorders": sorted(pending_preorders(client, pallets)),
        "preorder_results": preorder_results(client, address, pallets),
        "era": client.query(pallets.sale, "Era"),
        "zero_day": client.query(pallets.sale, "ZeroDay"),
        "inventory": {
            shell_type.value: inventory(client, shell_type, pallets)
            for shell_type in OriginOfShellType
        },
        "sale": sale_flags(client, pallets),
        "incubation": incubation_status(client, pallets),
    }
