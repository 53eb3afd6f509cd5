"""
Tests for the read-only campaign queries
"""

import pytest

from pw_scripts import reports
from pw_scripts.campaign import Pallets
from pw_scripts.exceptions import PreconditionError
from conftest import FakeChain

ADDRESS = "addr-user"


def campaign_chain():
    storage = {
        ("PwNftSale", "SpiritCollectionId", ()): 0,
        ("PwNftSale", "OriginOfShellCollectionId", ()): 1,
        ("PwNftSale", "Overlord", ()): "addr-overlord",
        ("PwNftSale", "PreorderIndex", ()): 14,
        ("PwNftSale", "Era", ()): 2,
        ("PwNftSale", "ZeroDay", ()): 1650000000000,
        ("PwNftSale", "CanClaimSpirits", ()): True,
        ("PwNftSale", "CanPreorderOriginOfShells", ()): True,
        ("PwIncubation", "CanStartIncubation", ()): True,
        ("PwIncubation", "OfficialHatchTime", ()): 1653000000,
    }
    maps = {
        ("Uniques", "Account", (ADDRESS, 0)): [(0, None)],
        ("Uniques", "Account", (ADDRESS, 1)): [(2, None), (5, None)],
        ("PwNftSale", "Preorders", ()): [(13, {"owner": ADDRESS}), (7, {"owner": "addr-eve"})],
        ("PwNftSale", "PreorderResults", (ADDRESS,)): [(1, "Chosen")],
        ("PwNftSale", "OriginOfShellsInventory", ("Prime",)): [("Cyborg", {"race_count": 1})],
    }
    return FakeChain(storage=storage, maps=maps)


def test_missing_collection_id():
    chain = FakeChain()

    with pytest.raises(PreconditionError, match="Spirit Collection ID not configured"):
        reports.spirits(chain, ADDRESS)
    with pytest.raises(PreconditionError, match="Origin of Shell Collection ID not configured"):
        reports.origin_of_shells(chain, ADDRESS)


def test_owned_nfts():
    chain = campaign_chain()

    assert reports.origin_of_shells(chain, ADDRESS) == [
        {"account": ADDRESS, "collection_id": 1, "nft_id": 2},
        {"account": ADDRESS, "collection_id": 1, "nft_id": 5},
    ]


def test_preorder_index_defaults_to_zero():
    assert reports.preorder_index(FakeChain()) == 0


def test_sale_flags():
    flags = reports.sale_flags(campaign_chain())

    assert flags == {
        "can_claim_spirits": True,
        "can_purchase_rare_origin_of_shells": False,
        "can_purchase_prime_origin_of_shells": False,
        "can_preorder_origin_of_shells": True,
        "last_day_of_sale": False,
    }


def test_custom_pallet_names():
    chain = FakeChain(storage={("PhalaWorld", "PreorderIndex", ()): 3})

    assert reports.preorder_index(chain, Pallets(sale="PhalaWorld")) == 3


def test_campaign_report():
    report = reports.campaign_report(campaign_chain(), ADDRESS)

    assert report["account"] == ADDRESS
    assert report["overlord"] == "addr-overlord"
    assert [nft["nft_id"] for nft in report["spirits"]] == [0]
    assert len(report["origin_of_shells"]) == 2
    assert report["preorder_index"] == 14
    assert report["pending_preorders"] == [7, 13]
    assert report["preorder_results"] == {1: "Chosen"}
    assert report["era"] == 2
    assert report["inventory"]["Prime"] == {"Cyborg": {"race_count": 1}}
    assert report["inventory"]["Legendary"] == {}
    assert report["sale"]["can_claim_spirits"]
    assert report["incubation"] == {
        "can_start_incubation": True,
        "official_hatch_time": 1653000000,
        "shell_collection_id": None,
    }
