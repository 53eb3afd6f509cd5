"""
Phala World campaign phases

Builders for the phase lists the scripts run. Account names are roles
(root, user, overlord, charlie, david, eve, ferdie) resolved to keypairs by
the PhaseScript.
"""

import random
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .chain import token
from .enums import (
    CareerType,
    OriginOfShellType,
    PreorderStatus,
    PurposeType,
    RaceType,
    StatusType,
)
from .phase import Barrier, Phase, Submit
from .signer import sign_overlord_message

SPIRIT_COLLECTION_ID = 0
ORIGIN_OF_SHELL_COLLECTION_ID = 1
OVERLORD_FUNDING = 1_000_000


@dataclass(frozen=True)
class Pallets:
    sale: str = "PwNftSale"
    incubation: str = "PwIncubation"

    @classmethod
    def from_settings(cls, settings):
        return cls(sale=settings.nft_sale_pallet, incubation=settings.incubation_pallet)


def _overlord_signature(accounts, role: str, purpose: PurposeType):
    """Params factory: overlord signature for `role`, computed at submit time"""
    def sign():
        return sign_overlord_message(accounts["overlord"], accounts[role].ss58_address, purpose)
    return sign


def set_status(pallets: Pallets, status_type, enabled: bool = True) -> Submit:
    return Submit("overlord", pallets.sale, "set_status_type", {
        "status": enabled,
        "status_type": StatusType(status_type).value,
    })


def prep_phases(
    accounts,
    pallets: Pallets = Pallets(),
    funding: int = OVERLORD_FUNDING,
    spirit_collection_id: int = SPIRIT_COLLECTION_ID,
    origin_of_shell_collection_id: int = ORIGIN_OF_SHELL_COLLECTION_ID,
) -> List[Phase]:
    """Fund and appoint the overlord, then open spirit claims"""
    overlord = accounts["overlord"].ss58_address
    return [
        Phase("Appointing overlord", [
            Submit("root", "Balances", "transfer", {"dest": overlord, "value": token(funding)}),
            Barrier("root"),
            Submit("root", pallets.sale, "set_overlord", {"new_overlord": overlord}, sudo=True),
            Barrier("root", strict=True),
        ]),
        Phase("Starting world clock and spirit claims", [
            Submit("overlord", pallets.sale, "initialize_world_clock"),
            set_status(pallets, StatusType.CLAIM_SPIRITS),
        ]),
        Phase("Creating collections", [
            Submit("overlord", "RmrkCore", "create_collection", {
                "metadata": "0x", "max": None, "symbol": "PWSPRT",
            }),
            Submit("overlord", pallets.sale, "set_spirit_collection_id", {
                "collection_id": spirit_collection_id,
            }),
            Submit("overlord", "RmrkCore", "create_collection", {
                "metadata": "0x", "max": None, "symbol": "PWOAS",
            }),
            Submit("overlord", pallets.sale, "set_origin_of_shell_collection_id", {
                "collection_id": origin_of_shell_collection_id,
            }),
            Submit("overlord", pallets.sale, "init_origin_of_shell_type_counts"),
            Barrier("overlord"),
        ]),
    ]


RARE_PURCHASES = [
    ("user", OriginOfShellType.LEGENDARY, RaceType.CYBORG, CareerType.HACKER_WIZARD),
    ("root", OriginOfShellType.LEGENDARY, RaceType.AI_SPECTRE, CareerType.WEB3_MONK),
    ("charlie", OriginOfShellType.MAGIC, RaceType.PANDROID, CareerType.ROBO_WARRIOR),
    ("david", OriginOfShellType.MAGIC, RaceType.X_GENE, CareerType.TRADE_NEGOTIATOR),
]

PRIME_WHITELIST_PURCHASES = [
    ("ferdie", RaceType.CYBORG, CareerType.HACKER_WIZARD),
    ("eve", RaceType.X_GENE, CareerType.WEB3_MONK),
]

# three rounds, each account sends at most one preorder per round
PREORDER_ROUNDS = [
    [
        ("ferdie", RaceType.PANDROID, CareerType.HACKER_WIZARD),
        ("root", RaceType.AI_SPECTRE, CareerType.WEB3_MONK),
        ("user", RaceType.PANDROID, CareerType.ROBO_WARRIOR),
        ("charlie", RaceType.CYBORG, CareerType.WEB3_MONK),
        ("david", RaceType.CYBORG, CareerType.HARDWARE_DRUID),
        ("eve", RaceType.X_GENE, CareerType.TRADE_NEGOTIATOR),
    ],
    [
        ("ferdie", RaceType.X_GENE, CareerType.HACKER_WIZARD),
        ("root", RaceType.AI_SPECTRE, CareerType.HACKER_WIZARD),
        ("user", RaceType.X_GENE, CareerType.ROBO_WARRIOR),
        ("charlie", RaceType.PANDROID, CareerType.HARDWARE_DRUID),
        ("david", RaceType.AI_SPECTRE, CareerType.TRADE_NEGOTIATOR),
        ("eve", RaceType.PANDROID, CareerType.WEB3_MONK),
    ],
    [
        ("ferdie", RaceType.CYBORG, CareerType.HACKER_WIZARD),
        ("eve", RaceType.PANDROID, CareerType.TRADE_NEGOTIATOR),
    ],
]


def buy_rare(pallets: Pallets, account: str, origin_of_shell_type, race, career) -> Submit:
    return Submit(account, pallets.sale, "buy_rare_origin_of_shell", {
        "origin_of_shell_type": OriginOfShellType(origin_of_shell_type).value,
        "race": RaceType(race).value,
        "career": CareerType(career).value,
    })


def buy_prime(pallets: Pallets, accounts, account: str, race, career) -> Submit:
    signature = _overlord_signature(accounts, account, PurposeType.BUY_PRIME_ORIGIN_OF_SHELLS)
    race, career = RaceType(race).value, CareerType(career).value
    return Submit(account, pallets.sale, "buy_prime_origin_of_shell",
                  lambda: {"signature": signature(), "race": race, "career": career})


def preorder(pallets: Pallets, account: str, race, career) -> Submit:
    return Submit(account, pallets.sale, "preorder_origin_of_shell", {
        "race": RaceType(race).value,
        "career": CareerType(career).value,
    })


def claim_spirit(pallets: Pallets, account: str) -> Submit:
    return Submit(account, pallets.sale, "claim_spirit")


def redeem_spirit(pallets: Pallets, accounts, account: str) -> Submit:
    signature = _overlord_signature(accounts, account, PurposeType.REDEEM_SPIRIT)
    return Submit(account, pallets.sale, "redeem_spirit", lambda: {"signature": signature()})


def population_phases(accounts, pallets: Pallets = Pallets()) -> List[Phase]:
    """Dummy sale activity across the test accounts, one phase per sale status"""
    claims = [claim_spirit(pallets, name) for name in ("root", "user", "charlie", "david", "eve")]
    claims.append(redeem_spirit(pallets, accounts, "ferdie"))
    claims.append(Barrier("root"))

    rare = [set_status(pallets, StatusType.PURCHASE_RARE_ORIGIN_OF_SHELLS), Barrier("overlord")]
    rare += [buy_rare(pallets, *purchase) for purchase in RARE_PURCHASES]
    rare.append(Barrier("user"))

    prime = [set_status(pallets, StatusType.PURCHASE_PRIME_ORIGIN_OF_SHELLS), Barrier("overlord")]
    prime += [buy_prime(pallets, accounts, *purchase) for purchase in PRIME_WHITELIST_PURCHASES]

    preorders = [set_status(pallets, StatusType.PREORDER_ORIGIN_OF_SHELLS), Barrier("overlord")]
    for round_number, preorder_round in enumerate(PREORDER_ROUNDS):
        if round_number:
            preorders.append(Barrier("ferdie"))
        preorders += [preorder(pallets, *order) for order in preorder_round]

    return [
        Phase("Claiming Spirits", claims),
        Phase("Purchase Rare Origin of Shells", rare),
        Phase("Purchase Prime Origin of Shells Whitelist", prime),
        Phase("Preorder Prime Origin of Shells Non-Whitelist", preorders),
    ]


# (account, nft id) fed in each round
FEEDING_ROUNDS = [
    [("root", 0), ("user", 0), ("charlie", 1), ("david", 2), ("eve", 3), ("ferdie", 4)],
    [("root", 5), ("user", 1), ("charlie", 3), ("david", 8), ("eve", 2), ("ferdie", 10)],
]

# ((collection id, nft id), seconds taken off the hatch time)
INCUBATION_TIME_REDUCTIONS = [
    ((1, 1), 10800),
    ((1, 0), 7200),
    ((1, 3), 3600),
    ((1, 2), 2400),
    ((1, 0), 2400),
    ((1, 4), 1400),
    ((1, 5), 1400),
    ((1, 8), 1400),
    ((1, 10), 1400),
]


def feed(pallets: Pallets, account: str, collection_id: int, nft_id: int) -> Submit:
    return Submit(account, pallets.incubation, "feed_origin_of_shell", {
        "collection_id": collection_id,
        "nft_id": nft_id,
    })


def update_incubation_time(pallets: Pallets, reductions: Sequence[Tuple[Tuple[int, int], int]]) -> Submit:
    return Submit("overlord", pallets.incubation, "update_incubation_time", {
        "origin_of_shells": [((collection_id, nft_id), seconds)
                             for (collection_id, nft_id), seconds in reductions],
    })


def incubation_phases(
    accounts,
    pallets: Pallets = Pallets(),
    collection_id: int = ORIGIN_OF_SHELL_COLLECTION_ID,
) -> List[Phase]:
    """Open incubation, feed shells in two rounds and shorten hatch times"""
    feeding = []
    for round_number, feeding_round in enumerate(FEEDING_ROUNDS):
        if round_number:
            feeding.append(Barrier("root"))
        feeding += [feed(pallets, account, collection_id, nft_id) for account, nft_id in feeding_round]

    return [
        Phase("Enabling the Incubation Process", [
            Submit("overlord", pallets.incubation, "set_can_start_incubation_status", {"status": True}),
            Barrier("overlord"),
        ]),
        Phase("Sending food among accounts", feeding),
        Phase("Update Incubation Times", [
            update_incubation_time(pallets, INCUBATION_TIME_REDUCTIONS),
        ]),
    ]


def hatch(pallets: Pallets, owner: str, collection_id: int, nft_id: int, resource_src: str) -> Submit:
    return Submit("overlord", pallets.incubation, "hatch_origin_of_shell", {
        "owner": owner,
        "collection_id": collection_id,
        "nft_id": nft_id,
        "resource_src": resource_src,
    })


def set_shell_collection_id(pallets: Pallets, collection_id: int) -> Submit:
    return Submit("overlord", pallets.incubation, "set_shell_collection_id", {
        "collection_id": collection_id,
    })


CHOSEN_PREORDERS = [0, 1, 2, 4, 10, 6, 12, 11]
NOT_CHOSEN_PREORDERS = [7, 3, 5, 8, 9, 13]


def draw_preorders(preorder_ids: Iterable[int], winners: int, seed=None) -> Tuple[List[int], List[int]]:
    """
    Split preorder ids into chosen and not chosen

    The same ids, winner count and seed always give the same split.
    """
    pool = sorted(set(preorder_ids))
    if winners < 0:
        raise ValueError(f"winners must be >= 0, got {winners}")
    chosen = sorted(random.Random(seed).sample(pool, min(winners, len(pool))))
    picked = set(chosen)
    not_chosen = [preorder_id for preorder_id in pool if preorder_id not in picked]
    return chosen, not_chosen


def drawing_phases(
    chosen: Sequence[int] = CHOSEN_PREORDERS,
    not_chosen: Sequence[int] = NOT_CHOSEN_PREORDERS,
    pallets: Pallets = Pallets(),
) -> List[Phase]:
    """Mint the chosen preorders and refund the rest"""
    overlap = set(chosen) & set(not_chosen)
    if overlap:
        raise ValueError(f"Preorders both chosen and not chosen: {sorted(overlap)}")
    steps = []
    if chosen:
        steps.append(Submit("overlord", pallets.sale, "mint_chosen_preorders", {"preorders": list(chosen)}))
    if not_chosen:
        steps.append(Submit("overlord", pallets.sale, "refund_not_chosen_preorders", {"preorders": list(not_chosen)}))
    if steps:
        steps.append(Barrier("overlord"))
    return [Phase("Drawing preorders", steps)]


def set_preorder_status(pallets: Pallets, preorder_id: int, status) -> Submit:
    status = PreorderStatus(status)
    if status is PreorderStatus.PENDING:
        raise ValueError("A preorder can only be set to Chosen or NotChosen")
    return Submit("overlord", pallets.sale, "set_preorder_status", {
        "preorder_id": preorder_id,
        "status": status.value,
    })


def claim_chosen_preorders(pallets: Pallets, account: str) -> Submit:
    return Submit(account, pallets.sale, "claim_chosen_preorders")


def claim_refund_preorders(pallets: Pallets, account: str) -> Submit:
    return Submit(account, pallets.sale, "claim_refund_preorders")


def single(name: str, step: Submit) -> List[Phase]:
    """One-transaction phase list, as used by the transactions script"""
    return [Phase(name, [step, Barrier(step.account)])]
