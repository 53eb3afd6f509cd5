"""
Phala World runtime enums

Values are the variant names the runtime metadata expects, so members can be
passed straight into call params.
"""

from enum import Enum


class RuntimeEnum(str, Enum):

    def __str__(self):
        return self.value


class RaceType(RuntimeEnum):
    CYBORG = "Cyborg"
    AI_SPECTRE = "AISpectre"
    X_GENE = "XGene"
    PANDROID = "Pandroid"


class CareerType(RuntimeEnum):
    HARDWARE_DRUID = "HardwareDruid"
    ROBO_WARRIOR = "RoboWarrior"
    TRADE_NEGOTIATOR = "TradeNegotiator"
    HACKER_WIZARD = "HackerWizard"
    WEB3_MONK = "Web3Monk"


class StatusType(RuntimeEnum):
    CLAIM_SPIRITS = "ClaimSpirits"
    PURCHASE_RARE_ORIGIN_OF_SHELLS = "PurchaseRareOriginOfShells"
    PURCHASE_PRIME_ORIGIN_OF_SHELLS = "PurchasePrimeOriginOfShells"
    PREORDER_ORIGIN_OF_SHELLS = "PreorderOriginOfShells"
    LAST_DAY_OF_SALE = "LastDayOfSale"


class OriginOfShellType(RuntimeEnum):
    PRIME = "Prime"
    MAGIC = "Magic"
    LEGENDARY = "Legendary"


class PreorderStatus(RuntimeEnum):
    PENDING = "Pending"
    CHOSEN = "Chosen"
    NOT_CHOSEN = "NotChosen"


class PurposeType(RuntimeEnum):
    REDEEM_SPIRIT = "RedeemSpirit"
    BUY_PRIME_ORIGIN_OF_SHELLS = "BuyPrimeOriginOfShells"
