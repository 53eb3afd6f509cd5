"""
Environment configuration for the campaign scripts.

Values come from the process environment, with a `.env` file in the working
directory loaded first. Key material is not validated here: a missing
private key only fails when a keypair is derived from it.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from .exceptions import ConfigurationError

LOCAL_NODE = "ws://127.0.0.1:9944"

DEFAULT_BARRIER_TIMEOUT = 60.0
DEFAULT_POLL_INTERVAL = 0.1

# role -> environment variable holding its secret URI
KEY_VARIABLES = {
    "root": "ROOT_PRIVKEY",
    "user": "USER_PRIVKEY",
    "overlord": "OVERLORD_PRIVKEY",
    "ferdie": "FERDIE_PRIVKEY",
    "charlie": "CHARLIE_PRIVKEY",
    "david": "DAVID_PRIVKEY",
    "eve": "EVE_PRIVKEY",
}

# older .env files spell the overlord key this way
LEGACY_KEY_VARIABLES = {
    "overlord": "OVERLOAD_PRIVKEY",
}


@dataclass
class Settings:
    endpoint: str = LOCAL_NODE
    keys: Dict[str, Optional[str]] = field(default_factory=dict)
    barrier_timeout: float = DEFAULT_BARRIER_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    nft_sale_pallet: str = "PwNftSale"
    incubation_pallet: str = "PwIncubation"
    log_level: str = "INFO"

    def key(self, role: str) -> Optional[str]:
        return self.keys.get(role)


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw in (None, ""):
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}")


def load_settings(env: Optional[Mapping[str, str]] = None, dotenv: bool = True) -> Settings:
    """
    Build Settings from environment variables

    Args:
        env: Mapping to read instead of os.environ (tests)
        dotenv: Load .env into os.environ first

    Returns:
        Settings instance
    """
    if env is None:
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        env = os.environ

    keys = {}
    for role, variable in KEY_VARIABLES.items():
        value = env.get(variable)
        if not value and role in LEGACY_KEY_VARIABLES:
            value = env.get(LEGACY_KEY_VARIABLES[role])
        keys[role] = value or None

    return Settings(
        endpoint=env.get("ENDPOINT") or LOCAL_NODE,
        keys=keys,
        barrier_timeout=_float(env, "PW_BARRIER_TIMEOUT", DEFAULT_BARRIER_TIMEOUT),
        poll_interval=_float(env, "PW_POLL_INTERVAL", DEFAULT_POLL_INTERVAL),
        nft_sale_pallet=env.get("PW_NFT_SALE_PALLET") or "PwNftSale",
        incubation_pallet=env.get("PW_INCUBATION_PALLET") or "PwIncubation",
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )
