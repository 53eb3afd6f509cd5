"""
Script plumbing shared by everything under scripts/
"""

import sys
from typing import Callable, Dict, Iterable

from loguru import logger

from .chain import ChainClient, connect, keypair_from_uri
from .config import Settings, load_settings
from .phase import PhaseScript

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def setup_logging(level: str = "INFO"):
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level)


def banner(title: str):
    print("=" * 60)
    print(f"  {title}")
    print("=" * 60)


def load_accounts(settings: Settings, roles: Iterable[str]) -> Dict[str, object]:
    """Keypairs for the given roles; missing key material raises ConfigurationError"""
    return {role: keypair_from_uri(settings.key(role), role) for role in roles}


def phase_script(client: ChainClient, settings: Settings, accounts) -> PhaseScript:
    return PhaseScript(
        client,
        accounts,
        barrier_timeout=settings.barrier_timeout,
        poll_interval=settings.poll_interval,
    )


def settings_for(args) -> Settings:
    settings = load_settings()
    if getattr(args, "endpoint", None):
        settings.endpoint = args.endpoint
    setup_logging(settings.log_level)
    return settings


def run(main: Callable[[], None]) -> int:
    """
    Run a script's main() and turn its outcome into an exit status

    Errors are logged to stderr with their traceback and give status 1.
    """
    try:
        main()
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return 130
    except Exception as e:
        logger.opt(exception=e).error(f"❌ {type(e).__name__}: {e}")
        return 1
    return 0


def with_client(settings: Settings, body: Callable[[ChainClient], None]):
    """Connect, run body, always close the socket"""
    client = connect(settings.endpoint)
    try:
        return body(client)
    finally:
        client.close()
