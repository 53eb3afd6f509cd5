#!/usr/bin/env python3
"""
Phala World - Initialize the NFT sale

1. Funds the overlord from root and appoints it through sudo
2. Starts the world clock and opens spirit claims
3. Creates the Spirit and Origin of Shell collections and registers their ids
4. Sets the initial Origin of Shell inventory

Requirements:
    pip install -e .

Usage:
    python3 scripts/init.py [--endpoint ws://127.0.0.1:9944]

Environment (.env):
    ENDPOINT, ROOT_PRIVKEY, OVERLORD_PRIVKEY
"""

import argparse
import sys

from pw_scripts.campaign import Pallets, prep_phases
from pw_scripts.runner import banner, load_accounts, phase_script, run, settings_for, with_client


def main():
    parser = argparse.ArgumentParser(description="Initialize the Phala World NFT sale")
    parser.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    parser.add_argument("--funding", type=int, default=1_000_000, help="PHA sent to the overlord")
    args = parser.parse_args()

    settings = settings_for(args)
    banner("PHALA WORLD - Initialize NFT Sale")

    accounts = load_accounts(settings, ["root", "overlord"])
    print(f"👑 Root: {accounts['root'].ss58_address}")
    print(f"🛡️  Overlord: {accounts['overlord'].ss58_address}")

    def body(client):
        script = phase_script(client, settings, accounts)
        script.initialize()
        script.run(prep_phases(accounts, Pallets.from_settings(settings), funding=args.funding))
        print(f"\n✅ Sale initialized ({len(script.submitted)} extrinsics submitted)")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
