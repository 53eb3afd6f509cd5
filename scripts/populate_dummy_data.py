#!/usr/bin/env python3
"""
Phala World - Populate dummy sale data

Walks test accounts through every sale status:
claim spirits, buy rare Origin of Shells, buy whitelisted Prime Origin of
Shells and preorder the rest. Run after init.py.

Usage:
    python3 scripts/populate_dummy_data.py [--endpoint ws://127.0.0.1:9944]

Environment (.env):
    ENDPOINT, ROOT_PRIVKEY, USER_PRIVKEY, OVERLORD_PRIVKEY,
    CHARLIE_PRIVKEY, DAVID_PRIVKEY, EVE_PRIVKEY, FERDIE_PRIVKEY
"""

import argparse
import sys

from pw_scripts.campaign import Pallets, population_phases
from pw_scripts.config import KEY_VARIABLES
from pw_scripts.runner import banner, load_accounts, phase_script, run, settings_for, with_client


def main():
    parser = argparse.ArgumentParser(description="Populate the sale with dummy activity")
    parser.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    args = parser.parse_args()

    settings = settings_for(args)
    banner("PHALA WORLD - Populate Dummy Data")

    accounts = load_accounts(settings, KEY_VARIABLES)
    for role, keypair in accounts.items():
        print(f"   {role:<9} {keypair.ss58_address}")

    def body(client):
        script = phase_script(client, settings, accounts)
        script.initialize()
        script.run(population_phases(accounts, Pallets.from_settings(settings)))
        print(f"\n🎉 Done ({len(script.submitted)} extrinsics submitted)")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
