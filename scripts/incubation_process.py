#!/usr/bin/env python3
"""
Phala World - Incubation process

Opens incubation with the overlord, has the test accounts feed each other's
Origin of Shells and shortens a few hatch times.

Usage:
    python3 scripts/incubation_process.py [--collection-id 1]
"""

import argparse
import sys

from pw_scripts.campaign import ORIGIN_OF_SHELL_COLLECTION_ID, Pallets, incubation_phases
from pw_scripts.config import KEY_VARIABLES
from pw_scripts.runner import banner, load_accounts, phase_script, run, settings_for, with_client


def main():
    parser = argparse.ArgumentParser(description="Run the incubation phase")
    parser.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    parser.add_argument("--collection-id", type=int, default=ORIGIN_OF_SHELL_COLLECTION_ID,
                        help="Origin of Shell collection id")
    args = parser.parse_args()

    settings = settings_for(args)
    banner("PHALA WORLD - Incubation Process")

    accounts = load_accounts(settings, KEY_VARIABLES)

    def body(client):
        script = phase_script(client, settings, accounts)
        script.initialize()
        phases = incubation_phases(accounts, Pallets.from_settings(settings), collection_id=args.collection_id)
        script.run(phases)
        print(f"\n🥚 Incubation started ({len(script.submitted)} extrinsics submitted)")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
