#!/usr/bin/env python3
"""
Phala World - Preorder drawing

Mints the chosen Prime Origin of Shell preorders and refunds the rest.
Either pass the ids explicitly or let the script draw winners among the
pending preorders on chain.

Usage:
    python3 scripts/preorder_drawing.py --chosen 0 1 2 --not-chosen 3 4
    python3 scripts/preorder_drawing.py --winners 8 --seed 2022 [--dry-run]
"""

import argparse
import json
import sys

from pw_scripts import reports
from pw_scripts.campaign import (
    CHOSEN_PREORDERS,
    NOT_CHOSEN_PREORDERS,
    Pallets,
    draw_preorders,
    drawing_phases,
)
from pw_scripts.runner import banner, load_accounts, phase_script, run, settings_for, with_client


def main():
    parser = argparse.ArgumentParser(description="Resolve Origin of Shell preorders")
    parser.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    parser.add_argument("--chosen", type=int, nargs="*", help="Preorder ids to mint")
    parser.add_argument("--not-chosen", type=int, nargs="*", help="Preorder ids to refund")
    parser.add_argument("--winners", type=int, help="Draw this many winners among pending preorders")
    parser.add_argument("--seed", help="Seed for the draw (same seed, same winners)")
    parser.add_argument("--dry-run", action="store_true", help="Print the split without submitting")
    args = parser.parse_args()

    settings = settings_for(args)
    pallets = Pallets.from_settings(settings)
    banner("PHALA WORLD - Preorder Drawing")

    def body(client):
        if args.winners is not None:
            pending = reports.pending_preorders(client, pallets)
            print(f"📋 {len(pending)} pending preorders")
            chosen, not_chosen = draw_preorders(pending, args.winners, seed=args.seed)
        else:
            chosen = CHOSEN_PREORDERS if args.chosen is None else args.chosen
            not_chosen = NOT_CHOSEN_PREORDERS if args.not_chosen is None else args.not_chosen

        print(json.dumps({"chosen": list(chosen), "not_chosen": list(not_chosen)}, indent=2))
        phases = drawing_phases(chosen, not_chosen, pallets)
        if args.dry_run:
            print("ℹ️  Dry run, nothing submitted")
            return

        accounts = load_accounts(settings, ["overlord"])
        script = phase_script(client, settings, accounts)
        script.initialize()
        script.run(phases)
        print("✅ Preorders resolved")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
