#!/usr/bin/env python3
"""
Phala World - Single transactions

One extrinsic per invocation, signed by the chosen account role and waited
on until the account's nonce moves.

Usage:
    python3 scripts/transactions.py claim-spirit --as user
    python3 scripts/transactions.py redeem-spirit --as ferdie
    python3 scripts/transactions.py buy-rare --type Legendary --race Cyborg --career HackerWizard
    python3 scripts/transactions.py buy-prime --race XGene --career Web3Monk --as eve
    python3 scripts/transactions.py preorder --race Pandroid --career RoboWarrior
    python3 scripts/transactions.py claim-chosen | claim-refund
    python3 scripts/transactions.py set-status --status-type PreorderOriginOfShells [--disable]
    python3 scripts/transactions.py set-preorder-status --preorder-id 3 --status Chosen
    python3 scripts/transactions.py feed --collection-id 1 --nft-id 4
    python3 scripts/transactions.py hatch --owner <ss58> --collection-id 1 --nft-id 4 --resource-src ipfs://...
    python3 scripts/transactions.py set-shell-collection-id --collection-id 2
"""

import argparse
import sys

from pw_scripts import campaign
from pw_scripts.config import KEY_VARIABLES
from pw_scripts.enums import CareerType, OriginOfShellType, PreorderStatus, RaceType, StatusType
from pw_scripts.runner import banner, load_accounts, phase_script, run, settings_for, with_client

# commands that need the overlord key besides the signer
NEEDS_OVERLORD = {"redeem-spirit", "buy-prime"}


def _parse_args() -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Submit one Phala World extrinsic",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    ap.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    def command(name, help_text, signer=True):
        p = sub.add_parser(name, help=help_text, formatter_class=argparse.ArgumentDefaultsHelpFormatter)
        if signer:
            p.add_argument("--as", dest="role", default="user", choices=sorted(KEY_VARIABLES),
                           help="Account role that signs")
        return p

    def race_and_career(p):
        p.add_argument("--race", required=True, choices=[r.value for r in RaceType])
        p.add_argument("--career", required=True, choices=[c.value for c in CareerType])

    command("claim-spirit", "Claim a spirit")
    command("redeem-spirit", "Redeem a spirit with an overlord signature")
    p = command("buy-rare", "Buy a Legendary or Magic Origin of Shell")
    p.add_argument("--type", required=True,
                   choices=[t.value for t in OriginOfShellType if t is not OriginOfShellType.PRIME])
    race_and_career(p)
    race_and_career(command("buy-prime", "Buy a whitelisted Prime Origin of Shell"))
    race_and_career(command("preorder", "Preorder a Prime Origin of Shell"))
    command("claim-chosen", "Claim chosen preorders")
    command("claim-refund", "Claim refunds for preorders that were not chosen")

    p = command("set-status", "Toggle a sale status (overlord)", signer=False)
    p.add_argument("--status-type", required=True, choices=[s.value for s in StatusType])
    p.add_argument("--disable", action="store_true")
    p = command("set-preorder-status", "Resolve one preorder (overlord)", signer=False)
    p.add_argument("--preorder-id", type=int, required=True)
    p.add_argument("--status", required=True,
                   choices=[PreorderStatus.CHOSEN.value, PreorderStatus.NOT_CHOSEN.value])

    p = command("feed", "Feed an Origin of Shell")
    p.add_argument("--collection-id", type=int, default=campaign.ORIGIN_OF_SHELL_COLLECTION_ID)
    p.add_argument("--nft-id", type=int, required=True)
    p = command("hatch", "Hatch an Origin of Shell (overlord)", signer=False)
    p.add_argument("--owner", required=True, help="ss58 address of the shell owner")
    p.add_argument("--collection-id", type=int, default=campaign.ORIGIN_OF_SHELL_COLLECTION_ID)
    p.add_argument("--nft-id", type=int, required=True)
    p.add_argument("--resource-src", required=True)
    p = command("set-shell-collection-id", "Register the Shell collection (overlord)", signer=False)
    p.add_argument("--collection-id", type=int, required=True)
    return ap.parse_args()


def build_step(args, pallets, accounts):
    role = getattr(args, "role", "overlord")
    if args.cmd == "claim-spirit":
        return campaign.claim_spirit(pallets, role)
    if args.cmd == "redeem-spirit":
        return campaign.redeem_spirit(pallets, accounts, role)
    if args.cmd == "buy-rare":
        return campaign.buy_rare(pallets, role, args.type, args.race, args.career)
    if args.cmd == "buy-prime":
        return campaign.buy_prime(pallets, accounts, role, args.race, args.career)
    if args.cmd == "preorder":
        return campaign.preorder(pallets, role, args.race, args.career)
    if args.cmd == "claim-chosen":
        return campaign.claim_chosen_preorders(pallets, role)
    if args.cmd == "claim-refund":
        return campaign.claim_refund_preorders(pallets, role)
    if args.cmd == "set-status":
        return campaign.set_status(pallets, args.status_type, enabled=not args.disable)
    if args.cmd == "set-preorder-status":
        return campaign.set_preorder_status(pallets, args.preorder_id, args.status)
    if args.cmd == "feed":
        return campaign.feed(pallets, role, args.collection_id, args.nft_id)
    if args.cmd == "hatch":
        return campaign.hatch(pallets, args.owner, args.collection_id, args.nft_id, args.resource_src)
    if args.cmd == "set-shell-collection-id":
        return campaign.set_shell_collection_id(pallets, args.collection_id)
    raise SystemExit(f"Unknown command: {args.cmd}")


def main():
    args = _parse_args()
    settings = settings_for(args)
    banner(f"PHALA WORLD - {args.cmd}")

    role = getattr(args, "role", "overlord")
    roles = {role}
    if args.cmd in NEEDS_OVERLORD:
        roles.add("overlord")
    accounts = load_accounts(settings, sorted(roles))
    step = build_step(args, campaign.Pallets.from_settings(settings), accounts)

    def body(client):
        script = phase_script(client, settings, accounts)
        script.initialize([step.account])
        script.run(campaign.single(args.cmd, step))
        sent = script.submitted[-1]
        print(f"✅ {sent['call']} from {role} (nonce {sent['nonce']})")
        if sent["extrinsic_hash"]:
            print(f"   Extrinsic hash: {sent['extrinsic_hash']}")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
