#!/usr/bin/env python3
"""
Phala World - Overlord signatures

Prints the overlord signature over NFT metadata, and optionally the
OverlordMessage signature an account needs to redeem a spirit or buy a
whitelisted Prime Origin of Shell.

Usage:
    python3 scripts/signer.py [--metadata "I am Spirit"]
    python3 scripts/signer.py --account <ss58> --purpose BuyPrimeOriginOfShells
"""

import argparse
import sys

from pw_scripts.enums import PurposeType
from pw_scripts.runner import load_accounts, run, settings_for
from pw_scripts.signer import sign_metadata, sign_overlord_message


def main():
    parser = argparse.ArgumentParser(description="Produce overlord signatures")
    parser.add_argument("--metadata", default="I am Spirit", help="Metadata text to sign")
    parser.add_argument("--account", help="ss58 address to sign an OverlordMessage for")
    parser.add_argument("--purpose", default=PurposeType.REDEEM_SPIRIT.value,
                        choices=[p.value for p in PurposeType])
    args = parser.parse_args()

    settings = settings_for(args)
    overlord = load_accounts(settings, ["overlord"])["overlord"]
    print(f"🛡️  Overlord: {overlord.ss58_address}")

    signature, encoded, valid = sign_metadata(overlord, args.metadata)
    print(f"{signature}\n{encoded} is {'valid' if valid else 'invalid'}")

    if args.account:
        print(f"\n✍️  {args.purpose} for {args.account}:")
        print(sign_overlord_message(overlord, args.account, args.purpose))


if __name__ == "__main__":
    sys.exit(run(main))
