#!/usr/bin/env python3
"""
Phala World - Campaign state report

Prints the account's spirits and Origin of Shells, preorders, world clock,
inventory, sale flags and incubation status as JSON.

Usage:
    python3 scripts/queries.py [--account <ss58 address>] [--output report.json]

Without --account, the USER_PRIVKEY account is reported.
"""

import argparse
import json
import sys

from pw_scripts import reports
from pw_scripts.campaign import Pallets
from pw_scripts.chain import keypair_from_uri
from pw_scripts.runner import banner, run, settings_for, with_client


def main():
    parser = argparse.ArgumentParser(description="Report Phala World campaign state")
    parser.add_argument("--endpoint", help="Node WebSocket URL (overrides ENDPOINT)")
    parser.add_argument("--account", help="ss58 address to report on")
    parser.add_argument("--output", help="Also write the report to this file")
    args = parser.parse_args()

    settings = settings_for(args)
    banner("PHALA WORLD - Queries")

    address = args.account or keypair_from_uri(settings.key("user"), "user").ss58_address
    print(f"📍 Account: {address}")

    def body(client):
        report = reports.campaign_report(client, address, Pallets.from_settings(settings))
        text = json.dumps(report, indent=2, default=str)
        print(text)
        if args.output:
            with open(args.output, "w") as f:
                f.write(text + "\n")
            print(f"\n💾 Report saved to: {args.output}")

    with_client(settings, body)


if __name__ == "__main__":
    sys.exit(run(main))
