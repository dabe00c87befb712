#!/usr/bin/env python3
# scripts/seed.py
"""
Clinic portal database seeder.

Seeds the demonstration tenant (clinic-001) into the four domain stores.
Master data is idempotent; ledger rows (stock movements, marketing
expenses, performance snapshots, patient sources) are appended again on
every run.

Run:
  python -m scripts.seed run              # auth -> hr -> inventory -> marketing
  python -m scripts.seed run inventory    # one domain only
  python -m scripts.seed verify-stock     # compare current_stock with the ledger
  python -m scripts.seed credentials      # print the demo logins

Never run against production: APP_ENV=production aborts before any work.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Allow "python -m scripts.seed" from repo root
REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(REPO_ROOT))

from clinic_portal.core.config import Settings, get_settings
from clinic_portal.core.exceptions import (
    ProductionEnvironmentError,
    SeedError,
    UnknownDomainError,
)
from clinic_portal.seed.fixtures import seed_credentials
from clinic_portal.seed.ledger import verify_inventory_stock
from clinic_portal.seed.orchestrator import SEED_ORDER, SeedOrchestrator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m scripts.seed",
        description="Seed the clinic portal domain databases",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Seed all domains, or a single one")
    # Validated by the orchestrator, so an unknown name never reaches a store.
    run.add_argument(
        "domain",
        nargs="?",
        help=f"One of: {', '.join(SEED_ORDER)} (default: all, in that order)",
    )

    sub.add_parser("verify-stock", help="Report products whose stock disagrees with the ledger")
    sub.add_parser("credentials", help="Print demo login credentials")
    return parser


def run_seed(settings: Settings, domain: str | None, parser: argparse.ArgumentParser) -> int:
    print("🌱 Clinic Portal - Database Seeder")
    print("=" * 37)

    orchestrator = SeedOrchestrator(settings)
    try:
        if domain:
            result = orchestrator.run_one(domain)
            print(result.summary())
        else:
            print("Seeding all domains...")
            overall = orchestrator.run_all()
            for result in overall.results:
                print(result.summary())
            if not overall.success:
                print(f"❌ Seed failed for {overall.failed_domain}: {overall.error}", file=sys.stderr)
                return EXIT_FAILURE

    except ProductionEnvironmentError:
        print("❌ Cannot run seeds in production environment!", file=sys.stderr)
        return EXIT_FAILURE
    except UnknownDomainError as e:
        print(f"❌ {e}", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return EXIT_USAGE
    except SeedError as e:
        print(f"❌ Seed failed for {e.domain}: {e}", file=sys.stderr)
        return EXIT_FAILURE

    print("\n✅ All seeds completed successfully!")
    return EXIT_OK


def verify_stock(settings: Settings) -> int:
    discrepancies = verify_inventory_stock(settings)
    if not discrepancies:
        print("Stock levels match the movement ledger.")
        return EXIT_OK

    print(f"{len(discrepancies)} product(s) disagree with the movement ledger:")
    for d in discrepancies:
        print(f"  {d.product_id:<12} recorded={d.recorded:<6} ledger={d.ledger:<6} diff={d.difference:+d}")
    return EXIT_FAILURE


def print_credentials(settings: Settings) -> int:
    print("\n" + "=" * 60)
    print("DEMO USER CREDENTIALS")
    print("=" * 60)
    print(f"\nPassword for all demo users: {settings.seed_user_password}\n")
    for cred in seed_credentials(settings.seed_user_password):
        print(f"  {cred['email']:<30} | {cred['role']:<8} | {cred['clinic']}")
    print("\n" + "=" * 60)
    return EXIT_OK


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load settings (validates .env and provides typed access to config)
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    if args.command == "run":
        code = run_seed(settings, args.domain, parser)
    elif args.command == "verify-stock":
        code = verify_stock(settings)
    else:
        code = print_credentials(settings)

    raise SystemExit(code)


if __name__ == "__main__":
    main()
