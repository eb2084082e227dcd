import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from nexora.adapters.kv_store import JsonFileKeyValueStore
from nexora.components.dataset import generate_datasets
from nexora.components.dataset import load_config_from_rules as dataset_config
from nexora.components.membership import MembershipState
from nexora.rules.loader import load_rules_or_default
from nexora.rules.models import Rules

logger = logging.getLogger("cli")

DEFAULT_STATE_PATH = ".nexora/state.json"


def get_rules(path: str | None) -> Rules:
    try:
        return load_rules_or_default(Path(path) if path else None)
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)


def get_membership(rules: Rules, state_path: str | None) -> MembershipState:
    path = state_path or os.environ.get("NEXORA_STATE_PATH", DEFAULT_STATE_PATH)
    return MembershipState(
        JsonFileKeyValueStore(path),
        storage_key=rules.membership.storage_key,
    )


def handle_dataset(rules: Rules, args: argparse.Namespace) -> int:
    config = dataset_config(rules.dataset)
    overrides = {}
    if args.train_min is not None:
        overrides["train_min"] = args.train_min
    if args.val is not None:
        overrides["val_count"] = args.val
    if overrides:
        config = replace(config, **overrides)

    result = generate_datasets(config, Path(args.out) if args.out else None)
    if not result.success:
        for err in result.errors:
            logger.error(err)
        return 1

    print(f"Wrote {result.train_count} training pairs and {result.val_count} validation pairs.")
    for path in result.files:
        print(f"  {path}")
    return 0


def handle_tier(rules: Rules, args: argparse.Namespace) -> int:
    membership = get_membership(rules, args.state)

    if args.action == "upgrade-member":
        membership.upgrade_to_member()
    elif args.action == "upgrade-creator":
        membership.upgrade_to_creator()
    elif args.action == "cancel":
        membership.cancel_membership()

    paid = "paid" if membership.is_paid_member else "not paid"
    print(f"Tier: {membership.tier} ({paid})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nexora", description="Nexora CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: NEXORA_RULES_PATH or ./rules.yaml)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # dataset
    dataset_parser = subparsers.add_parser("dataset", help="Generate the assistant Q&A dataset")
    dataset_parser.add_argument("--out", help="Output directory")
    dataset_parser.add_argument("--train-min", type=int, help="Minimum training pairs")
    dataset_parser.add_argument("--val", type=int, help="Validation pairs")

    # tier
    tier_parser = subparsers.add_parser("tier", help="Show or change the local membership tier")
    tier_parser.add_argument(
        "action",
        choices=["show", "upgrade-member", "upgrade-creator", "cancel"],
    )
    tier_parser.add_argument("--state", help="State file (default: NEXORA_STATE_PATH)")

    return parser


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    rules = get_rules(args.rules)

    if args.command == "dataset":
        return handle_dataset(rules, args)
    if args.command == "tier":
        return handle_tier(rules, args)
    return 2


if __name__ == "__main__":
    sys.exit(main())
