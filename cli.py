#!/usr/bin/env python3
"""
Fragment Randomiser - Command Line Interface

Runs the randomiser and inspects its output.

Usage:
    python cli.py randomise --seed ABC123 --out save.json
    python cli.py randomise --config randomiser.json --json
    python cli.py start --seed ABC123 --mode Random
    python cli.py show --save save.json
    python cli.py rng --seed ABC123 --count 20
"""

import argparse
import json
import logging
import sys
import os
from typing import List, Optional

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from packages.randomiser import (
    RandomiserConfig, Randomiser, RandomiserError, SaveFile, StartSelector,
    DistributionStore, Random, seed_to_long, load_static_data,
)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def parse_seed(seed: Optional[str]) -> Optional[int]:
    if seed is None:
        return None
    return seed_to_long(seed)


def format_seed_info(seed_string: str, numeric_seed: int) -> str:
    """Format seed information header."""
    return f"Seed: {seed_string} (numeric: {numeric_seed})"


def format_distribution(store: DistributionStore) -> str:
    """Format a distribution as one block per fragment."""
    lines = [f"Seed: {store.seed}", ""]

    for item in sorted(store.spawn_data):
        spawn_data = store.spawn_data[item]
        needed = store.discovery_overrides.get(item)
        header = f"{item}" + (f" ({needed} scans)" if needed is not None else "")
        lines.append(header)
        for biome in spawn_data.biomes():
            probs = ", ".join(f"{p:.4f}" for p in spawn_data.probabilities_in(biome))
            lines.append(f"  {biome:<36} {probs}")

    lines.append("")
    if store.start_point is None:
        lines.append("Start: vanilla")
    else:
        x, y, z = store.start_point
        lines.append(f"Start: x:{x} y:{y} z:{z}")
    return "\n".join(lines)


def load_config(args) -> RandomiserConfig:
    config = RandomiserConfig.load(args.config) if args.config else RandomiserConfig()
    seed = parse_seed(args.seed)
    if seed is not None:
        config.seed = seed
    return config


# =============================================================================
# COMMANDS
# =============================================================================

def cmd_randomise(args) -> int:
    config = load_config(args)
    if args.spawn_point:
        config.spawn_point = args.spawn_point
    if args.num_fragments:
        config.randomise_num_fragments = True

    static_data = load_static_data(args.biomes, args.starts)
    persistence = SaveFile(args.out) if args.out else None
    store = Randomiser(config, static_data, persistence=persistence).randomise()

    if args.json:
        print(json.dumps(store.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_distribution(store))
    return 0


def cmd_start(args) -> int:
    static_data = load_static_data(starts_path=args.starts)
    rng = Random(seed_to_long(args.seed))
    point = StartSelector(static_data.alternate_starts, rng).select_start(args.mode)

    if args.json:
        print(json.dumps(None if point is None else point._asdict()))
    elif point is None:
        print("Start: vanilla")
    else:
        print(f"Start: x:{point.x} y:{point.y} z:{point.z}")
    return 0


def cmd_show(args) -> int:
    store = SaveFile(args.save).load()
    if args.json:
        print(json.dumps(store.to_dict(), indent=2, sort_keys=True))
    else:
        print(format_distribution(store))
    return 0


def cmd_rng(args) -> int:
    seed = seed_to_long(args.seed)
    rng = Random(seed)
    values: List[int] = [rng.random_int(99) for _ in range(args.count)]

    if args.json:
        print(json.dumps({"seed": args.seed, "numeric_seed": seed, "values": values}))
    else:
        print(format_seed_info(args.seed, seed))
        for i, val in enumerate(values):
            print(f"  {i}: {val}")
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Fragment Randomiser - CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s randomise --seed ABC123 --out save.json
  %(prog)s randomise --config randomiser.json --json
  %(prog)s start --seed ABC123 --mode Random
  %(prog)s show --save save.json
  %(prog)s rng --seed ABC123 --count 20
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Randomise command
    randomise_parser = subparsers.add_parser("randomise", help="Run a full randomisation")
    randomise_parser.add_argument("--seed", "-s", help="Seed (number or seed string); defaults to the config seed")
    randomise_parser.add_argument("--config", "-c", help="Config JSON file")
    randomise_parser.add_argument("--biomes", help="Biome CSV file (defaults to built-in biomes)")
    randomise_parser.add_argument("--starts", help="Alternate start CSV file")
    randomise_parser.add_argument("--spawn-point", help="Start mode, e.g. Vanilla, Random, 'Chaotic Random', Kelp")
    randomise_parser.add_argument("--num-fragments", action="store_true", help="Randomise scans needed per fragment")
    randomise_parser.add_argument("--out", "-o", help="Write the distribution to this save file")
    randomise_parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    # Start command
    start_parser = subparsers.add_parser("start", help="Pick an alternate start")
    start_parser.add_argument("--seed", "-s", required=True, help="Seed")
    start_parser.add_argument("--mode", "-m", default="Random", help="Start mode")
    start_parser.add_argument("--starts", help="Alternate start CSV file")
    start_parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    # Show command
    show_parser = subparsers.add_parser("show", help="Show a saved distribution")
    show_parser.add_argument("--save", required=True, help="Save file")
    show_parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    # RNG command
    rng_parser = subparsers.add_parser("rng", help="Show an RNG sequence")
    rng_parser.add_argument("--seed", "-s", required=True, help="Seed")
    rng_parser.add_argument("--count", "-n", type=int, default=20, help="Number of values to show")
    rng_parser.add_argument("--json", "-j", action="store_true", help="Output in JSON format")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    # Dispatch to command handler
    commands = {
        "randomise": cmd_randomise,
        "start": cmd_start,
        "show": cmd_show,
        "rng": cmd_rng,
    }

    handler = commands.get(args.command)
    try:
        return handler(args)
    except RandomiserError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
