# main.py

import argparse
import asyncio
import json
import logging
import sys

from config.logging_config import configure_logger
from config import settings
from evolution_engine.client import PokeAPIClient
from evolution_engine.resolver import EvolutionResolver
from evolution_engine.view import format_view


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Resolve Pokémon evolution chains from PokéAPI")
    parser.add_argument(
        "ids", nargs="*", type=int,
        help=f"National dex numbers to resolve (default: {settings.POKEMON_TO_RESOLVE})",
    )
    parser.add_argument("--json", action="store_true", help="Print the views as JSON")
    parser.add_argument(
        "--log-level", default=None, type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Resolves every requested creature and prints its evolution view."""
    args = parse_args(argv)
    # JSON goes to stdout, so logs go to stderr
    configure_logger(args.log_level, stream=sys.stderr if args.json else sys.stdout)
    logger = logging.getLogger(__name__)
    logger.info("--- Evolution Chain Resolver Initialized ---")

    async with PokeAPIClient() as client:
        results = await EvolutionResolver(client).resolve_many(args.ids or settings.POKEMON_TO_RESOLVE)

    if args.json:
        payload = {
            str(r.creature_id): (
                {"error": str(r.error)} if not r.ok
                else r.view.to_dict() if r.view else None
            )
            for r in results
        }
        print(json.dumps(payload, indent=2))
    else:
        for r in results:
            if not r.ok:
                print(f"#{r.creature_id}: error: {r.error}")
            elif r.view is None:
                print(f"#{r.creature_id}: no evolution data")
            else:
                print(format_view(r.view))

    logger.info("--- Resolution Finished ---")
    return 1 if any(not r.ok for r in results) else 0


if __name__ == "__main__":
    # Run from the project's root directory: python main.py 133 25
    sys.exit(asyncio.run(main()))
