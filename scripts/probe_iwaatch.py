"""Run one iwaatch operation against the live site and print its JSON.

    python -m scripts.probe_iwaatch search "the matrix"
    python -m scripts.probe_iwaatch stream https://iwaatch.com/movie/...
"""
import argparse
import asyncio
import logging

from src.providers.runner import ProviderEngine

OPERATIONS = {
    "search": "search",
    "details": "fetch_details",
    "episodes": "list_episodes",
    "stream": "resolve_stream",
}


async def probe(operation: str, arg: str, source: str) -> str:
    engine = ProviderEngine()
    try:
        result = await getattr(engine, OPERATIONS[operation])(source, arg)
    finally:
        await engine.close()
    if result.fallback:
        print("!! fallback payload (fetch failed or markup changed)")
    return result.to_json()


def main():
    parser = argparse.ArgumentParser(description="Probe a provider operation")
    parser.add_argument("operation", choices=sorted(OPERATIONS))
    parser.add_argument("arg", help="search keyword or page URL")
    parser.add_argument("--source", default="iwaatch")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)
    print(asyncio.run(probe(args.operation, args.arg, args.source)))

if __name__ == "__main__":
    main()
