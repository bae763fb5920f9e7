"""Command line interface for the transit order optimizer."""

import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

from hk_transit_optimizer.adapters.config import AppConfig
from hk_transit_optimizer.application.routing import station_seconds
from hk_transit_optimizer.composition import Services, build_services
from hk_transit_optimizer.domain.exceptions import TransitOptimizerError
from hk_transit_optimizer.domain.models import Itinerary


def itinerary_as_dict(itinerary: Itinerary) -> dict[str, Any]:
    """Plain dict form of an itinerary for JSON output."""
    return {
        "order": itinerary.ordered_labels,
        "totalMin": round(itinerary.total_seconds / 60),
        "segments": [
            {
                "from": segment.from_label,
                "to": segment.to_label,
                "durationMin": round(segment.duration_seconds / 60),
                "source": segment.source.value if segment.source else None,
                "legs": [
                    {
                        "mode": leg.mode,
                        "route": leg.route,
                        "from": leg.from_name,
                        "to": leg.to_name,
                        "durationSec": leg.duration_seconds,
                    }
                    for leg in segment.legs
                ],
            }
            for segment in itinerary.segments
        ],
    }


def print_itinerary(itinerary: Itinerary) -> None:
    print(f"\nBest order ({round(itinerary.total_seconds / 60)} min):")
    print("  " + " -> ".join(itinerary.ordered_labels))
    for segment in itinerary.segments:
        source = segment.source.value if segment.source else "?"
        print(
            f"\n  {segment.from_label} -> {segment.to_label}: "
            f"{round(segment.duration_seconds / 60)} min ({source})"
        )
        for leg in segment.legs:
            route = f" {leg.route}" if leg.route else ""
            print(
                f"    {leg.mode}{route}: {leg.from_name or '?'} -> {leg.to_name or '?'} "
                f"({round(leg.duration_seconds / 60)} min)"
            )


async def optimize(services: Services, origin: str, destinations: list[str], as_json: bool) -> None:
    itinerary = await services.itinerary_service.optimize(origin, destinations)
    if as_json:
        print(json.dumps(itinerary_as_dict(itinerary), indent=2, ensure_ascii=False))
    else:
        print_itinerary(itinerary)


async def rail_time(services: Services, from_code: str, to_code: str) -> None:
    """Print the fastest rail ride between two station codes, without walking or waiting."""
    graph = await services.rail_graph_provider.get_graph()
    from_code, to_code = from_code.upper(), to_code.upper()
    for code in (from_code, to_code):
        if not graph.platforms(code):
            print(f"Unknown station code: {code}", file=sys.stderr)
            sys.exit(1)

    seconds = station_seconds(graph, from_code, to_code)
    if seconds is None:
        print(f"No rail path from {from_code} to {to_code}", file=sys.stderr)
        sys.exit(1)
    print(f"{from_code} -> {to_code}: {seconds}s ({round(seconds / 60)} min)")


async def list_stations(services: Services, as_json: bool) -> None:
    graph = await services.rail_graph_provider.get_graph()
    stations = {
        code: [
            {"stop_id": stop_id, "name": graph.stops[stop_id].name}
            for stop_id in graph.platforms(code)
        ]
        for code in sorted(graph.platforms_by_code)
    }
    if as_json:
        print(json.dumps(stations, indent=2, ensure_ascii=False))
        return

    print(f"\n{len(stations)} station(s):\n")
    for code, platforms in stations.items():
        name = platforms[0]["name"] if platforms else ""
        print(f"  {code}  {name}  ({len(platforms)} platform(s))")


async def main() -> None:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Hong Kong transit order optimizer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Best order from Wong Tai Sin through five places
  hk-transit-optimizer optimize 黃大仙站 大埔中心 沙田好運中心 尖沙咀碼頭 "觀塘 apm" 藍田匯景

  # Rail time between two MTR stations
  hk-transit-optimizer rail WTS KWT

  # List MTR stations in the feed
  hk-transit-optimizer stations
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    optimize_parser = subparsers.add_parser("optimize", help="Find the best visiting order")
    optimize_parser.add_argument("origin", help="Starting place")
    optimize_parser.add_argument("destinations", nargs=5, help="Exactly five places to visit")
    optimize_parser.add_argument("--json", action="store_true", help="Output as JSON")

    rail_parser = subparsers.add_parser("rail", help="Rail time between two station codes")
    rail_parser.add_argument("from_code", help="Station code (e.g., WTS)")
    rail_parser.add_argument("to_code", help="Station code (e.g., KWT)")

    stations_parser = subparsers.add_parser("stations", help="List rail station codes")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    config = AppConfig()
    try:
        async with aiohttp.ClientSession() as session:
            services = build_services(config, session)
            if args.command == "optimize":
                await optimize(services, args.origin, args.destinations, args.json)
            elif args.command == "rail":
                await rail_time(services, args.from_code, args.to_code)
            elif args.command == "stations":
                await list_stations(services, args.json)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)
    except TransitOptimizerError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
