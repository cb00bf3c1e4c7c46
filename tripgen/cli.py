"""tripgen CLI entry point."""

from __future__ import annotations

import argparse
import json
import random
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from tripgen.application.context import build_app_context
from tripgen.config.settings import resolve_settings
from tripgen.domain.planning.generator import ItineraryGenerator
from tripgen.services.export_formatter import render_itinerary_markdown
from tripgen.services.itinerary_service import generate


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tripgen", description="Generate day-by-day travel itineraries.")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("destinations", help="List destination ids in the catalog")

    gen = sub.add_parser("generate", help="Generate an itinerary")
    gen.add_argument("--destination", required=True, help="Destination id, e.g. accra")
    gen.add_argument("--interest", default="", help="Interest tag, e.g. History")
    gen.add_argument("--days", required=True, help="Trip length in days")
    gen.add_argument("--seed", type=int, default=None, help="Seed for the meal pick")
    gen.add_argument("--json", action="store_true", help="Print JSON instead of markdown")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _build_parser().parse_args(argv)

    if args.command == "serve":
        import uvicorn

        uvicorn.run("tripgen.api.main:app", host=args.host, port=args.port)
        return 0

    settings = resolve_settings().model_copy(update={"persistence_enabled": False})
    ctx = build_app_context(settings)

    if args.command == "destinations":
        for item in ctx.catalog.destination_options():
            print(f"{item['value']}\t{item['label']}")
        return 0

    if args.seed is not None:
        ctx.generator = ItineraryGenerator(ctx.catalog, rng=random.Random(args.seed), logger=ctx.logger)

    itinerary = generate(ctx, args.destination, args.interest, args.days)
    if itinerary is None:
        print(
            f"error: cannot generate an itinerary for destination={args.destination!r} days={args.days!r}",
            file=sys.stderr,
        )
        return 1

    if args.json:
        print(json.dumps(itinerary.model_dump(mode="json"), ensure_ascii=False, indent=2))
    else:
        print(render_itinerary_markdown(itinerary), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
