"""Command-line interface for weather go/no-go checks."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from weather_gonogo.config import Settings, get_settings
from weather_gonogo.models.weather import WeatherSnapshot
from weather_gonogo.providers.base import LocationNotFoundError, ProviderError
from weather_gonogo.render import render_briefing, render_recommendation
from weather_gonogo.rules.engine import InvalidSnapshotError, evaluate
from weather_gonogo.rules.hazards import MatchMode, classify
from weather_gonogo.service import GoNoGoService

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Unable to fetch data right now. Please try again."


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="weather-gonogo",
        description="Weather Go/No-Go - check current conditions against operational limits",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Geocode a location and evaluate its current conditions"
    )
    check_parser.add_argument(
        "location",
        help="Address, ZIP, city, place or 'lat,lon'",
    )
    check_parser.add_argument(
        "--no-aviation",
        action="store_true",
        help="Skip METAR/TAF lookup",
    )
    _add_match_mode(check_parser)
    _add_json(check_parser)

    # Evaluate command
    evaluate_parser = subparsers.add_parser(
        "evaluate", help="Evaluate readings given on the command line"
    )
    evaluate_parser.add_argument("--wind", type=float, help="Wind speed (m/s)")
    evaluate_parser.add_argument("--gusts", type=float, help="Wind gusts (m/s)")
    evaluate_parser.add_argument("--precip", type=float, help="Precipitation (mm/h)")
    evaluate_parser.add_argument("--snow", type=float, help="Snowfall (mm/h)")
    evaluate_parser.add_argument("--visibility", type=float, help="Visibility (m)")
    evaluate_parser.add_argument("--cloud-base", type=float, help="Cloud base (m)")
    evaluate_parser.add_argument("--taf", help="TAF text to classify and include")
    _add_match_mode(evaluate_parser)
    _add_json(evaluate_parser)

    # Classify command
    classify_parser = subparsers.add_parser(
        "classify", help="Classify TAF text into a hazard level"
    )
    classify_parser.add_argument("text", help="Raw TAF text")
    _add_match_mode(classify_parser)
    _add_json(classify_parser)

    return parser


def _add_match_mode(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--match-mode",
        choices=[mode.value for mode in MatchMode],
        default=None,
        help="Hazard token matching (default from HAZARD_MATCH_MODE)",
    )


def _add_json(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")


def _match_mode(args: argparse.Namespace, settings: Settings) -> MatchMode:
    return MatchMode(args.match_mode) if args.match_mode else settings.hazard_match_mode


async def _run_check(args: argparse.Namespace, settings: Settings) -> int:
    if args.match_mode:
        settings = settings.model_copy(update={"hazard_match_mode": MatchMode(args.match_mode)})

    async with GoNoGoService(settings=settings) as service:
        try:
            briefing = await service.check(
                args.location,
                include_aviation=False if args.no_aviation else None,
            )
        except LocationNotFoundError:
            print("No matching location found.", file=sys.stderr)
            return 1
        except ProviderError as e:
            logger.error(f"{e.provider}: {e}")
            print(FETCH_FAILED_MESSAGE, file=sys.stderr)
            return 1
        except InvalidSnapshotError as e:
            logger.error(str(e))
            print(FETCH_FAILED_MESSAGE, file=sys.stderr)
            return 1

    if args.json:
        print(briefing.model_dump_json(indent=2, exclude={"snapshot": {"raw_data"}}))
    else:
        print(render_briefing(briefing))
    return 0


def _run_evaluate(args: argparse.Namespace, settings: Settings) -> int:
    snapshot = WeatherSnapshot(
        wind_speed_ms=args.wind,
        wind_gust_ms=args.gusts,
        precipitation_mm_h=args.precip,
        snowfall_mm_h=args.snow,
        visibility_m=args.visibility,
        cloud_base_m=args.cloud_base,
    )
    aviation = classify(args.taf, mode=_match_mode(args, settings))
    result = evaluate(snapshot, thresholds=settings.thresholds, aviation=aviation)

    if args.json:
        print(result.model_dump_json(indent=2))
    elif result.ok:
        print("\n".join(render_recommendation(result.unwrap())))
    else:
        for error in result.errors:
            print(f"Invalid {error.field}: {error.reason}", file=sys.stderr)
    return 0 if result.ok else 1


def _run_classify(args: argparse.Namespace, settings: Settings) -> int:
    assessment = classify(args.text, mode=_match_mode(args, settings))
    if assessment is None:
        print("No forecast text to classify.", file=sys.stderr)
        return 1

    if args.json:
        print(assessment.model_dump_json(indent=2))
    else:
        print(f"{assessment.level.label}: {assessment.reason}")
        if assessment.matched_tokens:
            print(f"Matched: {', '.join(assessment.matched_tokens)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    settings = get_settings()
    configure_logging(settings)

    if args.command == "check":
        if not args.location.strip():
            print("Please enter an address, ZIP, city, or place.", file=sys.stderr)
            return 2
        return asyncio.run(_run_check(args, settings))
    if args.command == "evaluate":
        return _run_evaluate(args, settings)
    return _run_classify(args, settings)


if __name__ == "__main__":
    sys.exit(main())
