# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from doclink.adapters.fixture import load_fixture
from doclink.app import available_measures, compare_words, recover_trace_links
from doclink.common import configure_logging
from doclink.config import ConfigurationError, get_pipeline_config
from doclink.domain.model import PartOfSpeech

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from doclink.app import RunResult, WordComparison
    from doclink.config import PipelineConfig
    from doclink.domain.model import InstanceLink, PosPair

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Recover trace links between documentation and software models"
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="key=value configuration file (environment variables take precedence)",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a configuration value; may be repeated",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log at DEBUG level")
    subparsers = parser.add_subparsers(dest="command", required=True)

    similar = subparsers.add_parser("similar", help="Compare two words with every measure")
    similar.add_argument("first", type=str)
    similar.add_argument("second", type=str)
    similar.add_argument(
        "--pos",
        nargs=2,
        metavar=("TAG", "TAG"),
        help="Penn Treebank tags of the two words (e.g. NN VB)",
    )

    subparsers.add_parser("measures", help="List the similarity measures that can be built")

    resolve = subparsers.add_parser("resolve", help="Run the engine over a JSON fixture")
    resolve.add_argument("fixture", type=Path, help="JSON file with mentions and model instances")

    return parser.parse_args(list(argv))


def _parse_overrides(pairs: Sequence[str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"Invalid override {pair!r}; expected KEY=VALUE")
        overrides[key.strip()] = value.strip()
    return overrides


def _parse_pos(tags: Sequence[str] | None) -> PosPair | None:
    if not tags:
        return None
    first, second = (PartOfSpeech.from_tag(tag) for tag in tags)
    if first is None or second is None:
        raise ValueError(f"Unsupported part-of-speech tags: {' '.join(tags)}")
    return (first, second)


def _print_comparison(first: str, second: str, comparison: WordComparison) -> None:
    verdict = "similar" if comparison.similar else "not similar"
    score = "-" if comparison.score is None else f"{comparison.score:.3f}"
    print(f"{first!r} vs {second!r}: {verdict} (best score {score})")
    for entry in comparison.verdicts:
        if not entry.applicable:
            status = "not applicable"
        elif not entry.available:
            status = "unavailable"
        else:
            status = "similar" if entry.similar else "not similar"
        entry_score = "-" if entry.score is None else f"{entry.score:.3f}"
        print(f"  {entry.measure:<14} {status:<15} {entry_score}")


def _print_run(result: RunResult) -> None:
    print(f"measures: {', '.join(result.measures) or '(none)'}")
    for outcome in result.results:
        print(f"[{outcome.metamodel}]")
        print("  recommended instances:")
        for instance in outcome.recommended_instances:
            mentions = ", ".join(mapping.reference for mapping in instance.name_mappings)
            print(f"    {instance.name} : {instance.type or '-'}  ({mentions})")
        print("  links:")
        for link in sorted(outcome.links, key=_link_order):
            print(
                f"    {link.recommended_instance.name} -> {link.model_instance.name} "
                f"[{link.model_instance.identifier}] confidence={link.confidence:.2f} "
                f"claimants={','.join(link.claimants)}"
            )


def _link_order(link: InstanceLink) -> tuple[float, str]:
    return (-link.confidence, link.model_instance.identifier)


def _load_config(args: argparse.Namespace) -> PipelineConfig:
    return get_pipeline_config(_parse_overrides(args.overrides), config_file=args.config)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    load_dotenv()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        config = _load_config(parsed_args)
        pos = _parse_pos(parsed_args.pos) if parsed_args.command == "similar" else None
    except (ConfigurationError, ValueError):
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        if parsed_args.command == "similar":
            comparison = compare_words(
                parsed_args.first, parsed_args.second, pos=pos, config=config
            )
            _print_comparison(parsed_args.first, parsed_args.second, comparison)
        elif parsed_args.command == "measures":
            for name in available_measures(config):
                print(name)
        elif parsed_args.command == "resolve":
            fixture = load_fixture(parsed_args.fixture)
            result = recover_trace_links(
                fixture.mentions, fixture.model_instances, config=config
            )
            _print_run(result)
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301

    except Exception:
        log.exception("Fatal error during %s", parsed_args.command)
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


if __name__ == "__main__":
    signal(SIGINT, sigint_handler)
    main()
