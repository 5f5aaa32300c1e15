"""Command line front end: slugs, re-casing, truncation, distance and natural sort."""
from __future__ import annotations

import argparse
import math
import sys
import time
from itertools import combinations, islice
from pathlib import Path
from typing import Callable, Iterable, List, Sequence

from common.config import DEFAULT_PROFILE, error_mode_from_policy, load_runtime_config
from common.errors import ErrorCode, TextKitError
from common.models import CaseStyle, CommandEvent, RuntimeConfig
from common.progress import BenchmarkRecorder, EventLogger
from core.casing import to_style
from core.distance import levenshtein
from core.ordering import natural_sorted
from core.slugs import slugify
from core.strings import number_format, to_boolean, to_number, to_sentence
from core.truncation import truncate

DEFAULT_BENCHMARK_PAIRS = 200


def read_lines(paths: Sequence[Path], runtime: RuntimeConfig) -> List[str]:
    """Read lines from files (or stdin when none are given) using the profile encoding."""

    if not paths:
        return sys.stdin.read().splitlines()
    encoding = runtime.global_settings.encoding
    errors = error_mode_from_policy(runtime.global_settings.error_policy)
    collected: List[str] = []
    for path in paths:
        try:
            with path.open("r", encoding=encoding, errors=errors) as handle:
                collected.extend(handle.read().splitlines())
        except UnicodeDecodeError as exc:
            raise TextKitError(
                ErrorCode.IO_ERROR,
                f"Cannot decode '{path}' as {encoding}: {exc.reason}",
                context={"path": str(path)},
            ) from exc
        except LookupError as exc:
            raise TextKitError(ErrorCode.CONFIG_ERROR, f"Unknown encoding '{encoding}'") from exc
        except OSError as exc:
            raise TextKitError(
                ErrorCode.IO_ERROR,
                f"Cannot read '{path}': {exc.strerror or exc}",
                context={"path": str(path)},
            ) from exc
    return collected


def emit_lines(values: Iterable[str]) -> int:
    emitted = 0
    for value in values:
        print(value)
        emitted += 1
    return emitted


def command_slugify(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    return emit_lines(slugify(text) for text in args.texts)


def command_case(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    style = CaseStyle.parse(args.style)
    return emit_lines(to_style(text, style) for text in args.texts)


def command_truncate(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    marker = args.marker if args.marker is not None else runtime.profile.truncate_marker
    return emit_lines(truncate(text, args.length, marker) for text in args.texts)


def command_distance(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    return emit_lines([str(levenshtein(args.first, args.second))])


def command_sort(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    lines = read_lines([Path(p) for p in args.inputs], runtime)
    return emit_lines(natural_sorted(lines, reverse=args.reverse))


def command_number(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    profile = runtime.profile
    formatted: List[str] = []
    for raw in args.values:
        value = to_number(raw, args.decimals)
        if math.isnan(value):
            raise TextKitError(ErrorCode.INPUT_ERROR, f"'{raw}' is not a number", context={"value": raw})
        formatted.append(
            number_format(value, args.decimals, profile.decimal_separator, profile.thousands_separator)
        )
    return emit_lines(formatted)


def command_bool(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    profile = runtime.profile
    labels = {True: "true", False: "false", None: "unknown"}
    return emit_lines(
        labels[to_boolean(value, profile.true_values, profile.false_values)] for value in args.values
    )


def command_sentence(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    profile = runtime.profile
    sentence = to_sentence(
        args.items,
        profile.sentence_separator,
        profile.sentence_last_separator,
        serial=args.serial,
    )
    emit_lines([sentence])
    return len(args.items)


def command_benchmark(args: argparse.Namespace, runtime: RuntimeConfig) -> int:
    lines = read_lines([Path(p) for p in args.inputs], runtime)
    if not lines:
        raise SystemExit("No input lines found for benchmark.")
    recorder = BenchmarkRecorder(Path(args.log))

    start = time.perf_counter()
    natural_sorted(lines)
    sort_seconds = time.perf_counter() - start

    pairs = list(islice(combinations(lines, 2), max(args.pairs, 0)))
    start = time.perf_counter()
    for first, second in pairs:
        levenshtein(first, second)
    distance_seconds = time.perf_counter() - start

    recorder.record(
        dataset=",".join(args.inputs),
        metrics={
            "lines": float(len(lines)),
            "sort_seconds": sort_seconds,
            "pairs": float(len(pairs)),
            "distance_seconds": distance_seconds,
        },
    )
    print(
        f"Benchmark complete: sorted {len(lines)} line(s) in {sort_seconds:.4f}s, "
        f"{len(pairs)} distance pair(s) in {distance_seconds:.4f}s"
    )
    return len(lines)


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--profile",
        default=DEFAULT_PROFILE,
        help="Profile from config/defaults.json (e.g., default, european)",
    )
    parser.add_argument(
        "--config",
        help="Alternative configuration JSON file",
    )
    parser.add_argument(
        "--event-log",
        help="Path to JSONL file for structured command events",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textkit", description="Text normalization and comparison helpers"
    )
    subparsers = parser.add_subparsers(dest="command")

    slug = subparsers.add_parser("slugify", help="Turn text into URL-safe slugs")
    slug.add_argument("texts", nargs="+", help="Texts to slugify")
    _add_common_options(slug)
    slug.set_defaults(func=command_slugify)

    case = subparsers.add_parser("case", help="Re-case text (camel, snake, kebab, title, class, human)")
    case.add_argument("style", help="Target style name")
    case.add_argument("texts", nargs="+", help="Texts to convert")
    _add_common_options(case)
    case.set_defaults(func=command_case)

    trunc = subparsers.add_parser("truncate", help="Shorten text without splitting words")
    trunc.add_argument("length", type=int, help="Maximum length before the marker")
    trunc.add_argument("texts", nargs="+", help="Texts to shorten")
    trunc.add_argument("--marker", help="Continuation marker (defaults to the profile marker)")
    _add_common_options(trunc)
    trunc.set_defaults(func=command_truncate)

    distance = subparsers.add_parser("distance", help="Levenshtein distance between two texts")
    distance.add_argument("first")
    distance.add_argument("second")
    _add_common_options(distance)
    distance.set_defaults(func=command_distance)

    sort = subparsers.add_parser("sort", help="Sort lines in natural order")
    sort.add_argument("inputs", nargs="*", help="Files to read (stdin when omitted)")
    sort.add_argument("--reverse", action="store_true", help="Sort descending")
    _add_common_options(sort)
    sort.set_defaults(func=command_sort)

    number = subparsers.add_parser("number", help="Parse and format numbers with profile separators")
    number.add_argument("values", nargs="+", help="Plain decimal numbers, e.g. 1234.5")
    number.add_argument("--decimals", type=int, default=0, help="Digits after the decimal separator")
    _add_common_options(number)
    number.set_defaults(func=command_number)

    boolean = subparsers.add_parser("bool", help="Interpret values as booleans")
    boolean.add_argument("values", nargs="+")
    _add_common_options(boolean)
    boolean.set_defaults(func=command_bool)

    sentence = subparsers.add_parser("sentence", help="Join items as an English list")
    sentence.add_argument("items", nargs="+")
    sentence.add_argument("--serial", action="store_true", help="Use a serial (Oxford) comma")
    _add_common_options(sentence)
    sentence.set_defaults(func=command_sentence)

    benchmark = subparsers.add_parser("benchmark", help="Measure natural sort and distance throughput")
    benchmark.add_argument("inputs", nargs="+", help="Files whose lines are used as the dataset")
    benchmark.add_argument(
        "--pairs",
        type=int,
        default=DEFAULT_BENCHMARK_PAIRS,
        help="Number of line pairs to run through the distance metric",
    )
    benchmark.add_argument(
        "--log",
        default="artifacts/benchmarks.jsonl",
        help="Where to append benchmark metrics",
    )
    _add_common_options(benchmark)
    benchmark.set_defaults(func=command_benchmark)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return

    handler: Callable[[argparse.Namespace, RuntimeConfig], int] = args.func
    try:
        runtime = load_runtime_config(
            profile=args.profile,
            config_path=Path(args.config) if args.config else None,
        )
        start = time.perf_counter()
        items = handler(args, runtime)
        seconds = time.perf_counter() - start
    except TextKitError as exc:
        raise SystemExit(str(exc)) from exc

    EventLogger(Path(args.event_log) if args.event_log else None).emit(
        CommandEvent(command=args.command, items=items, seconds=seconds, profile=args.profile)
    )


if __name__ == "__main__":
    main()
