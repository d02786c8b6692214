from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from fastx_scope.adapters.fasta_reader import ScopedRecordReader
from fastx_scope.adapters.file_source import open_binary
from fastx_scope.adapters.log_sinks import build_log_sink
from fastx_scope.config.loader import ConfigError, load_config
from fastx_scope.config.models import AppConfig, LoggingConfig
from fastx_scope.domain.alphabet import ALPHABETS, AlphabetPolicy
from fastx_scope.domain.errors import MalformedRecordError, ReaderError
from fastx_scope.domain.records import Record
from fastx_scope.ports.log_sink import LogSink
from fastx_scope.usecases.scoped import iter_records, record_options, run_scoped

# Thin wrapper over the scoped-reader use cases; no parsing logic lives here.

EXIT_OK = 0
EXIT_READ_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fastx-scope", description="Inspect FASTA record files")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--alphabet", choices=sorted(ALPHABETS), help="Override reader alphabet")
    parser.add_argument(
        "--policy",
        choices=[policy.value for policy in AlphabetPolicy],
        help="Override alphabet policy",
    )
    parser.add_argument("--skip-malformed", action="store_true", help="Skip records that fail validation")
    parser.add_argument("--log-jsonl", help="Write structured reader logs to this JSONL file")

    commands = parser.add_subparsers(dest="command", required=True)

    list_cmd = commands.add_parser("list", help="Print index and description of every record")
    list_cmd.add_argument("path", help="FASTA file")

    show_cmd = commands.add_parser("show", help="Print one record as FASTA")
    show_cmd.add_argument("path", help="FASTA file")
    show_cmd.add_argument("index", type=int, help="1-based record index")
    show_cmd.add_argument("--width", type=_non_negative_int, default=60, help="Sequence line width (0 = no wrap)")

    count_cmd = commands.add_parser("count", help="Print the number of records")
    count_cmd.add_argument("path", help="FASTA file")
    return parser


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("must be a non-negative integer")
    return value


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    # CLI overrides take precedence over the config file.
    config = load_config(Path(args.config)) if args.config else AppConfig()
    reader_overrides: dict[str, object] = {}
    if args.alphabet is not None:
        reader_overrides["alphabet"] = args.alphabet
    if args.policy is not None:
        reader_overrides["policy"] = AlphabetPolicy(args.policy)
    if reader_overrides:
        config = config.model_copy(update={"reader": config.reader.model_copy(update=reader_overrides)})
    if args.log_jsonl is not None:
        config = config.model_copy(update={"logging": LoggingConfig(sink="jsonl", path=args.log_jsonl)})
    return config


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"fastx-scope: invalid config: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR

    sink = build_log_sink(config.logging)
    try:
        if args.command == "list":
            records = _read_all(args, config, sink)
            for idx, description in record_options(records):
                print(f"{idx}\t{description}")
        elif args.command == "count":
            print(len(_read_all(args, config, sink)))
        else:
            record = _read_one(args, config, sink)
            if record is None:
                print(f"fastx-scope: record index {args.index} out of range", file=sys.stderr)
                return EXIT_READ_ERROR
            print(record.to_fasta(args.width))
    except (ReaderError, OSError) as exc:
        print(f"fastx-scope: {exc}", file=sys.stderr)
        return EXIT_READ_ERROR
    finally:
        sink.close()
    return EXIT_OK


def _read_all(args: argparse.Namespace, config: AppConfig, sink: LogSink) -> list[Record]:
    def _body(reader: ScopedRecordReader) -> list[Record]:
        return list(iter_records(reader, skip_malformed=args.skip_malformed, on_skip=_report_skip))

    return run_scoped(open_binary(Path(args.path)), _body, config.reader, log_sink=sink)


def _read_one(args: argparse.Namespace, config: AppConfig, sink: LogSink) -> Record | None:
    # Stops at the requested record; the scope releases the file without reading the rest.
    def _body(reader: ScopedRecordReader) -> Record | None:
        if args.index < 1:
            return None
        records = iter_records(reader, skip_malformed=args.skip_malformed, on_skip=_report_skip)
        for idx, record in enumerate(records, start=1):
            if idx == args.index:
                return record
        return None

    return run_scoped(open_binary(Path(args.path)), _body, config.reader, log_sink=sink)


def _report_skip(exc: MalformedRecordError) -> None:
    print(f"fastx-scope: skipped {exc}", file=sys.stderr)
