#!/usr/bin/env python3
import argparse
import asyncio
import sys
from typing import List, Optional, TextIO

from defscrape import __version__
from defscrape.config import OUTPUT_FORMATS, READERS, Config, config as default_config
from defscrape.definition import DefinitionParser
from defscrape.diagnostics import get_logger, set_debug
from defscrape.exceptions import ConfigError, DefinitionError
from defscrape.filters import default_registry
from defscrape.lexer import Lexer
from defscrape.pipeline import ExtractionResult, Pipeline
from defscrape.presenter import format_json, format_records, format_text, total
from defscrape.readers import FileReader, create_reader

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FETCH_FAILED = 1
EXIT_BAD_INPUT = 2

PROMPT = "Enter a URL (type q to quit): "


def load_definition(path: str) -> Optional[DefinitionParser]:
    try:
        return DefinitionParser.from_file(path)
    except DefinitionError as e:
        print(f"Error: failed to read definition: {e}", file=sys.stderr)
        return None


def render(results: List[ExtractionResult], args: argparse.Namespace) -> str:
    if args.format == "json":
        return format_json(results) + "\n"
    out = format_text(results)
    if args.total:
        records = [r for result in results for r in result.records]
        out += f"total {args.total}: {total(records, args.total)}\n"
    return out


def cmd_extract(args: argparse.Namespace) -> int:
    definition = load_definition(args.definition)
    if definition is None:
        return EXIT_BAD_INPUT

    try:
        reader = create_reader(args.reader, args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    logger.debug(f"Extracting with {args.definition}: reader={reader.name} urls={len(args.url)} files={len(args.file)}")
    results: List[ExtractionResult] = []
    if args.file:
        with Pipeline(definition, FileReader(), 1, 1) as file_pipeline:
            results.extend(file_pipeline.process_url(path) for path in args.file)
    with Pipeline(definition, reader, args.config.getter_workers, args.config.parser_workers) as pipeline:
        if args.url:
            results.extend(asyncio.run(pipeline.run(args.url)))
        if not args.url and not args.file:
            results.append(pipeline.process_body(args.stdin.read(), "stdin"))

    sys.stdout.write(render(results, args))
    if results and not any(r.success for r in results):
        return EXIT_FETCH_FAILED
    return EXIT_OK


def cmd_tokens(args: argparse.Namespace) -> int:
    try:
        with open(args.definition, encoding="utf-8") as f:
            source = f.read()
    except OSError as e:
        print(f"Error: failed to read definition: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    lexer = Lexer(source)
    for token in lexer.scan():
        print(token)
    if lexer.error is not None:
        print(f"Error: {lexer.error}", file=sys.stderr)
        return EXIT_BAD_INPUT
    return EXIT_OK


def cmd_filters(args: argparse.Namespace) -> int:
    registry = default_registry()
    for name in sorted(registry):
        print(f"{name:<10} {registry[name].description}")
    return EXIT_OK


def cmd_interactive(args: argparse.Namespace) -> int:
    definition = load_definition(args.definition)
    if definition is None:
        return EXIT_BAD_INPUT
    try:
        reader = create_reader(args.reader, args.config)
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    with Pipeline(definition, reader, 1, 1) as pipeline:
        for url in prompt_urls(args.stdin):
            result = pipeline.process_url(url)
            if result.success:
                sys.stdout.write(format_records(result.records))
            else:
                print(f"Error: {result.error}", file=sys.stderr)
    return EXIT_OK


def prompt_urls(stream: TextIO):
    """Ask for URLs until 'q' or end of input, skipping blank lines."""
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            return
        text = line.strip()
        if not text:
            continue
        if text == "q":
            return
        yield text


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="defscrape", description="defscrape - extract records from pages with definition files")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("--debug", action="store_true", help="Verbose logging")
    sub = p.add_subparsers(dest="sub")

    p_ext = sub.add_parser("extract", help="Extract records from URLs, files or stdin")
    p_ext.add_argument("-d", "--definition", default=default_config.definition_file, help="Definition file")
    p_ext.add_argument("--url", action="append", default=[], help="URL to fetch (repeatable)")
    p_ext.add_argument("--file", action="append", default=[], help="Local file to read (repeatable)")
    p_ext.add_argument("--reader", choices=READERS, default=None, help="How pages are fetched")
    p_ext.add_argument("--format", choices=OUTPUT_FORMATS, default=None, help="Output format")
    p_ext.add_argument("--total", metavar="FIELD", help="Print the integer sum of FIELD (text format)")
    p_ext.set_defaults(func=cmd_extract)

    p_tok = sub.add_parser("tokens", help="Show the tokens of a definition")
    p_tok.add_argument("-d", "--definition", default=default_config.definition_file, help="Definition file")
    p_tok.set_defaults(func=cmd_tokens)

    p_int = sub.add_parser("interactive", help="Prompt for URLs and extract each one")
    p_int.add_argument("-d", "--definition", default=default_config.definition_file, help="Definition file")
    p_int.add_argument("--reader", choices=READERS, default=None, help="How pages are fetched")
    p_int.set_defaults(func=cmd_interactive)

    p_fil = sub.add_parser("filters", help="List available filters")
    p_fil.set_defaults(func=cmd_filters)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not getattr(args, "func", None):
        parser.print_help()
        return EXIT_OK

    cfg = Config(**vars(default_config))
    if getattr(args, "reader", None):
        cfg.reader = args.reader
    if getattr(args, "format", None):
        cfg.output_format = args.format
    try:
        cfg.validate()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    if args.debug or cfg.debug:
        set_debug(True)
    args.config = cfg
    args.format = cfg.output_format
    args.stdin = sys.stdin
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
