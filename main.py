#!/usr/bin/env python3
"""
Email JSX Builder
Command line entry point: parse, validate, export and stream JSX email templates.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from core.component_mapper import parse_jsx
from core.config import BuilderSettings
from core.starter_templates import get_template, list_templates
from core.streaming_parser import simulate_agent_stream
from core.validation import lint_components, validate_jsx
from exporters.export_builder import EXPORT_FORMATS, ExportBuilder
from utils.file_utils import collect_jsx_files, read_file_content, write_file_content


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='email-jsx-builder',
        description='Parse, validate and export React-Email JSX templates',
    )
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('parse', help='Print the components a JSX file parses to, as JSON')
    p.add_argument('file')

    p = sub.add_parser('validate', help='Check tag balance, component names and content rules')
    p.add_argument('path', help='A .jsx/.tsx file or a directory of them')

    p = sub.add_parser('export', help='Render a JSX file as HTML, React-Email source or canonical JSX')
    p.add_argument('file')
    p.add_argument('--format', choices=EXPORT_FORMATS, default='html')
    p.add_argument('-o', '--output', help='Write to this file instead of stdout')

    p = sub.add_parser('stream', help='Replay a JSX file through the streaming parser')
    p.add_argument('file')
    p.add_argument('--chunk-size', type=int, default=None)
    p.add_argument('--delay-ms', type=int, default=None)

    p = sub.add_parser('templates', help='List starter templates, or print one')
    p.add_argument('name', nargs='?')

    p = sub.add_parser('serve', help='Run the HTTP API')
    p.add_argument('--host', default=None)
    p.add_argument('--port', type=int, default=None)
    return parser


def cmd_parse(args, settings: BuilderSettings) -> int:
    components = parse_jsx(read_file_content(args.file))
    print(json.dumps([c.to_dict() for c in components], indent=2))
    return 0


def cmd_validate(args, settings: BuilderSettings) -> int:
    files = collect_jsx_files(args.path)
    if not files:
        print(f"No JSX files found at {args.path}")
        return 1

    failures = 0
    for path in files:
        source = read_file_content(path)
        result = validate_jsx(source)
        issues = lint_components(parse_jsx(source), settings.max_text_length)
        if result.valid and not issues:
            print(f"OK    {path}")
            continue
        if not result.valid:
            failures += 1
        print(f"{'FAIL' if not result.valid else 'WARN'}  {path}")
        for error in result.errors:
            print(f"  error: {error}")
        for issue in issues:
            print(f"  warning: {issue.message}")
    return 1 if failures else 0


def cmd_export(args, settings: BuilderSettings) -> int:
    components = parse_jsx(read_file_content(args.file))
    content = ExportBuilder().export(components, args.format)
    if args.output:
        path = write_file_content(args.output, content)
        print(f"Wrote {args.format} export to {path}")
    else:
        print(content)
    return 0


def cmd_stream(args, settings: BuilderSettings) -> int:
    chunk_size = args.chunk_size or settings.stream_chunk_size
    delay_ms = settings.stream_delay_ms if args.delay_ms is None else args.delay_ms

    def on_chunk(chunk, components):
        print(f"{chunk!r:<16} -> {len(components)} components")

    final = simulate_agent_stream(read_file_content(args.file), on_chunk, chunk_size=chunk_size, delay_ms=delay_ms)
    print(f"Final: {len(final)} components")
    return 0


def cmd_templates(args, settings: BuilderSettings) -> int:
    if args.name:
        try:
            print(get_template(args.name).jsx)
        except KeyError:
            print(f"Unknown template: {args.name}")
            return 1
        return 0
    for template in list_templates():
        print(f"{template.key:<14} {template.name} - {template.description}")
    return 0


def cmd_serve(args, settings: BuilderSettings) -> int:
    from web.app import create_app

    create_app(settings).run(host=args.host or settings.host, port=args.port or settings.port)
    return 0


COMMANDS = {
    'parse': cmd_parse,
    'validate': cmd_validate,
    'export': cmd_export,
    'stream': cmd_stream,
    'templates': cmd_templates,
    'serve': cmd_serve,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function."""
    args = create_parser().parse_args(argv)
    settings = BuilderSettings.load()
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))

    try:
        return COMMANDS[args.command](args, settings)
    except FileNotFoundError as e:
        print(f"File not found: {e.filename}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
