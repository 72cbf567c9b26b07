"""CLI for parsing and normalizing YINI configuration files."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Iterable, Sequence

from yini import FileError, ParseError, YiniFormatter, parse
from yini.files import read_text, write_text

DEFAULT_OUTPUT_DIR = Path("out/")
SUFFIX = ".yini"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse YINI files and write normalized copies (or JSON dumps) of them."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=".",
        help="Path to a .yini file or a directory of .yini files (defaults to the current directory).",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory where normalized files should be written (defaults to out/).",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=4,
        help="Spaces per nesting level (default: 4).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Write the parsed tree as JSON instead of normalized YINI.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Write nothing; exit with status 1 if any file is not already normalized.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging for the parser and formatter.",
    )
    return parser.parse_args(argv)


def collect_inputs(path: Path) -> list[Path]:
    if path.is_dir():
        files = sorted(p for p in path.glob(f"*{SUFFIX}") if p.is_file())
        if not files:
            raise FileNotFoundError(f"No {SUFFIX} files found in directory: {path}")
        return files
    if path.is_file():
        return [path]
    raise FileNotFoundError(f"Input path does not exist: {path}")


def render(text: str, formatter: YiniFormatter, as_json: bool, verbose: bool) -> str:
    document = parse(text, config={"enable_logger": verbose, "lexer_config": {"enable_logger": verbose}})
    if as_json:
        return json.dumps(document.to_dict(), indent=2) + "\n"
    return formatter.format_document(document)


def generate(
    files: Iterable[Path],
    output_dir: Path,
    formatter: YiniFormatter,
    as_json: bool = False,
    check: bool = False,
    verbose: bool = False,
) -> int:
    changed = 0
    if not check:
        output_dir.mkdir(parents=True, exist_ok=True)
    for source in files:
        text = read_text(source)
        try:
            normalized = render(text, formatter, as_json=as_json, verbose=verbose)
        except ParseError as exc:
            raise RuntimeError(f"Failed to parse {source}: {exc}") from exc
        if check:
            if normalized != text:
                changed += 1
                print(f"Would reformat {source}")
            continue
        suffix = ".json" if as_json else SUFFIX
        destination = write_text(output_dir / source.with_suffix(suffix).name, normalized)
        try:
            display_path = destination.relative_to(Path.cwd())
        except ValueError:
            display_path = destination
        print(f"Wrote {display_path}")
    return changed


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    formatter = YiniFormatter(indent_width=args.indent_width, enable_logger=args.verbose)
    try:
        files = collect_inputs(Path(args.input))
        changed = generate(
            files,
            Path(args.output_dir),
            formatter,
            as_json=args.json,
            check=args.check,
            verbose=args.verbose,
        )
    except (RuntimeError, FileError, FileNotFoundError) as exc:
        print(exc, file=sys.stderr)
        return 2
    return 1 if changed else 0


if __name__ == "__main__":
    sys.exit(main())
