#!/usr/bin/env python3
"""Batch analyze colors and write one palette report per color."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path

from analyze import render_html
from color_palette import generate_color_palette

COMMENT_PREFIX = ';'
FORMATS = ('html', 'json', 'png')


def read_colors(path: Path) -> list[str]:
    """Read colors from a file, one per line; blank lines and ';' comments are skipped."""
    colors = []
    for line in path.read_text().splitlines():
        line = line.split(COMMENT_PREFIX, 1)[0].strip()
        if line:
            colors.append(line)
    return colors


def write_report(palette, output_dir: Path, fmt: str) -> Path:
    """Write a palette in the requested format and return the file path."""
    stem = f"{palette.token_name}-{palette.chosen.hex.lstrip('#')}"
    output_file = output_dir / f"{stem}-palette.{fmt}"
    if output_file.exists():
        print(f"  Warning: Overwriting {output_file.name}", file=sys.stderr)

    if fmt == 'html':
        output_file.write_text(render_html(palette))
    elif fmt == 'json':
        output_file.write_text(json.dumps(palette.to_dict(), indent=2))
    else:
        from visualize import visualize_palette
        visualize_palette(palette, str(output_file))

    return output_file


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Batch generate palettes for a list of colors.'
    )
    parser.add_argument(
        'colors',
        nargs='*',
        help='Colors to analyze (#RGB or #RRGGBB)'
    )
    parser.add_argument(
        '--input', '-i',
        default=None,
        help='File with one color per line'
    )
    parser.add_argument(
        '--output', '-o',
        required=True,
        help='Directory for output files'
    )
    parser.add_argument(
        '--format', '-f',
        choices=FORMATS,
        default='html',
        help='Output format (default: html)'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    colors = list(args.colors)
    if args.input:
        input_file = Path(args.input)
        try:
            colors.extend(read_colors(input_file))
        except OSError as e:
            print(f"Error: Could not read input file {input_file}: {e}", file=sys.stderr)
            return 2

    if not colors:
        print("No colors given", file=sys.stderr)
        return 2

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    total = len(colors)
    succeeded = 0
    failed = []

    batch_start = time.perf_counter()

    for i, color in enumerate(colors, 1):
        try:
            palette = generate_color_palette(color)
            output_file = write_report(palette, output_dir, args.format)
            print(f"[{i}/{total}] {color} → {palette.name} (step {palette.chosen_step}) → {output_file.name}")
            succeeded += 1

        except Exception as e:
            error_msg = f"{type(e).__name__}: {e}"
            print(f"[{i}/{total}] {color} → ERROR: {error_msg}", file=sys.stderr)
            failed.append((color, error_msg))

    batch_elapsed = time.perf_counter() - batch_start

    # Summary
    print()
    print(f"Completed: {succeeded}/{total} succeeded in {batch_elapsed:.2f}s")
    if failed:
        print(f"Failed ({len(failed)}):")
        for color, error in failed:
            print(f"  - {color}: {error}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
