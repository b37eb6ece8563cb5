#!/usr/bin/env python3
"""
Unified palette analysis.

Names a color, builds its 10-step tonal ramp and renders the result as a
prose report or an HTML page. Three stages: Classification → Synthesis → Render
"""

import argparse
import json
import logging
import sys
from html import escape
from pathlib import Path

from color_conversions import InvalidColorFormat
from color_palette import ColorPalette, WCAGLevel, generate_color_palette
from color_random import generate_random_colors

logger = logging.getLogger(__name__)


# =============================================================================
# Render
# =============================================================================

def format_step(step) -> str:
    """One report line for a palette step."""
    marker = "*" if step.is_chosen_color else " "
    return (f"{marker} {step.step:>3}  {step.hex}  "
            f"White {step.contrast_white:4.1f}:1 ({step.wcag_white.value}) | "
            f"Dark {step.contrast_dark:4.1f}:1 ({step.wcag_dark.value})")


def render(palette: ColorPalette) -> str:
    """Render a palette as prose."""
    classification = palette.classification
    hsl = classification.hsl
    lines = []

    # Header
    lines.append(f"PALETTE: {palette.name} ({palette.token_name})")
    lines.append(f"Base: {palette.chosen.hex} | HSL: ({hsl.h:.0f}, {hsl.s:.0f}, {hsl.l:.0f}) | "
                 f"Chosen step: {palette.chosen_step}")
    lines.append(f"Tone: {classification.tone} | Hue group: {classification.hue_group}")
    lines.append("")

    # Steps section
    lines.append("STEPS:")
    lines.append("")
    for step in palette.steps:
        lines.append(format_step(step))
    lines.append("")

    # Accessibility summary
    lines.append("ACCESSIBILITY:")
    lines.append("")
    on_white = [str(s.step) for s in palette.steps if s.wcag_white != WCAGLevel.FAIL]
    on_dark = [str(s.step) for s in palette.steps if s.wcag_dark != WCAGLevel.FAIL]
    lines.append(f"  Readable with white text: {', '.join(on_white) or 'none'}")
    lines.append(f"  Readable with dark text: {', '.join(on_dark) or 'none'}")

    return "\n".join(lines)


def render_html(palette: ColorPalette) -> str:
    """Render a palette as a standalone HTML page."""
    classification = palette.classification
    hsl = classification.hsl
    safe_name = escape(palette.name)

    css = """
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body {
            font-family: system-ui, -apple-system, sans-serif;
            background: #f5f5f5;
            color: #333;
            line-height: 1.5;
            padding: 2rem;
            max-width: 900px;
            margin: 0 auto;
        }
        h1 { font-size: 1.5rem; margin-bottom: 0.5rem; }
        h2 { font-size: 1.2rem; margin: 2rem 0 1rem; border-bottom: 1px solid #ddd; padding-bottom: 0.5rem; }
        .meta { color: #666; font-size: 0.9rem; margin-bottom: 1rem; }
        .palette-strip {
            display: flex;
            height: 80px;
            border-radius: 8px;
            overflow: hidden;
            box-shadow: 0 2px 8px rgba(0,0,0,0.1);
            margin: 1.5rem 0;
        }
        .palette-strip .swatch {
            flex: 1;
            display: flex;
            align-items: flex-end;
            justify-content: center;
            padding: 0.5rem;
            font-size: 0.7rem;
            font-weight: 500;
        }
        .palette-strip .chosen { box-shadow: inset 0 0 0 3px currentColor; }
        .step-card {
            background: #fff;
            border-radius: 8px;
            padding: 1rem;
            margin-bottom: 1rem;
            box-shadow: 0 1px 3px rgba(0,0,0,0.08);
            display: grid;
            grid-template-columns: 60px 1fr;
            gap: 1rem;
        }
        .step-card .swatch {
            width: 60px;
            height: 60px;
            border-radius: 6px;
            display: flex;
            align-items: center;
            justify-content: center;
            font-size: 0.65rem;
            font-weight: 600;
        }
        .step-card .info { font-size: 0.85rem; }
        .step-card .label { font-weight: 600; }
        .step-card .values { font-family: monospace; color: #555; font-size: 0.8rem; }
        .contrast-badge {
            display: inline-block;
            padding: 0.15rem 0.4rem;
            border-radius: 4px;
            font-size: 0.75rem;
            font-weight: 600;
            margin-left: 0.5rem;
        }
        .badge-aaa { background: #22c55e; color: #fff; }
        .badge-aa { background: #3b82f6; color: #fff; }
        .badge-fail { background: #ef4444; color: #fff; }
    """

    badge_class = {
        WCAGLevel.AAA: 'badge-aaa',
        WCAGLevel.AA: 'badge-aa',
        WCAGLevel.FAIL: 'badge-fail',
    }

    lines = [
        '<!DOCTYPE html>',
        '<html lang="en">',
        '<head>',
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1.0">',
        f'  <title>Palette: {safe_name}</title>',
        f'  <style>{css}</style>',
        '</head>',
        '<body>',
    ]

    # Header
    lines.append(f'<h1>{safe_name}</h1>')
    lines.append(f'<p class="meta">Token: <code>{escape(palette.token_name)}</code></p>')
    lines.append(f'<p class="meta">Base: {palette.chosen.hex} · '
                 f'HSL({hsl.h:.0f}, {hsl.s:.0f}%, {hsl.l:.0f}%) · '
                 f'Tone: {escape(classification.tone)} · Hue group: {escape(classification.hue_group)} · '
                 f'Chosen step: {palette.chosen_step}</p>')

    # Palette strip
    lines.append('<div class="palette-strip">')
    for step in palette.steps:
        chosen = ' chosen' if step.is_chosen_color else ''
        lines.append(f'  <div class="swatch{chosen}" style="background:{step.hex}; color:{step.text_color}">'
                     f'{step.step}</div>')
    lines.append('</div>')

    # Step details
    lines.append('<h2>Steps</h2>')
    for step in palette.steps:
        lines.append('<div class="step-card">')
        lines.append(f'  <div class="swatch" style="background:{step.hex}; color:{step.text_color}">{step.step}</div>')
        lines.append('  <div class="info">')
        chosen_note = ' (your color)' if step.is_chosen_color else ''
        lines.append(f'    <span class="label">{step.step}{chosen_note}</span> <span class="values">{step.hex}</span>')
        lines.append(f'    <div class="values">On white: {step.contrast_white:.2f}:1'
                     f'<span class="contrast-badge {badge_class[step.wcag_white]}">{step.wcag_white.value}</span></div>')
        lines.append(f'    <div class="values">On dark: {step.contrast_dark:.2f}:1'
                     f'<span class="contrast-badge {badge_class[step.wcag_dark]}">{step.wcag_dark.value}</span></div>')
        lines.append('  </div>')
        lines.append('</div>')

    lines.append('</body>')
    lines.append('</html>')

    return '\n'.join(lines)


# =============================================================================
# Main Pipeline
# =============================================================================

def analyze_color(hex_color: str) -> tuple[str, str]:
    """Run the full pipeline on a color.

    Returns:
        Tuple of (prose_output, html_output)

    Raises:
        InvalidColorFormat: If hex_color is malformed
    """
    palette = generate_color_palette(hex_color)
    return render(palette), render_html(palette)


def default_output_path(palette: ColorPalette) -> Path:
    """Auto-name an HTML report from the palette token and base color."""
    return Path(f"{palette.token_name}-{palette.chosen.hex.lstrip('#')}-palette.html")


# =============================================================================
# CLI
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Name a color and generate its 10-step tonal palette.'
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        '--color', '-c',
        help='Base color as #RGB or #RRGGBB'
    )
    source.add_argument(
        '--random',
        action='store_true',
        help='Use a random pleasant color'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for --random (only valid with --random)'
    )
    parser.add_argument(
        '--output', '-o',
        nargs='?',
        const=True,
        default=None,
        help='Write HTML report. Optionally specify path, otherwise auto-names from the palette.'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print the palette as JSON instead of prose'
    )
    parser.add_argument(
        '--swatch',
        default=None,
        help='Write a PNG swatch strip to this path'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable debug logging'
    )
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None and not args.random:
        parser.error("--seed requires --random")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    color = args.color
    if args.random:
        color = generate_random_colors(1, seed=args.seed)[0]
        logger.info("Random color: %s", color)

    try:
        palette = generate_color_palette(color)
    except InvalidColorFormat as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(palette.to_dict(), indent=2))
    else:
        print(render(palette))

    if args.output:
        output_path = default_output_path(palette) if args.output is True else Path(args.output)
        try:
            output_path.write_text(render_html(palette))
            print(f"\nWrote: {output_path}", file=sys.stderr if args.json else sys.stdout)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1

    if args.swatch:
        from visualize import visualize_palette

        try:
            visualize_palette(palette, args.swatch)
            print(f"Wrote: {args.swatch}", file=sys.stderr if args.json else sys.stdout)
        except (OSError, ValueError) as e:
            print(f"Error writing swatch: {e}", file=sys.stderr)
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
