#!/usr/bin/env python3
"""
Render a palette as a swatch strip image.
"""

from PIL import Image, ImageDraw

from color_conversions import hex_to_rgb
from color_palette import ColorPalette


SWATCH_SIZE = 80
PADDING = 10
TEXT_HEIGHT = 36
HEADER_HEIGHT = 24
CHOSEN_OUTLINE = 3
BACKGROUND = (240, 240, 240)


def visualize_palette(palette: ColorPalette, output_path: str) -> Image.Image:
    """
    Create a swatch image with one square per step.

    Each swatch shows its step label inside (in the step's readable text
    color) and its hex and white/dark WCAG levels underneath. The step
    holding the input color is outlined.

    Args:
        palette: Palette from generate_color_palette()
        output_path: Path to save the output image

    Returns:
        The rendered image
    """
    cols = len(palette.steps)
    img_width = cols * (SWATCH_SIZE + PADDING) + PADDING
    img_height = HEADER_HEIGHT + SWATCH_SIZE + TEXT_HEIGHT + 2 * PADDING

    img = Image.new('RGB', (img_width, img_height), BACKGROUND)
    draw = ImageDraw.Draw(img)

    draw.text((PADDING, PADDING // 2), f"{palette.name} ({palette.token_name})", fill=(0, 0, 0))

    for i, step in enumerate(palette.steps):
        x = PADDING + i * (SWATCH_SIZE + PADDING)
        y = PADDING + HEADER_HEIGHT

        draw.rectangle([x, y, x + SWATCH_SIZE, y + SWATCH_SIZE], fill=tuple(hex_to_rgb(step.hex)))

        if step.is_chosen_color:
            draw.rectangle(
                [x - CHOSEN_OUTLINE, y - CHOSEN_OUTLINE,
                 x + SWATCH_SIZE + CHOSEN_OUTLINE, y + SWATCH_SIZE + CHOSEN_OUTLINE],
                outline=(0, 0, 0), width=CHOSEN_OUTLINE
            )

        label = str(step.step)
        draw.text((x + 6, y + 6), label, fill=tuple(hex_to_rgb(step.text_color)))

        # Center hex under swatch
        bbox = draw.textbbox((0, 0), step.hex)
        text_width = bbox[2] - bbox[0]
        text_x = x + (SWATCH_SIZE - text_width) // 2
        draw.text((text_x, y + SWATCH_SIZE + 6), step.hex, fill=(0, 0, 0))
        draw.text(
            (x + 2, y + SWATCH_SIZE + 20),
            f"{step.wcag_white.value}/{step.wcag_dark.value}",
            fill=(100, 100, 100)
        )

    img.save(output_path)
    return img
