"""
Result card renderer: draws the accumulated time onto a PNG image.
"""
from __future__ import annotations

import logging
import os
from typing import Dict, Optional, Sequence

from PIL import Image, ImageDraw, ImageFont

from time_calculator.core import TimeValue, format_time, total_seconds
from time_calculator.services.errors import RenderError


logger = logging.getLogger(__name__)

# Colori di default
COLOR_ORANGE = (242, 101, 34)
COLOR_BEIGE = (235, 213, 197)
COLOR_WHITE = (255, 255, 255)

# Font di sistema provati in ordine prima del fallback di PIL
FONT_CANDIDATES = (
    "DejaVuSans-Bold.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
)


def _load_font(size: int):
    for candidate in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(candidate, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


def _resolve_colors(colors: Optional[Dict[str, Sequence[int]]]) -> Dict[str, tuple]:
    """Convert configured color lists to tuples, filling gaps with defaults."""
    colors = colors or {}
    return {
        'primary': tuple(colors.get('primary', COLOR_ORANGE)),
        'background': tuple(colors.get('background', COLOR_BEIGE)),
        'text': tuple(colors.get('text', COLOR_WHITE)),
    }


def _draw_centered(draw, text, font, center_x, center_y, fill):
    bbox = draw.textbbox((0, 0), text, font=font)
    tw = bbox[2] - bbox[0]
    th = bbox[3] - bbox[1]
    draw.text((int(center_x - tw / 2 - bbox[0]), int(center_y - th / 2 - bbox[1])), text, font=font, fill=fill)


def create_card(time: TimeValue, width: int = 800, height: int = 400,
                colors: Optional[Dict[str, Sequence[int]]] = None,
                title: str = "Total time") -> Image.Image:
    """
    Crea l'immagine del risultato

    Args:
        time: Tempo da mostrare (normalizzato con ``format_time``)
        width, height: Dimensioni dell'immagine
        colors: Dizionario con i colori 'primary', 'background', 'text'
        title: Testo dell'intestazione

    Returns:
        Immagine RGB
    """
    palette = _resolve_colors(colors)
    img = Image.new('RGB', (width, height), palette['background'])
    draw = ImageDraw.Draw(img)

    # Header con il titolo
    header_height = int(height * 0.22)
    draw.rectangle([0, 0, width, header_height], fill=palette['primary'])
    _draw_centered(draw, title, _load_font(max(int(header_height * 0.45), 10)),
                   width / 2, header_height / 2, palette['text'])

    # Corpo: tempo grande e totale in secondi sotto
    body_top = header_height
    body_height = height - header_height
    _draw_centered(draw, format_time(time), _load_font(max(int(body_height * 0.38), 12)),
                   width / 2, body_top + body_height * 0.42, palette['primary'])
    _draw_centered(draw, f"{total_seconds(time)} s", _load_font(max(int(body_height * 0.12), 10)),
                   width / 2, body_top + body_height * 0.80, palette['primary'])
    return img


def save_card(time: TimeValue, output_path: str, **kwargs) -> str:
    """Render the card for ``time`` and save it to ``output_path``.

    Extra keyword arguments go to ``create_card``. Returns ``output_path``;
    raises ``RenderError`` if drawing or saving fails.
    """
    logger.info("Rendering card %s -> %s", format_time(time), output_path)
    try:
        img = create_card(time, **kwargs)
        parent = os.path.dirname(output_path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        img.save(output_path)
    except (OSError, ValueError, TypeError) as e:
        logger.error("Failed to render card to %s: %s", output_path, e)
        raise RenderError(str(e)) from e
    logger.debug("Card saved to %s (%dx%d)", output_path, img.width, img.height)
    return output_path
