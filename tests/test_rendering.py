import os
import tempfile
import unittest
from unittest.mock import patch

from PIL import Image

from time_calculator.core import TimeValue
from time_calculator.rendering import card
from time_calculator.services.errors import RenderError


class TestCard(unittest.TestCase):
    def test_create_card_size_and_background(self):
        img = card.create_card(TimeValue(1, 3, 45), width=400, height=200,
                               colors={'background': [10, 20, 30]})
        self.assertEqual(img.size, (400, 200))
        self.assertEqual(img.mode, 'RGB')
        # Angolo in basso a sinistra: sfondo
        self.assertEqual(img.getpixel((0, 199)), (10, 20, 30))
        # Angolo in alto: header con colore primario di default
        self.assertEqual(img.getpixel((0, 0)), card.COLOR_ORANGE)

    def test_save_card_creates_png(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'nested', 'total.png')
            self.assertEqual(card.save_card(TimeValue(0, 31, 1), path, width=300, height=150), path)
            with Image.open(path) as img:
                self.assertEqual(img.format, 'PNG')
                self.assertEqual(img.size, (300, 150))

    def test_save_card_wraps_errors(self):
        with patch.object(card, 'create_card', side_effect=OSError("disk full")):
            with self.assertRaises(RenderError):
                card.save_card(TimeValue(), os.path.join(tempfile.gettempdir(), 'x.png'))

    def test_save_card_wraps_type_errors(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(RenderError):
                card.save_card(TimeValue(), os.path.join(tmp, 'x.png'), colors={'primary': 'red'})


if __name__ == "__main__":
    unittest.main()
