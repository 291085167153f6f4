import io
import os
import tempfile
import unittest
from unittest.mock import patch

from time_calculator.services import collector
from time_calculator.services.errors import InputReadError


class TestReadLines(unittest.TestCase):
    def test_read_file(self):
        with tempfile.NamedTemporaryFile('w', suffix='.txt', delete=False, encoding='utf-8') as f:
            f.write("1:03:45\r\n0:59:59\n")
            path = f.name
        try:
            self.assertEqual(collector.read_lines(path), ["1:03:45", "0:59:59"])
        finally:
            os.unlink(path)

    def test_missing_file_raises_typed_error(self):
        with self.assertRaises(InputReadError):
            collector.read_lines(os.path.join(tempfile.gettempdir(), "does-not-exist-tc.txt"))

    @patch('sys.stdin', io.StringIO("1,1,1\n0,-30,0\n"))
    def test_dash_reads_stdin(self):
        self.assertEqual(collector.read_lines('-'), ["1,1,1", "0,-30,0"])

    @patch('sys.stdin', io.TextIOWrapper(io.BytesIO(b"0:1:0\n\xff\xfe\n"), encoding='utf-8'))
    def test_undecodable_stdin_raises_typed_error(self):
        with self.assertRaises(InputReadError) as ctx:
            collector.read_lines('-')
        self.assertIn("<stdin>", str(ctx.exception))


class TestPromptLines(unittest.TestCase):
    def test_stops_at_empty_line(self):
        answers = iter(["1:0:0", "0:30:0", "", "ignored"])
        self.assertEqual(collector.prompt_lines(lambda _: next(answers)), ["1:0:0", "0:30:0"])

    def test_stops_at_eof(self):
        answers = iter(["0:0:1"])

        def fake_input(_):
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        self.assertEqual(collector.prompt_lines(fake_input), ["0:0:1"])

    def test_keyboard_interrupt_propagates(self):
        def fake_input(_):
            raise KeyboardInterrupt

        with self.assertRaises(KeyboardInterrupt):
            collector.prompt_lines(fake_input)


if __name__ == "__main__":
    unittest.main()
