import io
import sys
from pathlib import Path
import unittest
from unittest import mock

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

import pseudo_random.__main__ as runtime_main


class MainEntryTests(unittest.TestCase):
    def _run(self, *argv: str) -> tuple[int, str, str]:
        stdout = io.StringIO()
        stderr = io.StringIO()
        with mock.patch.object(runtime_main, "load_dotenv") as dotenv_mock, mock.patch("sys.stdout", stdout), mock.patch(
            "sys.stderr", stderr
        ):
            code = runtime_main.main(list(argv))
        dotenv_mock.assert_called_once()
        return code, stdout.getvalue(), stderr.getvalue()

    def test_seed_of_json_value(self) -> None:
        code, out, _ = self._run("seed", '{"b": 2, "a": 1}')
        self.assertEqual(0, code)
        self.assertEqual("632171394", out.strip())

    def test_seed_of_null(self) -> None:
        code, out, _ = self._run("seed", "null")
        self.assertEqual(0, code)
        self.assertEqual("694295357", out.strip())

    def test_raw_seed_is_literal_string(self) -> None:
        code, out, _ = self._run("seed", "--raw", "hello")
        self.assertEqual(0, code)
        self.assertEqual("869365218", out.strip())

    def test_invalid_json_reports_error_without_traceback(self) -> None:
        code, out, err = self._run("seed", "{bad")
        self.assertEqual(2, code)
        self.assertEqual("", out)
        self.assertIn("error:", err)
        self.assertIn("--raw", err)
        self.assertNotIn("Traceback", err)

    def test_depth_limit_reports_error(self) -> None:
        code, _, err = self._run("seed", "[[1]]", "--max-depth", "1")
        self.assertEqual(2, code)
        self.assertIn("maximum depth", err)

    def test_hex_output(self) -> None:
        code, out, _ = self._run("hex", "12", "--seed", "42")
        self.assertEqual(0, code)
        self.assertRegex(out.strip(), r"\A[0-9a-f]{12}\Z")

    def test_generated_strings_follow_seed(self) -> None:
        _, first, _ = self._run("alphanumeric", "16", "--seed", "session", "--raw")
        _, second, _ = self._run("alphanumeric", "16", "--seed", "session", "--raw")
        self.assertEqual(first, second)
        self.assertRegex(first.strip(), r"\A[A-Za-z0-9]{16}\Z")

    def test_negative_length_reports_error(self) -> None:
        code, _, err = self._run("alphabetic", "-3")
        self.assertEqual(2, code)
        self.assertIn("non-negative", err)

    def test_rand_with_bound(self) -> None:
        code, out, _ = self._run("rand", "--max", "6", "--seed", "7")
        self.assertEqual(0, code)
        self.assertIn(int(out.strip()), range(6))

    def test_rand_with_bad_bound(self) -> None:
        code, _, err = self._run("rand", "--max", "six")
        self.assertEqual(2, code)
        self.assertIn("error:", err)


if __name__ == "__main__":
    unittest.main()
