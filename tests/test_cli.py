from __future__ import annotations

import contextlib
import importlib.util
import io
import unittest

from stackarr.__main__ import main


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


class CommandLineTests(unittest.TestCase):
    def _run(self, *argv: str) -> tuple[int, str]:
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            code = main(list(argv))
        return code, out.getvalue()

    def test_words_are_joined_and_debug_result_printed(self) -> None:
        code, out = self._run("2", "2", "+")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Ok([Atom(Number(4.0))])\n")

        code, out = self._run("[1 2", "3]", ".")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Ok([Array([Atom(Number(1.0)), Atom(Number(2.0)), Atom(Number(3.0))]), Array([Atom(Number(1.0)), Atom(Number(2.0)), Atom(Number(3.0))])])\n")

    def test_errors_print_err_and_exit_nonzero(self) -> None:
        code, out = self._run("+")
        self.assertEqual(code, 1)
        self.assertEqual(out, "Err(StackError(StackEmpty))\n")

    def test_no_words_is_an_empty_program(self) -> None:
        self.assertEqual(self._run(), (0, "Ok([])\n"))

    def test_text_format(self) -> None:
        code, out = self._run("--format", "text", "[1 2]", "3")
        self.assertEqual(code, 0)
        self.assertEqual(out, "3\n[1 2]\n")

        code, out = self._run("--format", "text", "3 1 -")
        self.assertEqual(out, "¯2\n")

    def test_parse_errors_are_logged_as_warnings(self) -> None:
        with self.assertLogs("stackarr", level="WARNING") as logs:
            code, out = self._run("]", "1")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Ok([Atom(Number(1.0))])\n")
        self.assertTrue(any("parse error" in line for line in logs.output))

    def test_dash_words_are_program_source(self) -> None:
        code, out = self._run("5", "3", "1", "--")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Ok([Atom(Number(3.0))])\n")

        code, out = self._run("1", "2", "-.")
        self.assertEqual(code, 0)
        self.assertEqual(out, "Ok([Atom(Number(2.0)), Atom(Number(0.0))])\n")

        code, out = self._run("--format", "text", "1", "2", "-.")
        self.assertEqual(out, "2\n0\n")

        code, out = self._run("--format=text", "--", "5", "3", "1")
        self.assertEqual(out, "3\n")

    def test_options_after_the_first_word_are_source(self) -> None:
        code, out = self._run("1", "--format", "text")
        self.assertEqual(code, 1)
        self.assertEqual(out, "Err(StackError(StackEmpty))\n")

    def test_log_level_is_validated(self) -> None:
        code, out = self._run("--log-level", "debug", "1")
        self.assertEqual(code, 0)

        err = io.StringIO()
        with contextlib.redirect_stderr(err), self.assertRaises(SystemExit) as ctx:
            self._run("--log-level", "loud", "1")
        self.assertEqual(ctx.exception.code, 2)
        self.assertIn("invalid log level", err.getvalue())

    @unittest.skipUnless(JAX_AVAILABLE, "jax is required for the jax output format")
    def test_jax_format(self) -> None:
        code, out = self._run("--format", "jax", "[1 2]")
        self.assertEqual(code, 0)
        self.assertIn("float32", out)

    @unittest.skipUnless(JAX_AVAILABLE, "jax is required for the jax output format")
    def test_jax_format_rejects_ragged_values(self) -> None:
        code, out = self._run("--format", "jax", "[1 [2]]")
        self.assertEqual(code, 1)
        self.assertEqual(out, "Err(ArrayValueError(ShapeMismatch))\n")


if __name__ == "__main__":
    unittest.main()
