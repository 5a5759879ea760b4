import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from healthagg.registry import load_registry, to_targets
from healthagg.results import Target


def _write(td: str, text: str) -> Path:
    path = Path(td) / "targets.yml"
    path.write_text(text)
    return path


class RegistryTests(unittest.TestCase):
    def test_loads_targets_and_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = _write(
                td,
                "defaults:\n"
                "  timeout_s: 5\n"
                "  connect_timeout_s: 1.5\n"
                "targets:\n"
                "  - url: http://db.local/health\n"
                "  - url: http://cache.local/health\n",
            )
            reg = load_registry(path)

        self.assertEqual(reg.defaults.timeout_s, 5)
        self.assertEqual(reg.defaults.connect_timeout_s, 1.5)
        self.assertEqual(
            to_targets(reg),
            [Target("http://db.local/health"), Target("http://cache.local/health")],
        )

    def test_empty_file_has_no_targets(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            reg = load_registry(_write(td, ""))

        self.assertEqual(reg.targets, [])
        self.assertEqual(reg.defaults.timeout_s, 3)

    def test_duplicate_urls_are_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = _write(
                td,
                "targets:\n"
                "  - url: http://db.local/health\n"
                "  - url: http://db.local/health\n",
            )
            with self.assertRaises(ValueError):
                load_registry(path)

    def test_invalid_url_fails_validation(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = _write(td, "targets:\n  - url: not-a-url\n")
            with self.assertRaises(ValidationError):
                load_registry(path)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertRaises(FileNotFoundError):
                load_registry(Path(td) / "nope.yml")


if __name__ == "__main__":
    unittest.main()
