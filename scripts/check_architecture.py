#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/office2pdf"

COM_IMPORTS = [
    "import pythoncom",
    "import pywintypes",
    "import win32com",
    "from win32com",
]


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    _assert_no_imports(PACKAGE / "cli/cli.py", COM_IMPORTS)

    for path in (PACKAGE / "application").glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", *COM_IMPORTS])

    # pywin32 is only touched by the COM host adapters.
    hosts = PACKAGE / "adapters/hosts.py"
    for path in PACKAGE.rglob("*.py"):
        if path != hosts:
            _assert_no_imports(path, COM_IMPORTS)

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
