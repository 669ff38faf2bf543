from __future__ import annotations

import ast
from pathlib import Path


ROOT = Path(__file__).resolve().parents[1]


def _line_count(path: Path) -> int:
    return len(path.read_text(encoding="utf-8", errors="ignore").splitlines())


def _python_files(root: Path):
    for path in root.rglob("*.py"):
        # Keep architecture checks focused on source/test code, not packaged artifacts.
        if any(part in {"dist", "build", "site-packages", "venv"} or part.startswith(".") for part in path.relative_to(root).parts):
            continue
        yield path


def _imported_modules(path: Path):
    tree = ast.parse(path.read_text(encoding="utf-8", errors="ignore"))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield alias.name
        elif isinstance(node, ast.ImportFrom) and node.level == 0:
            yield node.module or ""


def _matches(name: str, package: str) -> bool:
    return name == package or name.startswith(package + ".")


def test_no_python_module_exceeds_hard_line_limit():
    offenders = []
    for path in _python_files(ROOT):
        lines = _line_count(path)
        if lines > 1200:
            offenders.append((str(path.relative_to(ROOT)), lines))
    assert not offenders, f"Modules exceed hard 1200-line limit: {offenders}"


def test_core_layer_does_not_import_infra_layer():
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core"):
        for name in _imported_modules(path):
            if _matches(name, "infra"):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Core layer imports infra layer: {violations}"


def test_scheduling_engine_has_no_io_dependencies():
    banned = ("openpyxl", "infra", "core.reporting", "os", "pathlib")
    violations: list[tuple[str, str]] = []
    for path in _python_files(ROOT / "core" / "services" / "scheduling"):
        for name in _imported_modules(path):
            if any(_matches(name, pkg) for pkg in banned):
                violations.append((str(path.relative_to(ROOT)), name))

    assert not violations, f"Scheduling engine reaches for I/O: {violations}"
