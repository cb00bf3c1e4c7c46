"""Static import boundary guard for the layered package."""

from __future__ import annotations

import argparse
import ast
from dataclasses import dataclass
from pathlib import Path

PACKAGE = "tripgen"
DEFAULT_ROOT = Path(__file__).resolve().parents[1] / PACKAGE

KNOWN_LAYERS = {
    "adapters",
    "api",
    "application",
    "config",
    "domain",
    "infrastructure",
    "persistence",
    "services",
}
FORBIDDEN_IMPORTS = {
    ("domain", "adapters"): "domain layer must not import adapters",
    ("domain", "api"): "domain layer must not import api layer",
    ("domain", "application"): "domain layer must not import application layer",
    ("domain", "config"): "domain layer must not read runtime configuration",
    ("domain", "infrastructure"): "domain layer must not import infrastructure layer",
    ("domain", "persistence"): "domain layer must not import persistence layer",
    ("domain", "services"): "domain layer must not import service layer",
    ("persistence", "api"): "persistence layer must not import api layer",
    ("services", "api"): "service layer must not import api layer",
}


@dataclass(frozen=True)
class ImportRecord:
    source_file: Path
    source_module: str
    source_layer: str | None
    target_module: str
    target_layer: str | None
    lineno: int


def _module_from_path(path: Path, root: Path) -> str:
    parts = [root.name, *path.relative_to(root).with_suffix("").parts]
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def _layer_from_module(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != PACKAGE:
        return None
    return parts[1] if parts[1] in KNOWN_LAYERS else None


def _target_modules(node: ast.stmt) -> list[str]:
    if isinstance(node, ast.Import):
        return [alias.name for alias in node.names]
    if isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
        return [node.module]
    return []


def collect_import_records(root: str | Path = DEFAULT_ROOT) -> list[ImportRecord]:
    root_path = Path(root)
    records: list[ImportRecord] = []

    for path in sorted(root_path.rglob("*.py")):
        if "__pycache__" in path.parts:
            continue
        try:
            tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
        except (OSError, SyntaxError):
            continue

        source_module = _module_from_path(path, root_path)
        source_layer = _layer_from_module(source_module)
        for node in ast.walk(tree):
            for target in _target_modules(node):
                if not target.startswith(f"{PACKAGE}."):
                    continue
                records.append(
                    ImportRecord(
                        source_file=path,
                        source_module=source_module,
                        source_layer=source_layer,
                        target_module=target,
                        target_layer=_layer_from_module(target),
                        lineno=getattr(node, "lineno", 1),
                    )
                )
    return records


def check_import_boundaries(root: str | Path = DEFAULT_ROOT) -> list[str]:
    violations: list[str] = []
    for rec in collect_import_records(root):
        rule = FORBIDDEN_IMPORTS.get((rec.source_layer, rec.target_layer))
        if rule:
            violations.append(
                f"{rec.source_file.as_posix()}:{rec.lineno} "
                f"{rec.source_module} -> {rec.target_module}: {rule}"
            )
    return sorted(set(violations))


def main() -> int:
    parser = argparse.ArgumentParser(description="Check architecture import boundaries")
    parser.add_argument("--root", default=str(DEFAULT_ROOT), help="Package directory to scan")
    args = parser.parse_args()

    violations = check_import_boundaries(args.root)
    if violations:
        print("Import boundary violations:")
        for line in violations:
            print(f"- {line}")
        return 1

    print("Import boundary check passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
