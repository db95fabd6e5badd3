from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_source_files(base: Path) -> list[Path]:
    """Python files under ``base``, excluding tests and caches."""
    root = package_root()
    files: list[Path] = []
    for path in sorted(base.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts and rel.parts[0] == "test":
            continue
        if any(part == "__pycache__" or part.startswith(".") for part in rel.parts):
            continue
        files.append(path)
    return files


def parse_imports(path: Path) -> list[ImportRef]:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    imports: list[ImportRef] = []

    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                imports.append(ImportRef(module=alias.name, line=node.lineno))
            continue

        if isinstance(node, ast.ImportFrom):
            if node.level and node.level > 0:
                continue
            if node.module is None:
                continue
            imports.append(ImportRef(module=node.module, line=node.lineno))

    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")


def find_offenders(base: Path, prefix: str, allowlist: set[str] | None = None) -> list[str]:
    """Report imports of ``prefix`` from files under ``base`` not in ``allowlist``."""
    root = package_root()
    allowed = allowlist or set()
    offenders: list[str] = []
    for file_path in iter_source_files(base):
        rel = file_path.relative_to(root)
        if rel.as_posix() in allowed:
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, prefix):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")
    return offenders
