#!/usr/bin/env python3
"""Check hostaddr layer import rules.

Rules:
- domain/ may import the standard library and other domain modules only.
  No third-party packages (pyasn1, structlog, ...) and no other hostaddr
  layer.
- application/ may import hostaddr.domain and hostaddr.config, plus any
  third-party package.
- infrastructure/ may import hostaddr.domain, hostaddr.application and
  hostaddr.config, plus any third-party package.

bootstrap/ and config/ are composition and settings modules; files there
are not checked.

Usage:
    python scripts/check_imports.py [package_directory]

Exit codes:
    0: No violations found
    1: Violations found
"""
import ast
import sys
from collections.abc import Iterator
from pathlib import Path

PACKAGE_NAME = "hostaddr"

# First-party packages each checked layer may reach, besides itself
ALLOWED_PACKAGES: dict[str, frozenset[str]] = {
    "domain": frozenset(),
    "application": frozenset({"domain", "config"}),
    "infrastructure": frozenset({"domain", "application", "config"}),
}

# Layers restricted to the standard library for everything outside hostaddr
STDLIB_ONLY_LAYERS: frozenset[str] = frozenset({"domain"})

STDLIB_MODULES: frozenset[str] = frozenset(sys.stdlib_module_names) | {"__future__"}

Violation = tuple[str, int, str]


def imported_modules(node: ast.Import | ast.ImportFrom) -> Iterator[str]:
    """Yield the absolute module names an import statement pulls in.

    Relative imports stay inside the importing package and yield nothing.
    """
    if isinstance(node, ast.ImportFrom):
        if node.level == 0 and node.module:
            yield node.module
        return
    for alias in node.names:
        yield alias.name


def layer_of(py_file: Path, package_dir: Path) -> str | None:
    """Return the checked layer a file belongs to, or None."""
    try:
        parts = py_file.relative_to(package_dir).parts
    except ValueError:
        return None
    if len(parts) < 2:
        return None
    return parts[0] if parts[0] in ALLOWED_PACKAGES else None


def classify_import(module: str, layer: str) -> str | None:
    """Return a violation message for one imported module, or None."""
    top, _, rest = module.partition(".")

    if top == PACKAGE_NAME:
        target = rest.split(".")[0]
        if not target or target == layer:
            return None
        if target not in ALLOWED_PACKAGES[layer]:
            return f"{layer} layer cannot import from {target}"
        return None

    if layer in STDLIB_ONLY_LAYERS and top not in STDLIB_MODULES:
        return f"{layer} layer may only import the standard library, not {top}"
    return None


def check_file_imports(py_file: Path, package_dir: Path) -> list[Violation]:
    """Check a single file.

    Returns:
        List of (file_path, line_number, violation_message) tuples
    """
    layer = layer_of(py_file, package_dir)
    if layer is None:
        return []

    try:
        tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
    except (SyntaxError, UnicodeDecodeError) as e:
        print(f"Warning: Could not parse {py_file}: {e}", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for node in ast.walk(tree):
        if not isinstance(node, (ast.Import, ast.ImportFrom)):
            continue
        for module in imported_modules(node):
            message = classify_import(module, layer)
            if message:
                violations.append((str(py_file), node.lineno, message))
    return violations


def check_import_boundaries(package_dir: Path) -> list[Violation]:
    """Check every Python file under the package directory."""
    if not package_dir.is_dir():
        print(f"Error: Package directory '{package_dir}' does not exist", file=sys.stderr)
        return []

    violations: list[Violation] = []
    for py_file in sorted(package_dir.rglob("*.py")):
        violations.extend(check_file_imports(py_file, package_dir))
    return violations


def format_violations(violations: list[Violation]) -> str:
    """Format violations for human-readable output."""
    if not violations:
        return ""
    lines = ["Import boundary violations found:", ""]
    lines.extend(f"  {path}:{line}: {message}" for path, line, message in sorted(violations))
    lines.extend(["", f"Total: {len(violations)} violation(s)"])
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        0 if no violations, 1 if violations found
    """
    if len(sys.argv) > 1:
        package_dir = Path(sys.argv[1])
    else:
        package_dir = Path(__file__).parent.parent / PACKAGE_NAME

    violations = check_import_boundaries(package_dir)
    if violations:
        print(format_violations(violations))
        return 1
    print("No import boundary violations found.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
