"""Pre-release consistency checks for devtext.

Every name exported from ``devtext.__all__`` must be used by the test suite,
every ``devtext`` sub-command needs a README example and a CLI test, and the
packaging metadata must expose the console script and the ``test`` extra.

    python scripts/release_check.py [--root PATH] [--no-tests]
"""

from __future__ import annotations

import argparse
import ast
import re
import subprocess
import sys
import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
PACKAGE_DIR = Path("src") / "devtext"
CONSOLE_SCRIPT = "devtext.cli:main"
TEST_REQUIREMENTS = frozenset({"pytest", "pytest-cov"})

_REQUIREMENT_NAME_RE = re.compile(r"^\s*([A-Za-z0-9][A-Za-z0-9._-]*)")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check that devtext is ready to release.")
    parser.add_argument("--root", type=Path, default=ROOT, help="Repository root (default: this checkout).")
    parser.add_argument("--no-tests", dest="tests", action="store_false", help="Skip the pytest run.")
    args = parser.parse_args(argv)

    problems = check_public_api(args.root) + check_subcommands(args.root) + check_packaging(args.root)
    if args.tests and not problems:
        problems += run_tests(args.root)

    for problem in problems:
        print(f"[fail] {problem}")
    if problems:
        return 1
    print("[ok] devtext is ready to release")
    return 0


def public_names(root: Path) -> list[str]:
    """Return the names listed in ``devtext.__all__``."""

    tree = ast.parse((root / PACKAGE_DIR / "__init__.py").read_text(encoding="utf-8"))
    for node in tree.body:
        if isinstance(node, ast.Assign) and any(
            isinstance(target, ast.Name) and target.id == "__all__" for target in node.targets
        ):
            return list(ast.literal_eval(node.value))
    return []


def subcommands(root: Path) -> list[str]:
    """Return the sub-command names registered with ``add_parser`` in ``cli.py``."""

    tree = ast.parse((root / PACKAGE_DIR / "cli.py").read_text(encoding="utf-8"))
    names = []
    for node in ast.walk(tree):
        if (
            isinstance(node, ast.Call)
            and isinstance(node.func, ast.Attribute)
            and node.func.attr == "add_parser"
            and node.args
            and isinstance(node.args[0], ast.Constant)
        ):
            names.append(node.args[0].value)
    return names


def check_public_api(root: Path) -> list[str]:
    names = public_names(root)
    if not names:
        return [f"{PACKAGE_DIR / '__init__.py'} defines no __all__"]
    tests = _read_all(root, "tests/test_*.py")
    return [
        f"public name {name!r} is not used by any test"
        for name in names
        if not re.search(rf"\b{re.escape(name)}\b", tests)
    ]


def check_subcommands(root: Path) -> list[str]:
    readme_path = root / "README.md"
    if not readme_path.exists():
        return ["README.md is missing"]
    readme = readme_path.read_text(encoding="utf-8")
    cli_tests = _read_all(root, "tests/test_cli*.py")

    problems = []
    for name in subcommands(root):
        if f"devtext {name}" not in readme:
            problems.append(f"README.md has no 'devtext {name}' example")
        if f'"{name}"' not in cli_tests:
            problems.append(f"sub-command {name!r} is not exercised by the CLI tests")
    return problems


def check_packaging(root: Path) -> list[str]:
    path = root / "pyproject.toml"
    if not path.exists():
        return ["pyproject.toml is missing"]
    project = tomllib.loads(path.read_text(encoding="utf-8")).get("project", {})

    problems = []
    if project.get("scripts", {}).get("devtext") != CONSOLE_SCRIPT:
        problems.append(f"pyproject.toml must map the 'devtext' script to {CONSOLE_SCRIPT}")
    declared = set()
    for requirement in project.get("optional-dependencies", {}).get("test", []):
        found = _REQUIREMENT_NAME_RE.match(requirement)
        if found:
            declared.add(found.group(1).lower())
    for name in sorted(TEST_REQUIREMENTS - declared):
        problems.append(f"pyproject.toml test extra does not declare {name}")
    return problems


def run_tests(root: Path) -> list[str]:
    print("[info] running pytest")
    result = subprocess.run([sys.executable, "-m", "pytest", "-q"], cwd=root, check=False)
    return [] if result.returncode == 0 else [f"pytest exited with status {result.returncode}"]


def _read_all(root: Path, pattern: str) -> str:
    return "\n".join(path.read_text(encoding="utf-8") for path in sorted(root.glob(pattern)))


if __name__ == "__main__":
    raise SystemExit(main())
