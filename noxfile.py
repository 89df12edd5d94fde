# topmark:header:start
#
#   project      : EDNKit
#   file         : noxfile.py
#   file_relpath : noxfile.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""EDNKit project automation via Nox (using uv-backed virtualenvs).

Sessions:
  - `lint`: Ruff + pydoclint on tracked files.
  - `format_check`: Verify formatting (ruff).
  - `format`: Apply formatting (ruff).
  - `qa`: Per-Python session that runs pytest and pyright.
  - `property_test`: Long-running property tests (opt-in).
  - `package_check`: Build sdist/wheel and validate metadata (twine).

Common invocations:
  - `nox -s lint`
  - `nox -s qa` (runs for all configured Python versions)
"""

from __future__ import annotations

import pathlib
import re
import sys
from typing import Any

import nox

if sys.version_info >= (3, 11):
    import tomllib as toml_reader
else:
    import toml as toml_reader

CURRENT_PYTHON_VERSION: str = f"{sys.version_info[0]}.{sys.version_info[1]}"

_PYTHON_CLASSIFIER = re.compile(r"^Programming Language :: Python :: (\d+)\.(\d+)$")


def get_supported_pythons() -> list[str]:
    """Read the supported ``X.Y`` Python versions from the `pyproject.toml` classifiers.

    Returns:
        list[str]: Versions in ascending order, or just the running interpreter's
            version when no classifier names one.
    """
    text: str = (pathlib.Path(__file__).parent / "pyproject.toml").read_text(encoding="utf-8")
    project: dict[str, Any] = toml_reader.loads(text).get("project", {})

    found: set[tuple[int, int]] = set()
    for classifier in project.get("classifiers", []):
        match = _PYTHON_CLASSIFIER.match(classifier)
        if match:
            found.add((int(match.group(1)), int(match.group(2))))
    return [f"{major}.{minor}" for major, minor in sorted(found)] or [CURRENT_PYTHON_VERSION]


PYTHONS: list[str] = get_supported_pythons()

nox.options.sessions = ["lint", "format_check"]
nox.options.default_venv_backend = "uv"


@nox.session(python=PYTHONS)
def qa(session: nox.Session) -> None:
    """Run tests + pyright (per Python version)."""
    session.install("-r", "requirements-dev.txt")

    session.run("pytest", "-q", "tests", "-m", "not hypothesis_slow", *session.posargs)

    py_ver = session.python
    if not isinstance(py_ver, str) or not py_ver:
        raise RuntimeError(f"Unexpected session.python value: {py_ver!r}")

    session.run("pyright", "--pythonversion", py_ver)


@nox.session
def lint(session: nox.Session) -> None:
    """Static analysis."""
    session.install("-r", "requirements-dev.txt")

    session.run("ruff", "check", ".")

    session.run("pydoclint", "-q", "src/ednkit", "tests")


@nox.session
def format_check(session: nox.Session) -> None:
    """Check code formatting."""
    session.install("-r", "requirements-dev.txt")

    session.run("ruff", "format", "--check", ".")


@nox.session
def format(session: nox.Session) -> None:
    """Format code (auto-fix)."""
    session.install("-r", "requirements-dev.txt")

    session.run("ruff", "format", ".")


@nox.session
def property_test(session: nox.Session) -> None:
    """Run the long-running property tests (developer only)."""
    session.install("-r", "requirements-dev.txt")

    session.run("pytest", "-vv", "-m", "hypothesis_slow", "tests")


@nox.session(python=CURRENT_PYTHON_VERSION)
def package_check(session: nox.Session) -> None:
    """Build sdist/wheel and validate distribution metadata (twine)."""
    session.install("-r", "requirements-dev.txt")

    session.run(
        "python",
        "-c",
        "import shutil; shutil.rmtree('dist', ignore_errors=True)",
    )
    session.run("python", "-m", "build", "--sdist", "--wheel")
    session.run("twine", "check", "dist/*")
