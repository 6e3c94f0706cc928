import os

import nox  # type:ignore[import-not-found]

nox.options.default_venv_backend = "conda"
nox.options.sessions = ["test", "typecheck"]
os.environ.update({"PDM_IGNORE_SAVED_PYTHON": "1"})

PYTHON_VERSIONS = ["3.10", "3.11", "3.12"]
MIN_COVERAGE = 90


def _pdm_sync(session: nox.Session, group: str, *extra: str) -> None:
    # pdm prefers VIRTUAL_ENV over CONDA_PREFIX, nox leaves it set
    session.env.pop("VIRTUAL_ENV", None)
    session.run_always("pdm", "sync", "-dG", group, "-q", *extra, external=True)


@nox.session(python=PYTHON_VERSIONS)
def test(session: nox.Session) -> None:
    _pdm_sync(session, "test", "--no-editable")
    session.run(
        "pytest",
        "--cov=gqlargs",
        "--cov-report=term-missing",
        f"--cov-fail-under={MIN_COVERAGE}",
        *(session.posargs or ["tests/"]),
    )


@nox.session(python=PYTHON_VERSIONS[0])
def typecheck(session: nox.Session) -> None:
    _pdm_sync(session, "lint")
    session.run("mypy")


@nox.session(python=PYTHON_VERSIONS[0])
def lint(session: nox.Session) -> None:
    _pdm_sync(session, "lint", "--no-self")
    session.run("pre-commit", "run", "--all-files", external=True)
