from __future__ import annotations

import nox

nox.options.default_venv_backend = "uv|virtualenv"
nox.options.reuse_existing_virtualenvs = True

PY311 = "3.11"
PY312 = "3.12"
PY313 = "3.13"
PY_VERSIONS = [PY311, PY312, PY313]
PY_DEFAULT = PY_VERSIONS[0]
PY_LATEST = PY_VERSIONS[-1]

DJ42 = "4.2"
DJ51 = "5.1"
DJ52 = "5.2"
DJ_VERSIONS = [DJ42, DJ51, DJ52]
DJ_DEFAULT = DJ_VERSIONS[0]


@nox.session
def test(session):
    session.notify(f"tests(python='{PY_DEFAULT}', django='{DJ_DEFAULT}')")


@nox.session
@nox.parametrize(
    "python,django",
    [(python, django) for python in PY_VERSIONS for django in DJ_VERSIONS],
)
def tests(session, django):
    session.install("-e", ".[test]")
    session.install(f"django~={django}.0")

    command = ["pytest"]
    if session.posargs:
        args = []
        for arg in session.posargs:
            if arg:
                args.extend(arg.split(" "))
        command.extend(args)
    session.run(*command)


@nox.session(python=PY_LATEST)
def render(session):
    """Render a template from the command line: `nox -s render -- tpl data`."""
    session.install("-e", ".")
    session.run("python", "-m", "minitemplate", *session.posargs)
