""" Invoke tasks. """
import os
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run('pip install -e ".[test]"')


@task(help={"k": "Only run tests matching this expression", "verbose": "Verbose pytest output"})
def test(c, k=None, verbose=False):
    """Run the pytest suite."""
    args = ["pytest"]
    if verbose:
        args.append("-v")
    if k:
        args.append(f'-k "{k}"')
    c.run(" ".join(args), env={"PYTHONUTF8": "1"}, pty=os.name != "nt")


@task
def compliance(c):
    """Build a fresh facility and print its staffing coverage and compliance gaps."""
    from carehome import FacilityEngine
    from exceptions.custom_errors import ComplianceViolation

    engine = FacilityEngine()
    print(engine.coverage_report().to_string())
    try:
        engine.check_compliance()
    except ComplianceViolation as e:
        for violation in e.violations:
            print(f"- {violation}")


@task
def clean(c):
    """
    Cross-platform clean task to remove all __pycache__ folders, .pyc files and pytest caches.
    """
    if os.name == 'nt':  # Windows
        c.run("for /R %f in (*.pyc) do del /F /Q \"%f\"", warn=True)
        c.run('for /d /r %d in (__pycache__) do @if exist "%d" rmdir /s /q "%d"', warn=True)
        c.run('if exist .pytest_cache rmdir /s /q .pytest_cache', warn=True)
    else:  # Unix/Linux/macOS
        c.run("find . -type f -name '*.pyc' -delete", warn=True)
        c.run("find . -type d -name '__pycache__' -exec rm -r {} +", warn=True)
        c.run("rm -rf .pytest_cache", warn=True)
