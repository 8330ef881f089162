# Import necessary modules
import pathlib
import subprocess
import sys

import kvdict

ROOT = pathlib.Path(__file__).resolve().parent.parent


def test_setup_reports_package_version():
    # setup.py must not need the package's own dependencies to get its version
    result = subprocess.run(
        [sys.executable, "setup.py", "--version"],
        cwd=ROOT,
        capture_output=True,
        text=True,
        check=True,
    )

    assert result.stdout.strip().splitlines()[-1] == kvdict.__version__


def test_version_string():
    assert kvdict.version == kvdict.__version__ == "0.1.0"
