"""Global pytest configuration for FAKEKIT.

The `fakekit.pytest_plugin` fixtures (e.g. `failure_recorder`) are loaded
through the package's ``pytest11`` entry point, so the package must be
installed (``pip install -e .``) before running the suite.
"""
