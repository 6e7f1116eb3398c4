"""Shared pytest configuration for the parsecengine tests.

Hypothesis profiles for the combinator and grammar properties:
    local: 200 examples per property, no deadline
    ci: 50 derandomized examples, failing inputs printed as blobs
    debug: 100 examples with every generated parser and input shown

The profile comes from HYPOTHESIS_PROFILE, then CI=true selects "ci",
otherwise "local" is used.

Fuzz-marked tests (large generated grammars) are skipped unless the run
selects them with ``pytest -m fuzz``.
"""

import os

import pytest
from hypothesis import HealthCheck, Verbosity, settings

# Generated grammars nest lazy() and repetition; single examples may run
# past the default 200ms deadline.
_COMMON = {
    "deadline": None,
    "suppress_health_check": [HealthCheck.too_slow],
}

_PROFILES: dict[str, dict[str, object]] = {
    "local": {"max_examples": 200},
    "ci": {"max_examples": 50, "derandomize": True, "print_blob": True},
    "debug": {"max_examples": 100, "verbosity": Verbosity.verbose},
}

for _name, _options in _PROFILES.items():
    settings.register_profile(_name, **_COMMON, **_options)  # type: ignore[arg-type]


def _profile_name() -> str:
    requested = os.environ.get("HYPOTHESIS_PROFILE", "")
    if requested in _PROFILES:
        return requested
    return "ci" if os.environ.get("CI") == "true" else "local"


settings.load_profile(_profile_name())


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip fuzz tests unless the -m expression mentions fuzz."""
    if "fuzz" in str(config.getoption("-m", default="")):
        return

    skip_fuzz = pytest.mark.skip(reason="slow fuzz test, run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)
