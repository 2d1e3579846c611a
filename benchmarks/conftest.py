from __future__ import annotations

import contextlib

import pytest

import lisparser


def pytest_configure(config: pytest.Config) -> None:
    with contextlib.suppress(AttributeError):
        config.option.no_cov = True


@pytest.fixture(scope="session")
def document() -> lisparser.Parser[lisparser.LispObject]:
    """One grammar value shared by every benchmark in the session."""
    return lisparser.document()
