from __future__ import annotations

import logging

import pytest

from mdot.config import configure_logging


@pytest.fixture
def basic_config_calls(monkeypatch: pytest.MonkeyPatch) -> list[dict[str, object]]:
    calls: list[dict[str, object]] = []

    def fake_basic_config(**kwargs: object) -> None:
        calls.append(kwargs)

    monkeypatch.setattr(logging, "basicConfig", fake_basic_config)
    return calls


@pytest.mark.parametrize(
    ("verbose", "quiet", "expected"),
    [(0, False, logging.INFO), (2, False, logging.DEBUG), (0, True, logging.WARNING)],
)
def test_configure_logging_maps_verbosity(
    basic_config_calls: list[dict[str, object]], verbose: int, quiet: bool, expected: int
) -> None:
    assert configure_logging(verbose=verbose, quiet=quiet) == expected

    assert basic_config_calls[0]["level"] == expected
    assert basic_config_calls[0]["force"] is False


def test_configure_logging_explicit_level_wins(
    basic_config_calls: list[dict[str, object]],
) -> None:
    level = configure_logging(verbose=1, level=logging.ERROR, force=True)

    assert level == logging.ERROR
    assert basic_config_calls == [
        {
            "level": logging.ERROR,
            "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            "datefmt": "%H:%M:%S",
            "force": True,
        }
    ]
