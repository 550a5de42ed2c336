"""Tests for the public package surface."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

import pytest

import houndstooth
from houndstooth import _version
from houndstooth._version import get_version


def test_version_from_distribution_metadata() -> None:
    assert houndstooth.__version__ == get_version() == version("houndstooth")


def test_version_without_distribution(monkeypatch: pytest.MonkeyPatch) -> None:
    def missing(name: str) -> str:
        raise PackageNotFoundError(name)

    monkeypatch.setattr(_version, "_metadata_version", missing)
    assert get_version() == "0.0.0"


def test_public_names_exported() -> None:
    for name in houndstooth.__all__:
        assert hasattr(houndstooth, name), name


def test_errors_share_base() -> None:
    assert issubclass(houndstooth.InvalidModifierValueError, houndstooth.InvalidAttributeValueError)
    assert issubclass(houndstooth.MissingLabelError, houndstooth.HoundstoothError)
    assert issubclass(houndstooth.RegistryFrozenError, houndstooth.CompileError)
