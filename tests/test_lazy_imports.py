"""Tests for muxer.__init__ — lazy exports cover all public names."""

import pytest

import muxer


@pytest.mark.parametrize("name", muxer.__all__)
def test_all_names_resolve(name: str) -> None:
    """Every name in __all__ must resolve via __getattr__ without error."""
    obj = getattr(muxer, name)
    assert obj is not None, f"muxer.{name} resolved to None"


def test_errors_resolve_to_module_classes() -> None:
    from muxer import errors

    assert muxer.NotFound is errors.NotFound
    assert muxer.MuxerError is errors.MuxerError


def test_unknown_name_raises_attribute_error() -> None:
    with pytest.raises(AttributeError, match="no attribute"):
        muxer.__getattr__("ThisDoesNotExist")


def test_version() -> None:
    assert muxer.__version__ == "0.1.0"
