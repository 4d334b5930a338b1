"""Tests for wordlist handles."""

import copy
import gc
import pickle

import pytest

from wordlists import (
    Backend,
    NotCheckedOutError,
    ProxyCopyError,
    ReadOnlyViolationError,
    WordlistProxy,
)


@pytest.fixture
def handle(manager):
    h = manager.checkout("utf-8")
    yield h
    h.release()


def test_forwards_queries(handle):
    assert isinstance(handle, WordlistProxy)
    assert handle.name == "utf-8"
    assert handle.backend is Backend.TEXT
    assert handle.count() == len(handle) == 3
    assert handle.word_at(1) == handle[1] == "là"
    assert handle.find_canonical("EPITHETE") == "épithète"
    assert "saoul" in handle
    assert list(handle) == ["épithète", "là", "saoûl"]
    assert handle.get_metadata("locale") == "fr_FR"
    assert handle.collator.equal("là", "LA")


def test_read_only(handle):
    with pytest.raises(ReadOnlyViolationError):
        handle.set_at(0, "foo")
    with pytest.raises(ReadOnlyViolationError):
        handle.remove_at(0)
    with pytest.raises(ReadOnlyViolationError):
        handle[0] = "foo"
    with pytest.raises(ReadOnlyViolationError):
        del handle[0]


def test_cannot_be_copied(handle, manager):
    with pytest.raises(ProxyCopyError):
        copy.copy(handle)
    with pytest.raises(ProxyCopyError):
        copy.deepcopy(handle)
    with pytest.raises(ProxyCopyError):
        pickle.dumps(handle)
    assert manager.ref_count("utf-8") == 1


def test_release_is_idempotent(manager):
    handle = manager.checkout("utf-8")
    other = manager.checkout("utf-8")
    handle.release()
    handle.release()
    assert handle.released
    assert manager.ref_count("utf-8") == 1
    other.release()
    assert not manager.is_loaded("utf-8")


def test_released_handle_refuses_queries(manager):
    handle = manager.checkout("utf-8")
    handle.release()
    with pytest.raises(NotCheckedOutError):
        handle.count()
    with pytest.raises(NotCheckedOutError):
        handle.contains("la")
    assert "released" in repr(handle)


def test_context_manager(manager):
    with manager.checkout("utf-8") as handle:
        assert manager.ref_count("utf-8") == 1
        assert handle.contains("la")
    assert handle.released
    assert not manager.is_loaded("utf-8")


def test_garbage_collection_releases_once(manager):
    handle = manager.checkout("utf-8")
    for _ in range(10):
        handle.contains("la")
    del handle
    gc.collect()
    assert not manager.is_loaded("utf-8")
