"""Tests for the dummy translation backend."""

from localetranslator.backends.dummy import DummyBackend


class TestDummyBackend:
    def test_translate_single(self):
        backend = DummyBackend()
        assert backend.translate("Hello", "fr") == "[FR] Hello"

    def test_translate_batch(self):
        backend = DummyBackend()
        results = backend.translate_batch(["Hello", "World"], "ES")
        assert results == ["[ES] Hello", "[ES] World"]

    def test_translate_empty_batch(self):
        assert DummyBackend().translate_batch([], "ES") == []
