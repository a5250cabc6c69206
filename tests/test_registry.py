"""Tests for PhraseRegistry: decorator registration, lookup, defaults."""

import logging

import pytest

from choreograph import Hold, Procedural, RampTo, Sequence, phrase, registry
from choreograph.registry import PhraseRegistry


class TestDefaultRegistry:
    def test_builtin_kinds(self) -> None:
        assert registry.get("hold") is Hold
        assert registry.get("ramp") is RampTo
        assert registry.get("procedural") is Procedural

    def test_find_name(self) -> None:
        assert registry.find_name(RampTo) == "ramp"

    def test_find_name_unregistered(self) -> None:
        assert registry.find_name(object) is None


class TestRegister:
    def test_direct_call(self) -> None:
        reg = PhraseRegistry()
        reg.register("hold", Hold)
        assert reg.get("hold") is Hold

    def test_bare_decorator_uses_name(self) -> None:
        reg = PhraseRegistry()

        @reg.register
        def pulse(start_time, end_time, start_value, end_value):
            return Hold(start_time, end_time, start_value, end_value)

        assert reg.get("pulse") is pulse
        assert reg.list_kinds() == ["pulse"]

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(KeyError, match="nope"):
            PhraseRegistry().get("nope")

    def test_create(self) -> None:
        reg = PhraseRegistry()
        reg.register("ramp", RampTo)
        p = reg.create("ramp", 0.0, 2.0, 0.0, 4.0)
        assert isinstance(p, RampTo)
        assert p.value(1.0) == pytest.approx(2.0)

    def test_replace_updates_reverse_lookup(self, caplog: pytest.LogCaptureFixture) -> None:
        reg = PhraseRegistry()
        reg.register("k", Hold)
        with caplog.at_level(logging.DEBUG, logger="choreograph.registry"):
            reg.register("k", RampTo)
        assert reg.get("k") is RampTo
        assert reg.find_name(Hold) is None
        assert reg.find_name(RampTo) == "k"
        assert "Replacing phrase kind 'k'" in caplog.text

    def test_replace_keeps_kind_registered_elsewhere(self) -> None:
        reg = PhraseRegistry()
        reg.register("hold", Hold)
        reg.register("still", Hold)
        reg.register("still", RampTo)
        assert reg.get("hold") is Hold
        assert reg.find_name(Hold) == "hold"
        assert reg.find_name(RampTo) == "still"

    def test_replace_repoints_to_remaining_name(self) -> None:
        reg = PhraseRegistry()
        reg.register("first", Hold)
        reg.register("second", Hold)
        reg.register("first", RampTo)
        assert reg.find_name(Hold) == "second"

    def test_same_kind_twice_keeps_first_name(self) -> None:
        reg = PhraseRegistry()
        reg.register("a", Hold)
        reg.register("b", Hold)
        assert reg.find_name(Hold) == "a"

    def test_list_kinds_order(self) -> None:
        reg = PhraseRegistry()
        reg.register("b", Hold)
        reg.register("a", RampTo)
        assert reg.list_kinds() == ["b", "a"]


@pytest.fixture
def scratch_registry(monkeypatch: pytest.MonkeyPatch) -> PhraseRegistry:
    """Fresh registry swapped in for the one Sequence.then resolves names with."""
    reg = PhraseRegistry()
    reg.register("ramp", RampTo)
    monkeypatch.setattr("choreograph.sequence.registry", reg)
    return reg


class TestSequenceUsesRegistry:
    def test_custom_kind_by_name(self, scratch_registry: PhraseRegistry) -> None:
        doubled = phrase(lambda p, t: 2.0 * p.end_value)
        scratch_registry.register("doubled_test_kind", doubled)
        s = Sequence(0.0).then(1.0, 1.0, "doubled_test_kind")
        assert s.value(0.5) == pytest.approx(2.0)

    def test_scratch_registry_is_isolated(self, scratch_registry: PhraseRegistry) -> None:
        scratch_registry.register("scratch_only", Hold)
        assert "scratch_only" not in registry.list_kinds()
        with pytest.raises(KeyError):
            Sequence(0.0).then(1.0, 1.0, "hold")
