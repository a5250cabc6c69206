"""Phrase registry for mapping string names to phrase kinds."""

from __future__ import annotations

import logging
from typing import Callable

from .phrase import Hold, Phrase, Procedural, RampTo

log = logging.getLogger(__name__)

PhraseKind = Callable[..., Phrase]


class PhraseRegistry:

    def __init__(self) -> None:
        self._kinds: dict[str, PhraseKind] = {}
        self._kind_names: dict[int, str] = {}

    def register(self, name_or_kind=None, kind=None):
        """Make a phrase kind available to ``Sequence.then`` under a name.

        Applied directly to a class or factory, the kind's ``__name__`` is
        used and the kind is returned unchanged. Called with a name and a
        kind, registers the kind under that name.
        """
        if callable(name_or_kind) and kind is None:
            kind = name_or_kind
            self._add(kind.__name__, kind)
            return kind

        self._add(name_or_kind, kind)

    def _add(self, name: str, kind: PhraseKind) -> None:
        previous = self._kinds.get(name)
        self._kinds[name] = kind
        if previous is not None and previous is not kind:
            log.debug("Replacing phrase kind %r", name)
            if self._kind_names.get(id(previous)) == name:
                # Keep the old kind findable if it is still registered elsewhere.
                other = next((n for n, k in self._kinds.items() if k is previous), None)
                if other is None:
                    del self._kind_names[id(previous)]
                else:
                    self._kind_names[id(previous)] = other
        self._kind_names.setdefault(id(kind), name)

    def get(self, name: str) -> PhraseKind:
        """Retrieve a registered phrase kind by name."""
        if name not in self._kinds:
            raise KeyError(f"No phrase kind registered for {name!r}")
        return self._kinds[name]

    def create(self, name: str, *args, **kwargs) -> Phrase:
        """Instantiate a phrase from a registered kind name."""
        return self.get(name)(*args, **kwargs)

    def find_name(self, kind: PhraseKind) -> str | None:
        """Return the registered name for a phrase kind, or None."""
        return self._kind_names.get(id(kind))

    def list_kinds(self) -> list[str]:
        """Return the names of all registered phrase kinds."""
        return list(self._kinds)


registry = PhraseRegistry()
registry.register("hold", Hold)
registry.register("ramp", RampTo)
registry.register("procedural", Procedural)
