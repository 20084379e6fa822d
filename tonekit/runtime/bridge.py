# Copyright (c) 2026 Tonekit
# SPDX-License-Identifier: MIT

"""
Design-tool variable bridge.

Pushes a Palette into a design tool as color variables named
``"<Role>/<step>"`` (e.g. ``"Primary/500"``) inside a single named
collection. The push is an idempotent upsert keyed by variable name:
missing collections and variables are created, existing ones are updated
in place.

Pushes are not transactional. If the host fails midway, variables written
so far keep their new values and BridgeError reports how many there were.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Optional, Protocol

from loguru import logger

from tonekit.engine.colorspace import hex_to_rgb
from tonekit.errors import BridgeError
from tonekit.schema import Palette, Role

DEFAULT_COLLECTION = "Color Palette"
DEFAULT_MODE = "Light"


class VariableCollection(Protocol):
    id: str
    name: str
    default_mode_id: str


class Variable(Protocol):
    id: str
    name: str


class VariableHost(Protocol):
    """The subset of a design tool's variables API the bridge needs."""

    def find_collection(self, name: str) -> Optional[VariableCollection]: ...

    def create_collection(self, name: str) -> VariableCollection: ...

    def rename_mode(self, collection: VariableCollection, mode_id: str, name: str) -> None: ...

    def find_variable(self, collection: VariableCollection, name: str) -> Optional[Variable]: ...

    def create_variable(self, collection: VariableCollection, name: str, kind: str) -> Variable: ...

    def set_value(self, variable: Variable, mode_id: str, value: dict) -> None: ...


@dataclass(frozen=True, slots=True)
class BridgeReport:
    """Outcome of a successful push."""
    collection_id: str
    created: int
    updated: int

    @property
    def total(self) -> int:
        return self.created + self.updated


def variable_name(role: Role, step: int) -> str:
    """Host variable name for a palette cell, e.g. ``"Primary/500"``."""
    return f"{role.value.capitalize()}/{step}"


def rgb_value(value: str) -> dict[str, float]:
    """Hex color as the host's 0-1 RGB mapping."""
    r, g, b = hex_to_rgb(value)
    return {"r": r / 255, "g": g / 255, "b": b / 255}


def push_palette_variables(
    palette: Palette,
    host: VariableHost,
    *,
    collection_name: str = DEFAULT_COLLECTION,
    mode_name: str = DEFAULT_MODE,
) -> BridgeReport:
    """
    Upsert every palette cell as a COLOR variable in ``collection_name``.

    A newly created collection gets its default mode renamed to
    ``mode_name``. Values are always written to the default mode.

    Raises:
        BridgeError: the host raised; ``applied`` counts completed writes
    """
    created = updated = 0
    try:
        collection = host.find_collection(collection_name)
        if collection is None:
            collection = host.create_collection(collection_name)
            host.rename_mode(collection, collection.default_mode_id, mode_name)

        for role, step, value in palette.cells():
            name = variable_name(role, step)
            variable = host.find_variable(collection, name)
            if variable is None:
                variable = host.create_variable(collection, name, "COLOR")
                is_new = True
            else:
                is_new = False
            host.set_value(variable, collection.default_mode_id, rgb_value(value))
            if is_new:
                created += 1
            else:
                updated += 1
    except Exception as e:
        applied = created + updated
        logger.error("Variable push failed after {} writes: {}", applied, e)
        raise BridgeError(f"Host rejected variable push: {e}", applied=applied) from e

    logger.info(
        "Pushed palette to '{}': {} created, {} updated",
        collection_name, created, updated,
    )
    return BridgeReport(collection_id=collection.id, created=created, updated=updated)


# =============================================================================
# In-memory host
# =============================================================================


@dataclass
class MemoryCollection:
    name: str
    id: str
    default_mode_id: str
    modes: dict[str, str] = field(default_factory=dict)


@dataclass
class MemoryVariable:
    name: str
    collection_id: str
    kind: str
    id: str
    values: dict[str, dict] = field(default_factory=dict)


class InMemoryVariableHost:
    """
    A VariableHost that keeps everything in dictionaries.

    Useful for previewing a push and as the reference behaviour for real
    host adapters.
    """

    def __init__(self) -> None:
        self.collections: dict[str, MemoryCollection] = {}
        self.variables: dict[str, MemoryVariable] = {}
        self._ids = itertools.count(1)

    def _next_id(self, kind: str) -> str:
        return f"{kind}:{next(self._ids)}"

    def find_collection(self, name: str) -> Optional[MemoryCollection]:
        return next((c for c in self.collections.values() if c.name == name), None)

    def create_collection(self, name: str) -> MemoryCollection:
        collection = MemoryCollection(
            name=name,
            id=self._next_id("collection"),
            default_mode_id=self._next_id("mode"),
        )
        collection.modes[collection.default_mode_id] = "Mode 1"
        self.collections[collection.id] = collection
        return collection

    def rename_mode(self, collection: MemoryCollection, mode_id: str, name: str) -> None:
        collection.modes[mode_id] = name

    def find_variable(self, collection: MemoryCollection, name: str) -> Optional[MemoryVariable]:
        return next(
            (
                v for v in self.variables.values()
                if v.name == name and v.collection_id == collection.id
            ),
            None,
        )

    def create_variable(self, collection: MemoryCollection, name: str, kind: str) -> MemoryVariable:
        variable = MemoryVariable(
            name=name,
            collection_id=collection.id,
            kind=kind,
            id=self._next_id("variable"),
        )
        self.variables[variable.id] = variable
        return variable

    def set_value(self, variable: MemoryVariable, mode_id: str, value: dict) -> None:
        variable.values[mode_id] = dict(value)

    def value(self, collection_name: str, name: str) -> Optional[dict]:
        """Current default-mode value of a variable, or None."""
        collection = self.find_collection(collection_name)
        if collection is None:
            return None
        variable = self.find_variable(collection, name)
        if variable is None:
            return None
        return variable.values.get(collection.default_mode_id)
