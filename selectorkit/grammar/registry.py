"""
Grammar registry: loads the part-kind table from YAML at startup, validates
it, and exposes a read-only query API.

The registry is a module-level singleton; call get_registry() to obtain it.
The table is loaded and validated once at import time. Nothing writes to the
registry after startup.

──────────────────────────────────────────────────────────────────────────────
follows contract
──────────────────────────────────────────────────────────────────────────────
Each entry lists the kinds that may appear immediately before it in a
compound selector. The builder only consults the last accepted part, so the
table must be consistent with the total order:

    ELEMENT < ID < CLASS < ATTRIBUTE < PSEUDO_CLASS < PSEUDO_ELEMENT

A kind may follow itself or any lower-ranked kind, never a higher-ranked one.
An empty selector accepts every kind; cardinality of singular kinds is
enforced separately by the builder.
──────────────────────────────────────────────────────────────────────────────
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, cast

import yaml

from .types import PartKind, PartKindEntry

logger = logging.getLogger(__name__)

_DATA_DIR = Path(__file__).parent / "data"


class GrammarRegistry:
    """
    Read-only registry of the part-kind table.

    ``part_kinds`` is wrapped in MappingProxyType after loading and is
    immutable for the lifetime of the registry instance.

    Instantiate directly to use a custom data directory (e.g. in tests);
    otherwise use get_registry() for the module singleton.
    """

    def __init__(self, data_dir: Path = _DATA_DIR) -> None:
        self._data_dir = data_dir

        # Type annotation only; actual assignment happens in _load_part_kinds
        self.part_kinds: MappingProxyType[PartKind, PartKindEntry]

        self._load_part_kinds()
        self._validate()

    # ── Loading ────────────────────────────────────────────────────────────────

    def _load_yaml(self, filename: str) -> dict[str, Any]:
        path = self._data_dir / filename
        try:
            with open(path) as f:
                return cast(dict[str, Any], yaml.safe_load(f))
        except FileNotFoundError:
            raise FileNotFoundError(f"Grammar data file not found: {path}") from None
        except yaml.YAMLError as exc:
            raise ValueError(f"Failed to parse grammar data file {path}: {exc}") from exc

    def _load_part_kinds(self) -> None:
        data = self._load_yaml("part_kinds.yaml")
        result: dict[PartKind, PartKindEntry] = {}
        errors: list[str] = []
        for entry in data["entries"]:
            try:
                kind = PartKind(entry["id"])
                follows = frozenset(PartKind(k) for k in entry.get("follows", []))
            except ValueError as exc:
                errors.append(str(exc))
                continue
            if kind in result:
                errors.append(f"part kind {kind.value} is defined more than once")
                continue
            result[kind] = PartKindEntry(
                id=kind,
                rank=entry["rank"],
                prefix=entry.get("prefix", ""),
                suffix=entry.get("suffix", ""),
                singular=entry["singular"],
                follows=follows,
                description=entry.get("description", "").strip(),
                notes=entry.get("notes", "").strip(),
            )
        if errors:
            raise ValueError(
                "Grammar registry failed to load part_kinds.yaml:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )
        self.part_kinds = MappingProxyType(result)
        logger.debug("Loaded %d part kinds from %s", len(result), self._data_dir)

    # ── Validation ─────────────────────────────────────────────────────────────

    def _validate(self) -> None:
        """
        Run at startup. Raises ValueError listing all problems found if the
        table is incomplete or inconsistent with the total order.
        """
        errors: list[str] = []
        self._check_completeness(errors)
        self._check_ranks(errors)
        self._check_follows(errors)
        self._check_prefixes(errors)
        if errors:
            raise ValueError(
                "Grammar registry validation failed:\n"
                + "\n".join(f"  • {e}" for e in errors)
            )

    def _check_completeness(self, errors: list[str]) -> None:
        for kind in PartKind:
            if kind not in self.part_kinds:
                errors.append(f"part kind {kind.value} has no entry in part_kinds")

    def _check_ranks(self, errors: list[str]) -> None:
        ranks = sorted(entry.rank for entry in self.part_kinds.values())
        if ranks != list(range(len(ranks))):
            errors.append(f"ranks must be unique and contiguous from 0, got {ranks}")

    def _check_follows(self, errors: list[str]) -> None:
        """A kind may only follow itself or lower-ranked kinds."""
        for kind, entry in self.part_kinds.items():
            for previous in entry.follows:
                previous_entry = self.part_kinds.get(previous)
                if previous_entry is None:
                    errors.append(
                        f"part kind {kind.value}: follows unknown kind {previous.value}"
                    )
                elif previous_entry.rank > entry.rank:
                    errors.append(
                        f"part kind {kind.value} (rank {entry.rank}) cannot follow "
                        f"{previous.value} (rank {previous_entry.rank})"
                    )

    def _check_prefixes(self, errors: list[str]) -> None:
        for kind, entry in self.part_kinds.items():
            if kind != PartKind.ELEMENT and not entry.prefix:
                errors.append(f"part kind {kind.value} must declare a non-empty prefix")

    # ── Query API ──────────────────────────────────────────────────────────────

    def get_entry(self, kind: PartKind) -> PartKindEntry:
        """Return the table entry for *kind*.

        Raises KeyError if the kind has no entry. Validation guarantees all
        PartKind values have entries after construction.
        """
        try:
            return self.part_kinds[kind]
        except KeyError:
            raise KeyError(f"No part-kind entry for {kind!r}") from None

    def is_singular(self, kind: PartKind) -> bool:
        return self.get_entry(kind).singular

    def may_follow(self, kind: PartKind, previous: PartKind | None) -> bool:
        """True if *kind* may be appended right after *previous* (None = empty selector)."""
        if previous is None:
            return True
        return previous in self.get_entry(kind).follows


# ── Module-level singleton ─────────────────────────────────────────────────────
#
# Initialized eagerly at import time; the registry is read-only after
# construction, so sharing it across threads is safe.

_registry: GrammarRegistry = GrammarRegistry()


def get_registry() -> GrammarRegistry:
    """Return the module-level registry singleton."""
    return _registry
