"""Name-to-identifier resolution.

The service only accepts identifiers; users mostly type names. This module
matches names against the cached catalog and applies the cardinality policy:

- EXACT: names are case-insensitive literal substrings and the number of
  identifiers found must equal the number of names given.
- WILDCARD: names are case-insensitive regular expressions and every match
  is returned, including none at all.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence, Union

from letscrate.core.domain.identifiers import are_identifiers, is_identifier
from letscrate.core.domain.models import Crate, File, ResolutionPolicy, ResourceKind
from letscrate.core.errors import Ambiguous, InvalidPattern, NotFound, ResolutionMismatch
from letscrate.core.services.catalog_cache import CatalogCache

logger = logging.getLogger(__name__)

Resource = Union[Crate, File]


def build_matcher(query: str, kind: ResourceKind, policy: ResolutionPolicy) -> re.Pattern[str]:
    if policy is ResolutionPolicy.EXACT:
        return re.compile(re.escape(query), re.IGNORECASE)
    try:
        return re.compile(query, re.IGNORECASE)
    except re.error as exc:
        raise InvalidPattern(query, kind, str(exc)) from exc


class Resolver:
    """Resolves crate/file names against a `CatalogCache`."""

    def __init__(self, catalog: CatalogCache) -> None:
        self._catalog = catalog

    def search(self, query: str, kind: ResourceKind, policy: ResolutionPolicy) -> list[Resource]:
        """Every crate (or file, across all crates) whose name matches `query`."""

        matcher = build_matcher(query, kind, policy)
        catalog = self._catalog.get_catalog()
        candidates: Sequence[Resource] = catalog.crates if kind is ResourceKind.CRATE else catalog.all_files()
        return [entry for entry in candidates if matcher.search(entry.name)]

    def resolve(
        self,
        names: Sequence[str],
        kind: ResourceKind,
        policy: ResolutionPolicy,
    ) -> list[str]:
        names = list(names)
        if are_identifiers(names):
            return names

        ids: list[str] = []
        last_query = ""
        for name in names:
            # A mixed batch is looked up as a whole under EXACT: identifiers
            # are treated as names too.
            if policy is ResolutionPolicy.WILDCARD and is_identifier(name):
                ids.append(name)
                continue
            last_query = name
            ids.extend(entry.id for entry in self.search(name, kind, policy))

        logger.debug("resolved %d %s name(s) to %d id(s): %s", len(names), kind.value, len(ids), ids)

        if policy is ResolutionPolicy.WILDCARD:
            return ids

        if len(ids) == len(names):
            return ids
        if not ids:
            raise NotFound(last_query, kind)
        if len(ids) > len(names):
            raise Ambiguous(last_query, kind)
        raise ResolutionMismatch(last_query, kind, expected=len(names), found=len(ids))

    def resolve_one(
        self,
        name: str,
        kind: ResourceKind,
        policy: ResolutionPolicy = ResolutionPolicy.EXACT,
    ) -> str:
        """Resolve a single target; exactly one match is required under any policy."""

        if is_identifier(name):
            return name
        ids = [entry.id for entry in self.search(name, kind, policy)]
        if not ids:
            raise NotFound(name, kind)
        if len(ids) > 1:
            raise Ambiguous(name, kind)
        return ids[0]
