"""Command dispatch.

One run goes through three phases, in order, with no retries:

1. Crate target pre-resolution (upload, rename): a name becomes exactly one
   crate identifier or the run aborts.
2. Bulk resolution (delete-crate, delete-file): names become identifiers
   under the run's policy; failure aborts the run before any deletion.
3. Execution: the action runs once per argument, in input order, and each
   result is formatted before the next call. Per-item failures are
   reported and the batch continues.
"""

from __future__ import annotations

import logging
from typing import Mapping

from letscrate.adapters.letscrate_api import LetsCrateApi
from letscrate.core.domain.identifiers import are_identifiers, is_identifier
from letscrate.core.domain.models import Catalog, ResourceKind
from letscrate.core.errors import (
    InvalidIdentifierFormat,
    InvalidPattern,
    MissingArguments,
    RemoteFailure,
)
from letscrate.core.interfaces.display import DisplaySink
from letscrate.core.services.actions import ACTIONS, ActionSpec
from letscrate.core.services.catalog_cache import CatalogCache, is_failure
from letscrate.core.services.context import ActionContext, ActionRuntime
from letscrate.core.services.formatter import report_error
from letscrate.core.services.options import Action, RunOptions
from letscrate.core.services.resolver import Resolver

logger = logging.getLogger(__name__)

# Errors that only concern the item being processed.
ITEM_ERRORS = (RemoteFailure, InvalidIdentifierFormat, InvalidPattern)


class Dispatcher:
    """Applies the selected action to every resolved argument."""

    def __init__(
        self,
        api: LetsCrateApi,
        sink: DisplaySink,
        *,
        registry: Mapping[Action, ActionSpec] = ACTIONS,
        share_url_base: str = "http://lts.cr/",
    ) -> None:
        self._api = api
        self._sink = sink
        self._registry = registry
        self._share_url_base = share_url_base

    def run(self, options: RunOptions) -> ActionContext:
        spec = self._registry[options.action]
        arguments = list(options.arguments)

        if not spec.takes_arguments and arguments:
            logger.warning("%s takes no arguments; ignoring %s", options.action.value, arguments)
            arguments = []
        if spec.needs_arguments and not arguments:
            raise MissingArguments(options.action.value)

        catalog = CatalogCache(self._api.list_files)
        resolver = Resolver(catalog)
        context = ActionContext(arguments=arguments)
        runtime = ActionRuntime(
            api=self._api,
            catalog=catalog,
            resolver=resolver,
            options=options,
            sink=self._sink,
            context=context,
            share_url_base=self._share_url_base,
        )

        if spec.crate_target:
            self._resolve_crate_target(runtime, spec)

        kind = spec.requires.resource
        if kind is not None:
            arguments = self._resolve_arguments(runtime, spec, arguments, kind)
            if not arguments:
                logger.warning("no %s matched %s; nothing to do", kind.plural, options.arguments)
                return context
        context.resolved = arguments

        if arguments:
            for argument in arguments:
                self._execute(runtime, spec, argument)
        else:
            self._execute(runtime, spec, None)

        logger.debug("%s finished: %d item(s), %d failure(s)", options.action.value, context.cursor, context.failures)
        return context

    def _resolve_crate_target(self, runtime: ActionRuntime, spec: ActionSpec) -> None:
        options, context = runtime.options, runtime.context
        target = (options.crate_target or "").strip()
        if is_identifier(target):
            context.crate_id = target
        else:
            context.crate_id = runtime.resolver.resolve_one(target, ResourceKind.CRATE, options.policy)
        if spec.captures_names:
            catalog = _catalog_for_names(runtime)
            name = catalog.name_for(context.crate_id, ResourceKind.CRATE) if catalog else None
            context.target_name = name or target
        logger.debug("crate target %r -> %s", target, context.crate_id)

    def _resolve_arguments(
        self,
        runtime: ActionRuntime,
        spec: ActionSpec,
        arguments: list[str],
        kind: ResourceKind,
    ) -> list[str]:
        if not are_identifiers(arguments):
            arguments = runtime.resolver.resolve(arguments, kind, runtime.options.policy)

        if spec.captures_names and arguments:
            catalog = _catalog_for_names(runtime)
            typed = runtime.context.arguments
            aligned = len(typed) == len(arguments)
            runtime.context.captured_names = [
                (catalog.name_for(identifier, kind) if catalog else None) or (typed[i] if aligned else identifier)
                for i, identifier in enumerate(arguments)
            ]
        return arguments

    def _execute(self, runtime: ActionRuntime, spec: ActionSpec, argument: str | None) -> None:
        quiet = runtime.options.quiet
        try:
            response = spec.invoke(runtime, argument)
        except ITEM_ERRORS as exc:
            if quiet:
                runtime.context.failures += 1
            else:
                report_error(runtime, exc.message, exc.argument or None)
        else:
            if not quiet:
                spec.format(runtime, response)
            elif is_failure(response):
                runtime.context.failures += 1
        finally:
            runtime.context.cursor += 1


def _catalog_for_names(runtime: ActionRuntime) -> Catalog | None:
    """Catalog used only to label output; a failed fetch falls back to typed values."""

    try:
        return runtime.catalog.get_catalog()
    except RemoteFailure as exc:
        logger.warning("could not load names from the catalog: %s", exc.message)
        return None
