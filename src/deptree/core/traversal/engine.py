from __future__ import annotations

"""
Dependency Traversal Engine.

Recursive depth-first walk from an entry file. For every file the engine:
1. Canonicalizes the path and skips files missing on disk.
2. Returns the cached entry if the file is IN_PROGRESS or DONE.
3. Marks the file IN_PROGRESS with a placeholder before recursing.
4. Extracts raw specifiers and resolves each one.
5. Records unresolved specifiers and applies the filter hook.
6. Recurses into the surviving dependencies, in order.
7. Emits a FileCompletion event to the assembler and marks the file DONE.

A result assembled from a cycle member that is still IN_PROGRESS stays
IN_PROGRESS itself. Once the entry completes, the assembler settles those
results and they are marked DONE, so a DONE entry is final when written.

The walk is single-threaded and synchronous. Every distinct file is
extracted and resolved at most once per run.
"""

import logging
from typing import Any, Dict, List, Optional

from deptree.core.traversal.assembler import ResultAssembler, create_assembler
from deptree.core.traversal.bookkeeping import apply_filter, dedupe_preserving_order
from deptree.core.traversal.context import TraversalContext
from deptree.domain.tree_models import FileCompletion, VisitState
from deptree.infra.fs import path_exists

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Drives extraction, resolution, bookkeeping and recursion for one run.
    """

    def __init__(
            self,
            context: TraversalContext,
            assembler: Optional[ResultAssembler] = None,
    ) -> None:
        """
        Args:
            context: Per-run configuration and shared state.
            assembler: Result shape builder. Defaults to the shape selected
                by 'context.is_list_form'.
        """
        self._ctx = context
        self._assembler = assembler or create_assembler(context.is_list_form)
        self.completed: List[str] = []
        self._completions: Dict[str, FileCompletion] = {}
        # Results built from an IN_PROGRESS entry, held back from DONE
        self._pending: List[str] = []

    # -------------------------------------------------------------------------
    # PUBLIC API
    # -------------------------------------------------------------------------

    def run(self) -> Any:
        """
        Walk the whole graph reachable from the context's entry file.

        Returns:
            Any: The top-level output shape ({entry: subtree} or a flat list),
                 or an empty result when the entry file does not exist.
        """
        ctx = self._ctx
        logger.info(f"Traversing dependencies of {ctx.filename}")

        if not path_exists(ctx.filename):
            logger.debug(f"Entry file does not exist: {ctx.filename}")
            ctx.sink.dedupe()
            return self._assembler.empty()

        result = self.traverse(ctx.filename)

        if self._pending:
            self._settle_pending()

        ctx.sink.dedupe()
        logger.debug(f"Deduplicated non-existent specifiers: {ctx.sink.items}")
        logger.info(f"Traversal complete: {len(self.completed)} files walked")

        return self._assembler.finalize(ctx.filename, result)

    def traverse(self, filename: str) -> Any:
        """
        Compute (or fetch from the cache) the result of a single file.

        Args:
            filename: Path of the file, absolute or relative to the anchor.

        Returns:
            Any: The file's subtree or ordered dependency list.
        """
        cache = self._ctx.cache
        canonical = self._ctx.canonicalize(filename)

        if not path_exists(canonical):
            return self._assembler.empty()

        state = cache.state(canonical)
        if state is not VisitState.UNSEEN:
            logger.debug(f"Already visited ({state.value}): {canonical}")
            return cache.lookup(canonical)

        # Mark before recursing so that cyclic re-entries stop here
        placeholder = self._assembler.placeholder()
        cache.begin(canonical, placeholder)

        logger.debug(f"Traversing {canonical}")
        dependencies = self._collect_dependencies(canonical)
        sub_results = tuple((dep, self.traverse(dep)) for dep in dependencies)

        event = FileCompletion(
            filename=canonical,
            dependencies=tuple(dependencies),
            sub_results=sub_results,
        )
        result = self._assembler.assemble(event, placeholder)

        self._completions[canonical] = event

        if any(cache.state(dep) is VisitState.IN_PROGRESS for dep in dependencies):
            self._pending.append(canonical)
        else:
            cache.finish(canonical, result)
        self.completed.append(canonical)
        return result

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _settle_pending(self) -> None:
        """
        Finish the files whose result was assembled from a cycle member
        that was still IN_PROGRESS.

        The entry file is always complete by the time the walk returns,
        since every cycle member it reaches is walked below it. Every other
        pending result is rebuilt by the assembler before it becomes DONE.
        """
        ctx = self._ctx
        entry = ctx.filename
        stale = [path for path in self._pending if path != entry]
        logger.debug(f"Settling {len(stale)} results assembled mid-cycle")

        self._assembler.settle(stale, self._completions, ctx.cache.entries)
        for path in self._pending:
            ctx.cache.finish(path, ctx.cache.entries[path])
        self._pending = []

    def _collect_dependencies(self, filename: str) -> List[str]:
        """Resolve, existence-check and filter the direct dependencies of a file."""
        resolved: List[str] = []

        for specifier in self._extract(filename):
            path = self._resolve(specifier, filename)
            canonical = self._ctx.canonicalize(path) if path else None
            if not path_exists(canonical):
                logger.debug(f"Skipping unresolved specifier '{specifier}' in {filename} (got {path!r})")
                self._ctx.sink.record(specifier)
                continue
            resolved.append(canonical)

        return apply_filter(self._ctx.filter, dedupe_preserving_order(resolved), filename)

    def _extract(self, filename: str) -> List[str]:
        """Run the extractor, degrading any failure to 'no dependencies'."""
        try:
            specifiers = self._ctx.extractor(filename, self._ctx.extractor_config)
        except Exception as e:
            logger.debug(f"Error getting dependencies of {filename}: {e}", exc_info=True)
            return []

        logger.debug(f"Extracted specifiers for {filename}: {specifiers}")
        return list(specifiers or [])

    def _resolve(self, specifier: str, filename: str) -> Optional[str]:
        """Run the resolver, degrading any failure to 'unresolved'."""
        ctx = self._ctx
        try:
            return ctx.resolver(specifier, filename, ctx.directory, ctx.resolver_config)
        except Exception as e:
            logger.debug(f"Resolver failed for '{specifier}' in {filename}: {e}", exc_info=True)
            return None
