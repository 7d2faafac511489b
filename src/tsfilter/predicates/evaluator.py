"""Per-match predicate evaluation.

A :class:`PredicateEvaluator` is bound to one source buffer and one tree.
It is plugged into a query cursor as the accept/reject filter for each raw
match: the predicates attached to the match's pattern run in declaration
order and the first failing one rejects the match.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from tsfilter.config.model import EngineConfig
from tsfilter.predicates.arguments import resolve_arguments
from tsfilter.predicates.cache import CacheStore
from tsfilter.predicates.registry import PredicateRegistry, default_registry
from tsfilter.predicates.validation import check_predicate
from tsfilter.types.arguments import ResolvedArgument
from tsfilter.types.query import Argument, Node, PredicateSpec, QueryMatch

logger = logging.getLogger(__name__)

type MessageMapLocator = Callable[["PredicateEvaluator"], object | None]


class PredicateEvaluator:
    """Filters query matches through the registered predicates.

    Runtime problems (unmatched captures, wrong argument kinds, missing
    context) make the affected predicate evaluate ``False`` and are logged;
    they never raise out of :meth:`filter_match`.
    """

    def __init__(
        self,
        source: str | bytes | None = None,
        root: Node | None = None,
        *,
        registry: PredicateRegistry | None = None,
        config: EngineConfig | None = None,
        message_map_locator: MessageMapLocator | None = None,
    ) -> None:
        self._source = b""
        self._root: Node | None = root
        self._registry = registry if registry is not None else default_registry()
        self._config = config if config is not None else EngineConfig()
        self._cache = CacheStore()
        self.message_map_locator = message_map_locator
        if source is not None:
            self.set_source_text(source)

    @property
    def source(self) -> bytes:
        return self._source

    @property
    def root_node(self) -> Node | None:
        return self._root

    @property
    def registry(self) -> PredicateRegistry:
        return self._registry

    @property
    def config(self) -> EngineConfig:
        return self._config

    def set_source_text(self, text: str | bytes) -> None:
        """Set the buffer that capture texts are sliced from.

        A different buffer clears the cache store.
        """
        source = text.encode("utf-8") if isinstance(text, str) else bytes(text)
        if source != self._source:
            self._reset_cache()
        self._source = source

    def set_root_node(self, node: Node | None) -> None:
        """Set the tree root used by predicates that search the whole document.

        A different root clears the cache store.
        """
        if node != self._root:
            self._reset_cache()
        self._root = node

    def _reset_cache(self) -> None:
        if len(self._cache):
            logger.debug("Source or tree replaced, dropping %d cached artifacts", len(self._cache))
        self._cache = CacheStore()

    def node_text(self, node: Node) -> str:
        """Return the source text spanned by *node*."""
        return self._source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def resolve(self, match: QueryMatch, arguments: Sequence[Argument]) -> list[ResolvedArgument]:
        return resolve_arguments(match, arguments)

    def insert_cache(self, value: object) -> None:
        self._cache.insert(value)

    def find_cache[T](self, cls: type[T]) -> T | None:
        return self._cache.find(cls)

    def fresh(self, *, registry: PredicateRegistry | None = None) -> PredicateEvaluator:
        """Return an evaluator over the same source and tree with an empty cache.

        It shares this evaluator's registry unless *registry* is given.
        """
        return PredicateEvaluator(
            self._source,
            self._root,
            registry=registry if registry is not None else self._registry,
            config=self._config,
            message_map_locator=self.message_map_locator,
        )

    def check_predicate(self, spec: PredicateSpec) -> str | None:
        """Validate *spec* without a match. Returns an error text or ``None``."""
        return check_predicate(spec, self._registry)

    def filter_match(self, match: QueryMatch) -> bool:
        """Return whether every predicate attached to the match's pattern holds."""
        for spec in match.pattern.predicates:
            predicate = self._registry.evaluator_for(spec.name)
            if predicate is None:
                if self._config.reject_unknown_predicates:
                    logger.error("Unregistered predicate %s reached evaluation, rejecting match", spec.name)
                    return False
                logger.warning("Unregistered predicate %s reached evaluation, treating as satisfied", spec.name)
                continue
            if not predicate(self, match, spec.arguments):
                return False
        return True

    __call__ = filter_match
