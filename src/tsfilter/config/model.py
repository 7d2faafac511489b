"""Config data model for tsfilter evaluators."""

from __future__ import annotations

from dataclasses import dataclass

from tsfilter.constants.predicates import DEFAULT_UNKNOWN_PREDICATE_POLICY, UnknownPredicatePolicy
from tsfilter.types.config import MessageMapConfig


@dataclass(frozen=True)
class EngineConfig:
    """Resolved evaluator config."""

    unknown_predicates: UnknownPredicatePolicy = DEFAULT_UNKNOWN_PREDICATE_POLICY
    message_map: MessageMapConfig = MessageMapConfig()

    @property
    def reject_unknown_predicates(self) -> bool:
        """Whether an unregistered predicate fails the match at run time."""
        return self.unknown_predicates == "reject"
