"""Replacement table ordering."""

from collections.abc import Iterable, Iterator

from pydantic import BaseModel, Field


class ReplacementRule(BaseModel):
    """A single trigger -> replacement pair."""

    key: str = Field(min_length=1, description="Trigger sequence typed before the cursor")
    value: str = Field(description="Text that replaces the trigger")

    model_config = {"frozen": True}


class ReplacementTable:
    """Ordered trigger -> replacement rules.

    The stored order (e.g. insertion order for display) is never changed;
    scanning works on the copy returned by sorted_by_length().
    """

    def __init__(self, rules: Iterable[ReplacementRule]):
        self._rules: tuple[ReplacementRule, ...] = tuple(rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[ReplacementRule]:
        return iter(self._rules)

    def is_empty(self) -> bool:
        return not self._rules

    @property
    def rules(self) -> tuple[ReplacementRule, ...]:
        return self._rules

    @property
    def max_key_length(self) -> int:
        """Length of the longest trigger, 0 for an empty table."""
        return max((len(rule.key) for rule in self._rules), default=0)

    def sorted_by_length(self) -> list[ReplacementRule]:
        """Return the rules sorted by descending key length.

        The sort is stable, so rules with equally long keys keep their
        original relative order and the first of any duplicates wins.
        """
        return sorted(self._rules, key=lambda rule: len(rule.key), reverse=True)
