"""
Member population for already-constructed instances.
"""

import collections
import collections.abc as cabc
import logging
from typing import TYPE_CHECKING, Any

from ..domain.member import Member
from ..domain.populate_option import PopulateOption
from ..utilities.constants import AnonymousDataError
from .types import MemberInfo

if TYPE_CHECKING:
    from .engine import AnonymousData

logger = logging.getLogger(__name__)


class Populator:
    """
    Assigns anonymous values to the members of an instance.

    Shallow population fills the instance's own members. Deep population
    also fills every non-scalar value it produced along the way,
    breadth-first, until no unvisited values remain.

    Deep population performs no cycle detection: a type whose members lead
    back to itself (directly or through other types) will not terminate.
    """

    def __init__(self, engine: "AnonymousData") -> None:
        self.engine = engine

    def populate(self, instance: Any, option: PopulateOption) -> Any:
        """
        Populate ``instance`` according to ``option`` and return it.

        Raises:
            AnonymousDataError: If a member could not be assigned; the error
                names the member and carries the original exception
        """
        if option is PopulateOption.NONE or instance is None:
            return instance

        pending: collections.deque[Any] | None = (
            collections.deque() if option.is_deep() else None
        )
        current = instance
        visited = 0
        while True:
            if current is not None:
                self._populate_members(current, pending)
                visited += 1

            if pending is None or not pending:
                break

            current = pending.popleft()

        logger.debug(
            f"Populated {visited} object(s) from {type(instance).__name__} ({option.value})"
        )
        return instance

    def _populate_members(self, current: Any, pending: collections.deque[Any] | None) -> None:
        capabilities = self.engine.capabilities
        owner = type(current)

        for member in capabilities.members(owner):
            # A nullable member is filled with its declared type
            annotation = capabilities.strip_optional(member.annotation)
            if capabilities.is_primitive(annotation):
                continue

            is_sequence = capabilities.is_sequence(annotation)
            if not (is_sequence or member.writable):
                continue

            try:
                if is_sequence:
                    self._populate_sequence(current, member, annotation, pending)
                else:
                    self._populate_value(current, owner, member, annotation, pending)
            except Exception as e:
                raise AnonymousDataError(Member(owner, member.name), e) from e

    def _populate_sequence(
        self,
        current: Any,
        member: MemberInfo,
        annotation: Any,
        pending: collections.deque[Any] | None,
    ) -> None:
        capabilities = self.engine.capabilities
        collection = getattr(current, member.name, None)

        if collection is not None:
            # Existing collections are extended in place, never replaced
            method_name = capabilities.add_method(type(collection))
            if method_name is None:
                logger.warning(
                    f"Skipping {member.name}: {type(collection).__name__} has no add method"
                )
                return

            add = getattr(collection, method_name)
            element_type = capabilities.element_type(annotation)
            for item in self.engine.sequences.any_sequence(self.engine, element_type):
                add(item)
                self._enqueue(pending, item)

        elif member.writable:
            value = self.engine.any(annotation)
            if pending is not None:
                if isinstance(value, cabc.Iterator):
                    # Drained so its items can be queued, then handed back as a fresh iterator
                    items = list(value)
                    value = iter(items)
                elif isinstance(value, cabc.Mapping):
                    items = list(value.values())
                else:
                    items = list(value) if isinstance(value, cabc.Iterable) else []
                for item in items:
                    self._enqueue(pending, item)
            setattr(current, member.name, value)

    def _populate_value(
        self,
        current: Any,
        owner: type,
        member: MemberInfo,
        annotation: Any,
        pending: collections.deque[Any] | None,
    ) -> None:
        factory = self.engine.member_factory(Member(owner, member.name))
        if factory is not None:
            value = factory(self.engine)
        else:
            value = self.engine.any(annotation)

        setattr(current, member.name, value)
        self._enqueue(pending, value)

    def _enqueue(self, pending: collections.deque[Any] | None, value: Any) -> None:
        if pending is None or value is None:
            return
        if self.engine.capabilities.is_primitive(type(value)):
            return
        pending.append(value)
