"""
Error chain traversal.

``is_error`` answers "does this error chain contain X" for any exception.
It follows ``__cause__`` one step at a time, also follows the ``external``
branch of a ChainLink, and lets an element that defines ``is_`` decide for
itself whether it matches.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class ChainLink(Exception):
    """Structural identity of an error node.

    Each root and each subtype owns a distinct link. Message-only
    derivations share their source's link, so matching a node means finding
    its link in another node's chain.

    Attributes:
        external: Foreign error carried by a link made during external
            error attachment, or None
    """

    def __init__(
        self,
        text: str,
        parent: BaseException | None = None,
        external: BaseException | None = None,
    ) -> None:
        super().__init__(text)
        self.__cause__ = parent
        self.external = external

    def __str__(self) -> str:
        return str(self.args[0])

    def __repr__(self) -> str:
        return f"ChainLink({self.args[0]!r})"

    def __reduce__(self) -> tuple[Any, ...]:
        # __cause__ is not part of the default exception pickle state.
        return (type(self), (self.args[0], self.__cause__, self.external))


def _branches(err: BaseException) -> list[BaseException]:
    nexts = []
    if err.__cause__ is not None:
        nexts.append(err.__cause__)
    if isinstance(err, ChainLink) and err.external is not None:
        nexts.append(err.external)
    return nexts


def walk_chain(err: BaseException | None) -> Iterator[BaseException]:
    """Yield every error reachable from ``err``, starting with ``err``.

    Each element is yielded once even if the chain loops back on itself.
    """
    if err is None:
        return
    seen: set[int] = set()
    stack = [err]
    while stack:
        current = stack.pop()
        if id(current) in seen:
            continue
        seen.add(id(current))
        yield current
        # Reverse so the structural parent is visited before the external branch.
        stack.extend(reversed(_branches(current)))


def is_error(err: BaseException | None, target: BaseException | None) -> bool:
    """Report whether any error in ``err``'s chain matches ``target``.

    An element matches if it equals ``target`` or if it has an ``is_``
    method that returns True for ``target``.

    Args:
        err: Error whose chain is searched
        target: Error to look for

    Returns:
        True if a match was found
    """
    if err is None or target is None:
        return err is target

    for current in walk_chain(err):
        if current == target:
            return True
        matcher = getattr(current, "is_", None)
        if callable(matcher) and matcher(target):
            return True
    return False
