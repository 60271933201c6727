# chainapi — dynamic namespace client for HTTP APIs
# Copyright (C) 2025–2026 Neven Kordic <neven@broodlink.ai>
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Recursive namespace-path builder and method dispatch.

Attribute access on a :class:`NamespaceNode` creates a child node; calling a
node sends one request through the shared dispatcher::

    client.foo.bar.baz({"id": 5})                        # GET  /foo/bar/baz
    client.foo.bar.baz({"id": 5}, method_type="POST")   # POST /foo/bar/baz
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, Union

from .exceptions import InvalidAction, NamespaceDepthExceeded
from .models import RequestKind

MAX_NAMESPACE_DEPTH = 10
NAMESPACE_SEPARATOR = "/"
METHOD_TYPE_KEY = "method_type"


class Dispatcher(Protocol):
    """Anything able to perform a call for a fully resolved method path."""

    def call_method(
        self,
        path: str,
        arguments: Mapping[str, Any],
        request_kind: Union[RequestKind, str],
    ) -> Any: ...


class NamespaceNode:
    """One segment of a remote method path.

    Nodes are read-only: every attribute lookup yields a new child and every
    attribute assignment raises :class:`InvalidAction`. Segments that clash
    with the node's own methods (``invoke``, ``child``...) are reached with
    :meth:`child`.
    """

    __slots__ = ("_name", "_dispatcher", "_parent")

    def __init__(self, name: str, dispatcher: Dispatcher, parent: NamespaceNode | None = None) -> None:
        if not name:
            raise InvalidAction("Namespace segment name must be a non-empty string")
        object.__setattr__(self, "_name", name)
        object.__setattr__(self, "_dispatcher", dispatcher)
        object.__setattr__(self, "_parent", parent)

    def _segments(self) -> list[str]:
        segments = []
        node: NamespaceNode | None = self
        while node is not None:
            segments.append(node._name)
            node = node._parent
        segments.reverse()
        return segments

    # ── Chaining ─────────────────────────────────────────────────────

    def child(self, name: str) -> NamespaceNode:
        """Return a new node for ``name`` under this one."""
        return NamespaceNode(name, self._dispatcher, self)

    def __getattr__(self, name: str) -> NamespaceNode:
        # Only reached for names not found normally; protocol probes stay errors
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        return self.child(name)

    def has_property(self, name: str) -> bool:
        """Every child name is considered present."""
        return True

    def __contains__(self, name: object) -> bool:
        return True

    def set_property(self, name: str, value: Any) -> None:
        raise InvalidAction(f"{type(self).__name__} object doesn't support property setting")

    def __setattr__(self, name: str, value: Any) -> None:
        self.set_property(name, value)

    def __delattr__(self, name: str) -> None:
        raise InvalidAction(f"{type(self).__name__} object doesn't support property deletion")

    # ── Dispatch ─────────────────────────────────────────────────────

    def resolve_path(self, name: str) -> str:
        """Build the full path of method ``name`` in this namespace.

        A node ``bar`` whose parent is ``foo`` resolves ``baz`` to
        ``/foo/bar/baz``.

        Raises:
            InvalidAction: if ``name`` is empty.
            NamespaceDepthExceeded: if the path would have more than
                ``MAX_NAMESPACE_DEPTH`` segments.
        """
        if not name:
            raise InvalidAction("Method name must be a non-empty string")
        segments = [name, self._name]
        depth = 2
        parent = self._parent
        while parent is not None:
            segments.append(parent._name)
            parent = parent._parent
            depth += 1
            if depth > MAX_NAMESPACE_DEPTH:
                raise NamespaceDepthExceeded(
                    "Namespace depth limit exceeded", depth=depth, limit=MAX_NAMESPACE_DEPTH
                )
        segments.reverse()
        return NAMESPACE_SEPARATOR + NAMESPACE_SEPARATOR.join(segments)

    def invoke(self, name: str, arguments: Any = None) -> Any:
        """Call remote method ``name`` in this namespace.

        ``arguments`` maps positional indexes and keyword names to values, as
        built by :meth:`__call__`. A ``method_type`` entry selects the request
        kind (``GET`` by default) and is never sent. The first positional
        argument is the payload; without one, the remaining keywords are.

        Returns whatever the dispatcher returns (an awaitable for async
        dispatchers).
        """
        args = _as_argument_map(arguments)
        request_kind = args.pop(METHOD_TYPE_KEY, RequestKind.GET)

        path = self.resolve_path(name)
        return self._dispatcher.call_method(path, _payload(args), request_kind)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        arguments: dict[Any, Any] = dict(enumerate(args))
        arguments.update(kwargs)
        if self._parent is None:
            request_kind = arguments.pop(METHOD_TYPE_KEY, RequestKind.GET)
            path = NAMESPACE_SEPARATOR + self._name
            return self._dispatcher.call_method(path, _payload(arguments), request_kind)
        return self._parent.invoke(self._name, arguments)

    def __repr__(self) -> str:
        return f"NamespaceNode({NAMESPACE_SEPARATOR + NAMESPACE_SEPARATOR.join(self._segments())})"


def _as_argument_map(arguments: Any) -> dict[Any, Any]:
    if arguments is None:
        return {}
    if isinstance(arguments, Mapping):
        return dict(arguments)
    if isinstance(arguments, (list, tuple)):
        return dict(enumerate(arguments))
    raise InvalidAction(f"Unsupported arguments type: {type(arguments).__name__}")


def _payload(arguments: dict[Any, Any]) -> Any:
    if not arguments:
        return {}
    if 0 in arguments:
        first = arguments[0]
        return {} if first is None else first
    return {k: v for k, v in arguments.items() if isinstance(k, str)}


def namespace_chain(dispatcher: Dispatcher, segments: Sequence[str]) -> NamespaceNode:
    """Build ``segments[0].segments[1]...`` as a node chain."""
    if not segments:
        raise InvalidAction("A namespace needs at least one segment")
    node = NamespaceNode(segments[0], dispatcher)
    for segment in segments[1:]:
        node = node.child(segment)
    return node
