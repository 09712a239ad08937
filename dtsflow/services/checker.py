"""
Symbol resolution used to name declarations nested in namespaces.

A translation run may have one "current" session. The factory reads it when a
declaration is created inside a namespace; without one, namespace-scoped
declarations are named by their bare identifier.
"""
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Tuple

from tree_sitter import Node

from dtsflow.config import (
    DECLARATION_WRAPPER_TYPES,
    DEFAULT_EXPORT_MARKER,
    NAMESPACE_NODE_TYPES,
    NAMESPACE_PATH_SEPARATOR,
)
from dtsflow.services.members import node_text


@dataclass(frozen=True)
class Symbol:
    name: str
    # Names of the enclosing namespaces/modules, outermost first
    parents: Tuple[str, ...] = ()
    is_default_export: bool = False


class SymbolResolutionSession(Protocol):
    def get_symbol_at_location(self, identifier: Node) -> Optional[Symbol]:
        ...

    def format_qualified_path(
        self,
        symbol: Optional[Symbol],
        fallback_identifier: Optional[Node],
        include_default_marker: bool,
    ) -> str:
        ...


_current_session: ContextVar[Optional[SymbolResolutionSession]] = ContextVar(
    "dtsflow_current_session", default=None
)


def current_session() -> Optional[SymbolResolutionSession]:
    return _current_session.get()


@contextmanager
def use_session(session: Optional[SymbolResolutionSession]) -> Iterator[Optional[SymbolResolutionSession]]:
    """Make `session` the current one for the duration of the block."""
    token = _current_session.set(session)
    try:
        yield session
    finally:
        _current_session.reset(token)


class TreeSitterChecker:
    """
    Syntax-only resolution: a symbol is the identifier plus the names of the
    namespaces and modules lexically enclosing its declaration.

    `namespace A { namespace B { interface X {} } }` resolves `X` to `A.B.X`.
    Ambient module names keep their quotes, e.g. `"lodash".Foo`.
    """

    def get_symbol_at_location(self, identifier: Node) -> Optional[Symbol]:
        if identifier is None:
            return None

        declaration = identifier.parent
        if declaration is None:
            return None

        is_default = self._is_default_export(declaration)
        parents = []
        current = declaration.parent
        while current is not None:
            if current.type in NAMESPACE_NODE_TYPES:
                name_node = current.child_by_field_name('name')
                if name_node is not None:
                    parents.append(node_text(name_node))
            current = current.parent
        parents.reverse()

        name = DEFAULT_EXPORT_MARKER if is_default else node_text(identifier)
        return Symbol(name=name, parents=tuple(parents), is_default_export=is_default)

    def format_qualified_path(
        self,
        symbol: Optional[Symbol],
        fallback_identifier: Optional[Node],
        include_default_marker: bool,
    ) -> str:
        if symbol is None:
            return node_text(fallback_identifier)

        leaf = symbol.name
        if symbol.is_default_export and not include_default_marker and fallback_identifier is not None:
            leaf = node_text(fallback_identifier)
        return NAMESPACE_PATH_SEPARATOR.join(symbol.parents + (leaf,))

    def _is_default_export(self, declaration: Node) -> bool:
        current = declaration.parent
        while current is not None and current.type in DECLARATION_WRAPPER_TYPES:
            if current.type == 'export_statement':
                return any(child.type == 'default' for child in current.children)
            current = current.parent
        return False
