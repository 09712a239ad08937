import logging
from dataclasses import dataclass
from typing import Any, Optional, Union, assert_never

from dtsflow.config import MODULE_NAME_SEPARATOR
from dtsflow.services.checker import SymbolResolutionSession, current_session
from dtsflow.services.members import declaration_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoScope:
    pass


@dataclass(frozen=True)
class ModuleScope:
    name: str


@dataclass(frozen=True)
class NamespaceScope:
    name: str


Scope = Union[NoScope, ModuleScope, NamespaceScope]


def scope_of(context: Any) -> Scope:
    if context is None:
        return NoScope()
    return context.scope()


def resolve_qualified_name(
    name: str,
    scope: Scope,
    raw: Any = None,
    session: Optional[SymbolResolutionSession] = None,
) -> str:
    """
    Compute the key two declarations must share to be merged.

    - no scope: the name itself
    - module: "<module>$<name>"
    - namespace: the symbol's qualified path from the resolution session
      (the current one unless `session` is given). Without a session the
      bare name is used, so same-named declarations in different namespaces
      merge.
    """
    if isinstance(scope, NoScope):
        return name
    if isinstance(scope, ModuleScope):
        return f"{scope.name}{MODULE_NAME_SEPARATOR}{name}"
    if isinstance(scope, NamespaceScope):
        return _resolve_in_namespace(name, scope, raw, session if session is not None else current_session())
    assert_never(scope)


def _resolve_in_namespace(
    name: str,
    scope: NamespaceScope,
    raw: Any,
    session: Optional[SymbolResolutionSession],
) -> str:
    if session is None:
        logger.debug(f"No symbol session, naming '{name}' in namespace '{scope.name}' by its bare name")
        return name

    identifier = declaration_name(raw)
    if identifier is None:
        logger.debug(f"Declaration '{name}' in namespace '{scope.name}' has no name node, using bare name")
        return name

    symbol = session.get_symbol_at_location(identifier)
    if symbol is None:
        logger.debug(f"No symbol found for '{name}' in namespace '{scope.name}', using bare name")
        return name

    return session.format_qualified_path(symbol, identifier, False)
