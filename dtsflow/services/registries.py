import logging
from typing import Any, Dict, Optional

from dtsflow.nodes import DeclarationNode, ModuleNode, Node
from dtsflow.services.checker import SymbolResolutionSession
from dtsflow.services.members import get_members_from_node
from dtsflow.services.naming import resolve_qualified_name, scope_of

logger = logging.getLogger(__name__)


class ModuleRegistry:
    """One ModuleNode per module name for the lifetime of a run."""

    def __init__(self):
        self._modules: Dict[str, ModuleNode] = {}

    def get_or_create(self, name: str) -> ModuleNode:
        # `declare module "x"` may appear many times; every occurrence must
        # attach its declarations to the same node.
        module = self._modules.get(name)
        if module is not None:
            return module

        module = ModuleNode(name)
        self._modules[name] = module
        logger.debug(f"Created module node '{name}'")
        return module

    def __contains__(self, name: str) -> bool:
        return name in self._modules

    def __len__(self) -> int:
        return len(self._modules)


class DeclarationRegistry:
    """
    Merges declarations that share a qualified name into one node.

    Definition files (lodash for instance) declare the same interface or type
    several times as a form of overloading. The output can't express that, so
    all occurrences collapse into a single node carrying every distinct shape.
    """

    def __init__(self):
        self._declarations: Dict[str, DeclarationNode] = {}

    def get_or_create(
        self,
        raw: Any,
        name: Optional[str] = None,
        context: Optional[Node] = None,
        session: Optional[SymbolResolutionSession] = None,
    ) -> DeclarationNode:
        # Anonymous shapes are never looked up again, so never registered
        if name is None:
            return DeclarationNode(raw)

        qualified_name = resolve_qualified_name(name, scope_of(context), raw, session)

        existing = self._declarations.get(qualified_name)
        if existing is not None:
            added = existing.maybe_add_members(get_members_from_node(raw))
            logger.debug(f"Merged '{qualified_name}': {added} new member(s), {len(existing.members)} total")
            return existing

        declaration = DeclarationNode(raw)
        self._declarations[qualified_name] = declaration
        logger.debug(f"Registered declaration '{qualified_name}'")
        return declaration

    def lookup(self, qualified_name: str) -> Optional[DeclarationNode]:
        return self._declarations.get(qualified_name)

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._declarations

    def __len__(self) -> int:
        return len(self._declarations)


class OverloadNamer:
    """
    Gives each function overload its own numbered binding: f1, f2, ...

    The output has no overloaded function declarations, so unlike
    DeclarationRegistry nothing is merged here. Counters are keyed by the bare
    function name and shared by every context in the run.
    """

    def __init__(self):
        self._counters: Dict[str, int] = {}

    def register(self, raw: Any, name: str, context: Node) -> None:
        # Incremented before first use: the first overload is "f1", never "f"
        count = self._counters.get(name, 0) + 1
        self._counters[name] = count
        context.add_child(f"{name}{count}", DeclarationNode(raw))

    def count(self, name: str) -> int:
        return self._counters.get(name, 0)
