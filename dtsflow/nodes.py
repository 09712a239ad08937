from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, List

from dtsflow.models import Member
from dtsflow.services.members import get_members_from_node
from dtsflow.services.naming import ModuleScope, NamespaceScope, NoScope, Scope


# Output tree nodes compare by identity: two modules with the same name built
# in different runs are different nodes.
@dataclass(eq=False)
class Node:
    kind: ClassVar[str] = "node"
    # Insertion ordered; a repeated key replaces the previous child in place
    children: Dict[str, "Node"] = field(default_factory=dict, init=False, repr=False)

    def add_child(self, name: str, child: "Node") -> None:
        self.children[name] = child

    def scope(self) -> Scope:
        """Naming rule applied to declarations created inside this node."""
        return NoScope()


@dataclass(eq=False)
class ModuleNode(Node):
    kind: ClassVar[str] = "module"
    name: str

    def scope(self) -> Scope:
        return ModuleScope(self.name)


@dataclass(eq=False)
class NamespaceNode(Node):
    kind: ClassVar[str] = "namespace"
    name: str

    def scope(self) -> Scope:
        return NamespaceScope(self.name)


@dataclass(eq=False)
class DeclarationNode(Node):
    kind: ClassVar[str] = "declaration"
    raw: Any
    members: List[Member] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.maybe_add_members(get_members_from_node(self.raw))

    def maybe_add_members(self, members: Iterable[Member]) -> int:
        """Append every member not already present. Returns how many were added."""
        added = 0
        for member in members:
            if member not in self.members:
                self.members.append(member)
                added += 1
        return added


@dataclass(eq=False)
class ImportNode(Node):
    kind: ClassVar[str] = "import"
    raw: Any


@dataclass(eq=False)
class ExportNode(Node):
    kind: ClassVar[str] = "export"
    raw: Any


@dataclass(eq=False)
class ExportDeclarationNode(Node):
    kind: ClassVar[str] = "export_declaration"
    raw: Any
