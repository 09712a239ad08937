from typing import Any, Optional

from dtsflow.nodes import (
    DeclarationNode,
    ExportDeclarationNode,
    ExportNode,
    ImportNode,
    ModuleNode,
    NamespaceNode,
    Node,
)
from dtsflow.services.checker import SymbolResolutionSession
from dtsflow.services.registries import DeclarationRegistry, ModuleRegistry, OverloadNamer


class Factory:
    """
    Builds output nodes for the declarations a walker finds.

    A factory owns the registries of exactly one translation run. Create a
    new one per run (see `create`); sharing one between runs would merge
    declarations across unrelated inputs.

    `session`, when given, is used for namespace naming instead of the
    current session.
    """

    def __init__(self, session: Optional[SymbolResolutionSession] = None):
        self.session = session
        self.modules = ModuleRegistry()
        self.declarations = DeclarationRegistry()
        self.overloads = OverloadNamer()

    def get_or_create_module(self, name: str) -> ModuleNode:
        return self.modules.get_or_create(name)

    def get_or_create_declaration(
        self,
        node: Any,
        name: Optional[str] = None,
        context: Optional[Node] = None,
    ) -> DeclarationNode:
        return self.declarations.get_or_create(node, name, context, session=self.session)

    def register_function_declaration(self, node: Any, name: str, context: Node) -> None:
        self.overloads.register(node, name, context)

    def create_namespace(self, name: str) -> NamespaceNode:
        return NamespaceNode(name)

    def create_import(self, node: Any) -> ImportNode:
        return ImportNode(node)

    def create_export(self, node: Any) -> ExportNode:
        return ExportNode(node)

    def create_export_declaration(self, node: Any) -> ExportDeclarationNode:
        return ExportDeclarationNode(node)


def create(session: Optional[SymbolResolutionSession] = None) -> Factory:
    return Factory(session)
