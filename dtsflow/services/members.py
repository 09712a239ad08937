from typing import List, Optional

from tree_sitter import Node

from dtsflow.config import (
    DECLARATION_WRAPPER_TYPES,
    FUNCTION_NODE_TYPES,
    MEMBER_BODY_NODE_TYPES,
    MEMBER_NODE_TYPES,
    OBJECT_LIKE_NODE_TYPES,
    VARIABLE_NODE_TYPES,
)
from dtsflow.models import Member


def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode('utf-8')


def normalize_signature(text: str) -> str:
    # Collapse all whitespace so formatting differences don't create new shapes
    return " ".join(text.split()).rstrip(";,").rstrip()


def unwrap_declaration(node: Optional[Node]) -> Optional[Node]:
    """
    Strip `export` / `declare` wrappers and return the declaration inside.

    `export declare function f(): void;` parses as
    export_statement -> ambient_declaration -> function_signature.
    """
    current = node
    while current is not None and current.type in DECLARATION_WRAPPER_TYPES:
        inner = current.child_by_field_name('declaration')
        if inner is None:
            inner = next(
                (c for c in current.named_children if c.type != 'comment'),
                None,
            )
        if inner is None:
            return current
        current = inner
    return current


def declaration_name(node: Optional[Node]) -> Optional[Node]:
    """Return the identifier node naming a declaration, if it has one."""
    decl = unwrap_declaration(node)
    if decl is None:
        return None
    if decl.type in VARIABLE_NODE_TYPES:
        declarator = _first_of_type(decl, 'variable_declarator')
        return declarator.child_by_field_name('name') if declarator else None
    return decl.child_by_field_name('name')


def get_members_from_node(node: Optional[Node]) -> List[Member]:
    """
    Extract the structural shapes a declaration contributes.

    - interfaces / classes / object types: one member per body entry
    - functions: a single call shape
    - type aliases: a single aliased shape
    - enums: one member per enum entry
    - variables: one typed member per declarator

    Anything else contributes no members.
    """
    decl = unwrap_declaration(node)
    if decl is None:
        return []

    if decl.type in OBJECT_LIKE_NODE_TYPES:
        return _members_of_body(decl.child_by_field_name('body'))

    if decl.type in MEMBER_BODY_NODE_TYPES:
        return _members_of_body(decl)

    if decl.type in FUNCTION_NODE_TYPES:
        return [Member(kind='call_signature', signature=_call_shape(decl))]

    if decl.type == 'type_alias_declaration':
        type_params = node_text(decl.child_by_field_name('type_parameters'))
        value = node_text(decl.child_by_field_name('value'))
        return [Member(kind='type_alias', signature=normalize_signature(f"{type_params} = {value}"))]

    if decl.type == 'enum_declaration':
        body = decl.child_by_field_name('body')
        if body is None:
            return []
        return [
            Member(
                kind='enum_member',
                name=node_text(entry.child_by_field_name('name') or entry),
                signature=normalize_signature(node_text(entry)),
            )
            for entry in body.named_children
            if entry.type != 'comment'
        ]

    if decl.type in VARIABLE_NODE_TYPES:
        members = []
        for declarator in decl.named_children:
            if declarator.type != 'variable_declarator':
                continue
            members.append(Member(
                kind='variable',
                name=node_text(declarator.child_by_field_name('name')),
                signature=normalize_signature(node_text(declarator.child_by_field_name('type'))),
            ))
        return members

    return []


def _members_of_body(body: Optional[Node]) -> List[Member]:
    if body is None:
        return []
    members = []
    for child in body.named_children:
        if child.type not in MEMBER_NODE_TYPES:
            continue
        name_node = child.child_by_field_name('name')
        members.append(Member(
            kind=child.type,
            name=node_text(name_node) if name_node is not None else None,
            signature=normalize_signature(_text_without_body(child)),
        ))
    return members


def _call_shape(node: Node) -> str:
    type_params = node_text(node.child_by_field_name('type_parameters'))
    params = node_text(node.child_by_field_name('parameters'))
    # return_type is a type_annotation, its text already starts with ":"
    return_type = node_text(node.child_by_field_name('return_type'))
    return normalize_signature(f"{type_params}{params}{return_type}")


def _text_without_body(node: Node) -> str:
    # Method implementations in class bodies carry a statement block; only the
    # part before it describes the shape.
    body = node.child_by_field_name('body')
    text = node.text or b""
    if body is not None:
        text = text[: body.start_byte - node.start_byte]
    return text.decode('utf-8')


def _first_of_type(node: Node, node_type: str) -> Optional[Node]:
    for child in node.named_children:
        if child.type == node_type:
            return child
    return None
