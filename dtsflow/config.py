from typing import Set

# Joins a module name and a declaration name into a merge key, e.g. "lodash$Foo".
# Module names are already unique identifiers, so plain concatenation is enough.
MODULE_NAME_SEPARATOR: str = '$'

# Joins the parts of a namespace path, e.g. "A.B.Foo".
NAMESPACE_PATH_SEPARATOR: str = '.'

# Name the type checker gives to `export default ...` symbols.
DEFAULT_EXPORT_MARKER: str = 'default'

# Statements that only wrap the declaration we care about.
DECLARATION_WRAPPER_TYPES: Set[str] = {
    'export_statement',
    'ambient_declaration',
}

# Scopes whose names make up a symbol's qualified path.
NAMESPACE_NODE_TYPES: Set[str] = {
    'internal_module',  # namespace Foo { }
    'module',           # module "foo" { } / module Foo { }
}

FUNCTION_NODE_TYPES: Set[str] = {
    'function_signature',
    'function_declaration',
    'generator_function_declaration',
}

OBJECT_LIKE_NODE_TYPES: Set[str] = {
    'interface_declaration',
    'class_declaration',
    'abstract_class_declaration',
}

# Bodies holding one member per child. Older grammars use `object_type`
# for interface bodies, newer ones `interface_body`.
MEMBER_BODY_NODE_TYPES: Set[str] = {
    'interface_body',
    'object_type',
    'class_body',
}

MEMBER_NODE_TYPES: Set[str] = {
    'property_signature',
    'method_signature',
    'call_signature',
    'construct_signature',
    'index_signature',
    'abstract_method_signature',
    'public_field_definition',
    'method_definition',
}

VARIABLE_NODE_TYPES: Set[str] = {
    'lexical_declaration',
    'variable_declaration',
}
