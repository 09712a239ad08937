from dtsflow.models import Member
from dtsflow.services.members import (
    declaration_name,
    get_members_from_node,
    node_text,
    normalize_signature,
    unwrap_declaration,
)


def _first_statement(root):
    return root.named_children[0]


def test_interface_members(parse_ts):
    root = parse_ts("""
interface Chain<T> {
    value: T;
    map(fn: (x: T) => T): Chain<T>;
    (input: string): number;
    new (seed: T): Chain<T>;
    [key: string]: any;
}
""")

    members = get_members_from_node(_first_statement(root))

    assert [m.kind for m in members] == [
        "property_signature",
        "method_signature",
        "call_signature",
        "construct_signature",
        "index_signature",
    ]
    assert members[0] == Member(kind="property_signature", name="value", signature="value: T")
    assert members[1].name == "map"
    assert members[2].name is None


def test_wrappers_are_unwrapped(parse_ts):
    root = parse_ts("export declare function pick(obj: object, key: string): any;")
    statement = _first_statement(root)

    decl = unwrap_declaration(statement)

    assert decl.type in ("function_signature", "function_declaration")
    assert node_text(declaration_name(statement)) == "pick"
    assert get_members_from_node(statement) == [
        Member(kind="call_signature", signature="(obj: object, key: string): any")
    ]


def test_function_body_is_not_part_of_shape(parse_ts):
    root = parse_ts("function add<T>(a: T, b: T): T { return a; }")

    assert get_members_from_node(_first_statement(root)) == [
        Member(kind="call_signature", signature="<T>(a: T, b: T): T")
    ]


def test_class_methods_drop_their_bodies(parse_ts):
    root = parse_ts("""
class Box {
    size: number;
    grow(by: number): void { this.size += by; }
}
""")

    members = get_members_from_node(_first_statement(root))

    assert [(m.name, m.signature) for m in members] == [
        ("size", "size: number"),
        ("grow", "grow(by: number): void"),
    ]


def test_type_alias_is_one_member(parse_ts):
    root = parse_ts("type Pair<A> = [A, A];")

    assert get_members_from_node(_first_statement(root)) == [
        Member(kind="type_alias", signature="<A> = [A, A]")
    ]


def test_enum_members(parse_ts):
    root = parse_ts("enum Color { Red, Green = 2 }")

    members = get_members_from_node(_first_statement(root))

    assert [m.name for m in members] == ["Red", "Green"]
    assert all(m.kind == "enum_member" for m in members)


def test_variable_members(parse_ts):
    root = parse_ts("declare const VERSION: string;")
    statement = _first_statement(root)

    assert node_text(declaration_name(statement)) == "VERSION"
    assert get_members_from_node(statement) == [
        Member(kind="variable", name="VERSION", signature=": string")
    ]


def test_formatting_does_not_change_shape(parse_ts):
    compact = get_members_from_node(_first_statement(parse_ts("interface A { f(x:number):void }")))
    spaced = get_members_from_node(_first_statement(parse_ts("interface A {\n  f(x:number):void;\n}")))

    assert compact == spaced


def test_unknown_or_missing_nodes_have_no_members(parse_ts):
    root = parse_ts('import { a } from "b";')

    assert get_members_from_node(_first_statement(root)) == []
    assert get_members_from_node(None) == []
    assert declaration_name(None) is None


def test_normalize_signature():
    assert normalize_signature("  x :\n\tstring ;") == "x : string"
    assert normalize_signature("") == ""
