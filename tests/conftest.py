import pytest
import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Parser

TYPESCRIPT_LANGUAGE = Language(tstypescript.language_typescript())


@pytest.fixture
def parse_ts():
    """Parse a TypeScript snippet and return the root `program` node."""
    parser = Parser(TYPESCRIPT_LANGUAGE)

    def _parse(code: str):
        return parser.parse(code.encode("utf-8")).root_node

    return _parse


@pytest.fixture
def find_nodes():
    """Collect descendants whose type is in `types`, in source order."""

    def _find(root, *types):
        found = []

        def visit(node):
            if node.type in types:
                found.append(node)
            for child in node.children:
                visit(child)

        visit(root)
        return found

    return _find
