"""Classification of top-level statements into module references.

Works on tree-sitter nodes from the JavaScript and TypeScript grammars.
Only the statement itself is inspected; imports nested in functions,
blocks or conditionals are never reported.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Optional


class ReferenceKind(Enum):
    """Kinds of top-level statements the traversal cares about."""
    DECLARATIVE_IMPORT = "declarative_import"   # import x from "./y"
    DYNAMIC_IMPORT = "dynamic_import"           # import("./y")
    REQUIRE_CALL = "require_call"               # require("./y")
    OTHER = "other"                             # Everything else, ignored


@dataclass(frozen=True)
class ModuleReference:
    """A classified statement and the raw specifier it carries."""
    kind: ReferenceKind
    specifier: Optional[str] = None

    @property
    def is_import_like(self) -> bool:
        return self.kind is not ReferenceKind.OTHER


OTHER = ModuleReference(ReferenceKind.OTHER)


def classify_statement(node: Any) -> ModuleReference:
    """Label one top-level statement.

    Args:
        node: A direct child of the ``program`` node

    Returns:
        ModuleReference; OTHER when the statement is not import-like or
        its specifier is not a plain string literal
    """
    if node.type == "import_statement":
        return _reference(
            ReferenceKind.DECLARATIVE_IMPORT,
            node.child_by_field_name("source"),
        )

    if node.type == "expression_statement":
        expression = _first_named_child(node)
        if expression is None:
            return OTHER

        # Top-level await is only meaningful for dynamic imports
        awaited = expression.type == "await_expression"
        if awaited:
            expression = _first_named_child(expression)
            if expression is None:
                return OTHER

        if expression.type != "call_expression":
            return OTHER

        function = expression.child_by_field_name("function")
        if function is None:
            return OTHER

        if function.type == "import":
            return _reference(ReferenceKind.DYNAMIC_IMPORT, _first_argument(expression))

        if not awaited and function.type == "identifier" and function.text == b"require":
            return _reference(ReferenceKind.REQUIRE_CALL, _first_argument(expression))

    return OTHER


def iter_module_references(body) -> Iterator[ModuleReference]:
    """Yield the import-like references of a module body in source order."""
    for node in body:
        reference = classify_statement(node)
        if reference.is_import_like:
            yield reference


def _reference(kind: ReferenceKind, literal: Any) -> ModuleReference:
    specifier = string_literal_value(literal)
    if specifier is None:
        return OTHER
    return ModuleReference(kind, specifier)


def _first_named_child(node: Any) -> Optional[Any]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _first_argument(call: Any) -> Optional[Any]:
    arguments = call.child_by_field_name("arguments")
    if arguments is None:
        return None
    return _first_named_child(arguments)


def string_literal_value(node: Any) -> Optional[str]:
    """Return the contents of a string literal node, or None.

    Template literals are not string literals here, even without
    substitutions.
    """
    if node is None or node.type != "string":
        return None
    return "".join(
        child.text.decode("utf-8")
        for child in node.named_children
        if child.type in ("string_fragment", "escape_sequence")
    )
