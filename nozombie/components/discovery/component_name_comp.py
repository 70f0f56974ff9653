"""Component name extraction.

Parses a source file with tree-sitter and returns the display name of the
single React component it exports.

Resolution rules:

- A component definition is a class extending ``Component``/``PureComponent``
  (or having a ``render()`` method), a ``createReactClass``/``createClass``
  call, or a function/arrow whose body contains JSX or calls
  ``createElement``.
- Higher-order component calls are unwrapped through their first argument
  (the last one when the first is a literal or object), so
  ``memo(Foo)``, ``connect(mapState)(Foo)`` and
  ``withRouter(connect(m)(Foo))`` all resolve to ``Foo``.
- Only exported definitions count (``export``, ``export default``,
  ``export { ... }``, ``module.exports =``). Re-exports from other modules
  are ignored.
- Zero or several exported definitions is a parse failure, and so is any
  syntax error.
- ``Foo.displayName = '...'``, ``static displayName = '...'`` or a
  ``displayName`` key in a createReactClass object wins over the identifier.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from nozombie.helpers.exceptions import ComponentParseError

# Grammar per file suffix; the TSX grammar also reads plain JS and JSX
DIALECTS = {".js": "javascript", ".jsx": "javascript", ".ts": "typescript", ".tsx": "tsx"}
DEFAULT_DIALECT = "tsx"

_COMPONENT_BASES = {"Component", "PureComponent"}
_CREATE_CLASS_CALLEES = {"createReactClass", "createClass"}

_FUNCTION_TYPES = {
    "function_declaration",
    "generator_function_declaration",
    "function",
    "function_expression",
    "generator_function",
    "arrow_function",
}
_CLASS_TYPES = {"class_declaration", "abstract_class_declaration", "class"}
_JSX_TYPES = {"jsx_element", "jsx_self_closing_element", "jsx_fragment"}
_LITERAL_TYPES = {"string", "template_string", "number", "true", "false", "null", "undefined", "object", "regex"}

# Wrappers that do not change the value of an expression
_TRANSPARENT_TYPES = {
    "parenthesized_expression",
    "as_expression",
    "satisfies_expression",
    "non_null_expression",
    "type_assertion",
}


@lru_cache(maxsize=None)
def _parser(dialect: str) -> Parser:
    if dialect == "javascript":
        language = tree_sitter_javascript.language()
    elif dialect == "typescript":
        language = tree_sitter_typescript.language_typescript()
    elif dialect == "tsx":
        language = tree_sitter_typescript.language_tsx()
    else:
        raise ValueError(f"Unknown dialect: {dialect}")
    return Parser(Language(language))


def dialect_for_path(path: str) -> str:
    """Grammar to parse ``path`` with (TSX for unknown suffixes)."""
    return DIALECTS.get(Path(path).suffix.lower(), DEFAULT_DIALECT)


@dataclass(eq=False)
class _Definition:
    """A declared value; identity matters, two definitions never compare equal."""

    name: str | None
    is_component: bool
    display_name: str | None = None


# A binding is either a definition or the name of another binding (alias)
_Binding = _Definition | str


def _text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text is not None else ""


def _string_value(node: Node | None) -> str | None:
    """Value of a plain string or substitution-free template literal."""
    if node is None:
        return None
    if node.type == "string" or (
        node.type == "template_string" and not any(c.type == "template_substitution" for c in node.children)
    ):
        return _text(node)[1:-1]
    return None


def _walk(node: Node) -> Iterator[Node]:
    yield node
    for child in node.children:
        yield from _walk(child)


def _first_error(node: Node) -> Node | None:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found
    return None


def _renders(node: Node) -> bool:
    """True if the subtree contains JSX or a createElement call."""
    for child in _walk(node):
        if child.type in _JSX_TYPES:
            return True
        if child.type == "call_expression":
            callee = child.child_by_field_name("function")
            if callee is not None and _text(callee).split(".")[-1] == "createElement":
                return True
    return False


def _callee_name(call: Node) -> str:
    callee = call.child_by_field_name("function")
    return _text(callee).split(".")[-1] if callee is not None else ""


def _arguments(call: Node) -> list[Node]:
    args = call.child_by_field_name("arguments")
    # Tagged templates (styled.div`...`) carry a template string instead
    if args is None or args.type != "arguments":
        return []
    return [a for a in args.named_children if a.type != "comment"]


def _unwrap(node: Node) -> Node:
    """Strip parentheses, type assertions and higher-order component calls."""
    while True:
        inner = [c for c in node.named_children if c.type not in ("comment", "type_arguments")]
        if node.type in _TRANSPARENT_TYPES and inner:
            node = inner[0]
        elif node.type == "call_expression" and _callee_name(node) not in _CREATE_CLASS_CALLEES:
            args = _arguments(node)
            if not args:
                return node
            node = args[-1] if args[0].type in _LITERAL_TYPES else args[0]
        else:
            return node


def _superclass(node: Node) -> str | None:
    heritage = next((c for c in node.children if c.type == "class_heritage"), None)
    if heritage is None or not heritage.named_children:
        return None
    base = heritage.named_children[0]
    if base.type == "extends_clause":
        base = base.child_by_field_name("value") or (base.named_children[0] if base.named_children else None)
    return _text(base).split(".")[-1] if base is not None else None


def _class_definition(node: Node, name: str | None) -> _Definition:
    own = node.child_by_field_name("name")
    body = node.child_by_field_name("body")
    members = body.named_children if body is not None else []

    has_render = False
    display_name = None
    for member in members:
        key = member.child_by_field_name("name") or member.child_by_field_name("property")
        key_text = _text(key) if key is not None else ""
        if member.type == "method_definition" and key_text == "render":
            has_render = True
        elif (
            member.type in ("field_definition", "public_field_definition")
            and key_text == "displayName"
            and any(c.type == "static" for c in member.children)
        ):
            display_name = _string_value(member.child_by_field_name("value"))

    is_component = _superclass(node) in _COMPONENT_BASES or has_render
    return _Definition(name or (_text(own) if own is not None else None), is_component, display_name)


def _create_class_definition(call: Node, name: str | None) -> _Definition:
    display_name = None
    args = _arguments(call)
    if args and args[0].type == "object":
        for pair in args[0].named_children:
            key = pair.child_by_field_name("key")
            if pair.type == "pair" and key is not None and _text(key).strip("'\"") == "displayName":
                display_name = _string_value(pair.child_by_field_name("value"))
    return _Definition(name, True, display_name)


def _classify(node: Node, name: str | None) -> _Binding:
    """Classify a declaration or expression bound to ``name``."""
    node = _unwrap(node)

    if node.type == "identifier":
        return _text(node)
    if node.type == "call_expression" and _callee_name(node) in _CREATE_CLASS_CALLEES:
        return _create_class_definition(node, name)
    if node.type in _CLASS_TYPES:
        return _class_definition(node, name)
    if node.type in _FUNCTION_TYPES:
        own = node.child_by_field_name("name")
        return _Definition(name or (_text(own) if own is not None else None), _renders(node))
    return _Definition(name, False)


def _member_path(node: Node) -> tuple[str, str] | None:
    """(object, property) of a simple ``a.b`` member expression."""
    if node.type != "member_expression":
        return None
    obj = node.child_by_field_name("object")
    prop = node.child_by_field_name("property")
    if obj is None or prop is None or obj.type != "identifier":
        return None
    return _text(obj), _text(prop)


class _ModuleScan:
    """Bindings, exports and displayName assignments collected from one file."""

    def __init__(self) -> None:
        self.bindings: dict[str, _Binding] = {}
        self.exports: list[_Binding] = []
        self.display_names: dict[str, str] = {}

    def add_statement(self, node: Node) -> None:
        if node.type == "export_statement":
            self._export(node)
        elif node.type == "expression_statement":
            self._assignment(node)
        else:
            self._declare(node)

    def _declare(self, node: Node) -> list[_Binding]:
        """Record top-level bindings introduced by ``node``."""
        if node.type in ("lexical_declaration", "variable_declaration"):
            declared = []
            for declarator in node.named_children:
                if declarator.type != "variable_declarator":
                    continue
                target = declarator.child_by_field_name("name")
                value = declarator.child_by_field_name("value")
                if target is None or target.type != "identifier":
                    continue
                name = _text(target)
                binding = _classify(value, name) if value is not None else _Definition(name, False)
                self.bindings[name] = binding
                declared.append(binding)
            return declared

        if node.type in _CLASS_TYPES or node.type in _FUNCTION_TYPES:
            binding = _classify(node, None)
            own = node.child_by_field_name("name")
            if own is not None:
                self.bindings[_text(own)] = binding
            return [binding]

        return []

    def _export(self, node: Node) -> None:
        if node.child_by_field_name("source") is not None:
            return

        declaration = node.child_by_field_name("declaration")
        if declaration is not None:
            self.exports.extend(self._declare(declaration))
            return

        value = node.child_by_field_name("value")
        if value is not None:
            self.exports.append(_classify(value, None))
            return

        for clause in node.named_children:
            if clause.type != "export_clause":
                continue
            for specifier in clause.named_children:
                local = specifier.child_by_field_name("name")
                if specifier.type == "export_specifier" and local is not None and _text(local) != "default":
                    self.exports.append(_text(local))

    def _assignment(self, node: Node) -> None:
        expression = node.named_children[0] if node.named_children else None
        if expression is None or expression.type != "assignment_expression":
            return
        left = expression.child_by_field_name("left")
        right = expression.child_by_field_name("right")
        path = _member_path(left) if left is not None else None
        if path is None or right is None:
            return

        if path == ("module", "exports"):
            self.exports.append(_classify(right, None))
        elif path[1] == "displayName":
            value = _string_value(right)
            if value is not None:
                self.display_names.setdefault(path[0], value)

    def resolve(self, binding: _Binding) -> _Definition | None:
        seen: set[str] = set()
        while isinstance(binding, str):
            if binding in seen or binding not in self.bindings:
                return None
            seen.add(binding)
            binding = self.bindings[binding]
        return binding

    def exported_component(self) -> _Definition:
        found: list[_Definition] = []
        for entry in self.exports:
            definition = self.resolve(entry)
            if definition is None or not definition.is_component:
                continue
            if not any(definition is known for known in found):
                found.append(definition)

        if not found:
            raise ComponentParseError("No suitable component definition found.")
        if len(found) > 1:
            raise ComponentParseError("Multiple exported component definitions found.")
        return found[0]

    def display_name(self, definition: _Definition) -> str | None:
        for target, value in self.display_names.items():
            if self.resolve(target) is definition:
                return value
        return definition.display_name or definition.name


def parse_component_name(text: str, dialect: str = DEFAULT_DIALECT) -> str:
    """
    Return the display name of the component exported by ``text``.

    Args:
        text: Full source of one file
        dialect: ``javascript``, ``typescript`` or ``tsx``

    Raises:
        ComponentParseError: Syntax error, no exported component,
            several exported components, or an anonymous component
    """
    tree = _parser(dialect).parse(text.encode("utf-8"))
    root = tree.root_node

    if root.has_error:
        error = _first_error(root) or root
        line, column = error.start_point
        raise ComponentParseError(f"Malformed source: syntax error at line {line + 1}, column {column + 1}")

    module = _ModuleScan()
    for statement in root.named_children:
        module.add_statement(statement)

    name = module.display_name(module.exported_component())
    if not name:
        raise ComponentParseError("Component has no display name.")
    return name


def extract_component_name(
    text: str,
    on_error: Callable[[ComponentParseError], None] | None = None,
    dialect: str = DEFAULT_DIALECT,
) -> str | None:
    """
    Component display name for a file, or None when it declares no component.

    Parse failures never propagate. ``on_error`` receives them for diagnostics
    without changing the result.
    """
    try:
        return parse_component_name(text, dialect)
    except ComponentParseError as e:
        if on_error is not None:
            on_error(e)
        return None
