"""TypeScript / TSX declaration rules.

Covers module-level function declarations and the methods of module-level
named classes. The package path of a file is its module path (the file path
without extension); a method's receiver is its class name.
"""

from __future__ import annotations

import posixpath
from typing import Any

from funcdiff.diff.models import DeclarationRecord
from funcdiff.parsing.treesitter import Match, ParseResult, line_span, node_text, squash

_CLASS_TYPES = frozenset({"class_declaration", "abstract_class_declaration"})
_FUNCTION_TYPES = frozenset({"function_declaration", "generator_function_declaration"})
_PARAMETER_TYPES = frozenset({"required_parameter", "optional_parameter"})
_HIDDEN_MODIFIERS = frozenset({"private"})

# Class decorator name -> record kind for its methods
_DECORATOR_KINDS = {
    "Controller": "controller",
    "Injectable": "service",
}


def module_path(path: str) -> str:
    return posixpath.splitext(path)[0]


def _is_module_level(node: Any) -> tuple[bool, bool]:
    """(module_level, exported) for a function or class declaration node."""
    parent = node.parent
    if parent is not None and parent.type == "export_statement":
        return parent.parent is not None and parent.parent.type == "program", True
    return parent is not None and parent.type == "program", False


def _annotation(node: Any) -> str:
    """Type text of a ``type_annotation`` node without its leading colon."""
    text = node_text(node).strip()
    if text.startswith(":"):
        text = text[1:]
    return squash(text)


def _parameter(node: Any) -> str:
    type_node = node.child_by_field_name("type")
    text = _annotation(type_node) if type_node is not None else "any"
    pattern = node.child_by_field_name("pattern")
    if pattern is not None and pattern.type == "rest_pattern":
        text = f"...{text}"
    if node.type == "optional_parameter" or node.child_by_field_name("value") is not None:
        text = f"{text}?"
    return text


def signature(node: Any) -> str:
    """``(number, string?) => boolean``: parameter and return types only."""
    params_node = node.child_by_field_name("parameters")
    params = ", ".join(
        _parameter(child)
        for child in params_node.named_children
        if child.type in _PARAMETER_TYPES
    )
    sig = f"({params})"

    type_params = node.child_by_field_name("type_parameters")
    if type_params is not None:
        sig = squash(node_text(type_params)) + sig

    return_type = node.child_by_field_name("return_type")
    if return_type is not None:
        sig = f"{sig} => {_annotation(return_type)}"
    return sig


def _decorator_name(decorator: Any) -> str:
    """``Controller`` for both ``@Controller`` and ``@Controller('users')``."""
    for child in decorator.named_children:
        if child.type == "identifier":
            return node_text(child)
        if child.type == "call_expression":
            fn = child.child_by_field_name("function")
            if fn is not None and fn.type == "identifier":
                return node_text(fn)
    return ""


def _class_kind(class_node: Any) -> str:
    decorators = [c for c in class_node.children if c.type == "decorator"]
    parent = class_node.parent
    if parent is not None and parent.type == "export_statement":
        decorators.extend(c for c in parent.children if c.type == "decorator")
    for decorator in decorators:
        kind = _DECORATOR_KINDS.get(_decorator_name(decorator))
        if kind:
            return kind
    return "method"


def _method_start(node: Any) -> int:
    """First line of the method including decorators written above it."""
    start = node.start_point[0]
    sibling = node.prev_named_sibling
    while sibling is not None and sibling.type == "decorator":
        start = sibling.start_point[0]
        sibling = sibling.prev_named_sibling
    return start + 1


def _method_name(node: Any, name_node: Any) -> str:
    name = node_text(name_node)
    for child in node.children:
        if child.type in ("get", "set"):
            return f"{child.type} {name}"
    return name


def _is_hidden(node: Any, name_node: Any) -> bool:
    if name_node.type == "private_property_identifier":
        return True
    return any(
        child.type == "accessibility_modifier" and node_text(child) in _HIDDEN_MODIFIERS
        for child in node.children
    )


def extract_declarations(
    result: ParseResult, matches: list[Match], path: str
) -> list[DeclarationRecord]:
    package = module_path(path)
    language = result.pack.name
    records: list[DeclarationRecord] = []

    for _pattern_idx, captures in matches:
        node = captures["node"][0]
        name_node = captures["name"][0]

        if node.type in _FUNCTION_TYPES:
            module_level, exported = _is_module_level(node)
            if not module_level:
                continue
            start, end = line_span(node)
            records.append(
                DeclarationRecord(
                    package=package,
                    file=path,
                    name=node_text(name_node),
                    receiver="",
                    signature=signature(node),
                    exported=exported,
                    start_line=start,
                    end_line=end,
                    kind="function",
                    language=language,
                )
            )
            continue

        body = node.parent
        class_node = body.parent if body is not None else None
        if class_node is None or class_node.type not in _CLASS_TYPES:
            continue  # object literal or class expression
        module_level, class_exported = _is_module_level(class_node)
        class_name = class_node.child_by_field_name("name")
        if not module_level or class_name is None:
            continue

        records.append(
            DeclarationRecord(
                package=package,
                file=path,
                name=_method_name(node, name_node),
                receiver=node_text(class_name),
                signature=signature(node),
                exported=class_exported and not _is_hidden(node, name_node),
                start_line=_method_start(node),
                end_line=line_span(node)[1],
                kind=_class_kind(class_node),
                language=language,
            )
        )
    return records
