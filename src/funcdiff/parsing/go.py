"""Go declaration rules.

Functions and methods come from top-level ``function_declaration`` and
``method_declaration`` nodes. The package path is the file's directory joined
with the name in its ``package`` clause.
"""

from __future__ import annotations

import posixpath
from typing import Any

from funcdiff.diff.models import DeclarationRecord
from funcdiff.parsing.treesitter import Match, ParseResult, line_span, node_text, squash


def package_path(path: str, package_name: str) -> str:
    """``dir/pkgname``, or ``pkgname`` for files at the repository root."""
    directory = posixpath.dirname(path)
    return posixpath.join(directory, package_name) if directory else package_name


def declared_package(root: Any) -> str:
    for child in root.named_children:
        if child.type == "package_clause":
            for sub in child.named_children:
                if sub.type == "package_identifier":
                    return node_text(sub)
    return ""


def is_exported(name: str) -> bool:
    return bool(name) and name[0].isupper()


def _parameter_types(param_list: Any) -> list[str]:
    """One entry per declared parameter; ``a, b int`` yields two."""
    types: list[str] = []
    for child in param_list.named_children:
        type_text = squash(node_text(child.child_by_field_name("type")))
        if child.type == "parameter_declaration":
            names = child.children_by_field_name("name")
            types.extend([type_text] * max(1, len(names)))
        elif child.type == "variadic_parameter_declaration":
            types.append(f"...{type_text}")
    return types


def signature(node: Any) -> str:
    """``(int, string) (error)``: parameter and result types only."""
    params = ", ".join(_parameter_types(node.child_by_field_name("parameters")))
    sig = f"({params})"

    type_params = node.child_by_field_name("type_parameters")
    if type_params is not None:
        sig = squash(node_text(type_params)) + sig

    result = node.child_by_field_name("result")
    if result is None:
        return sig
    if result.type == "parameter_list":
        results = ", ".join(_parameter_types(result))
    else:
        results = squash(node_text(result))
    return f"{sig} ({results})"


def receiver_type(receiver_list: Any) -> str:
    """``*T`` or ``T``; pointer and value receivers stay distinct."""
    for child in receiver_list.named_children:
        if child.type == "parameter_declaration":
            return squash(node_text(child.child_by_field_name("type")))
    return ""


def extract_declarations(
    result: ParseResult, matches: list[Match], path: str
) -> list[DeclarationRecord]:
    package = package_path(path, declared_package(result.root_node))
    records: list[DeclarationRecord] = []
    for _pattern_idx, captures in matches:
        node = captures["node"][0]
        name = node_text(captures["name"][0])
        receiver_nodes = captures.get("receiver")
        receiver = receiver_type(receiver_nodes[0]) if receiver_nodes else ""
        start, end = line_span(node)
        records.append(
            DeclarationRecord(
                package=package,
                file=path,
                name=name,
                receiver=receiver,
                signature=signature(node),
                exported=is_exported(name),
                start_line=start,
                end_line=end,
                kind="method" if receiver_nodes else "function",
                language=result.pack.name,
            )
        )
    return records
