"""Javadoc synthesis."""

import textwrap
from typing import Iterable, List, Sequence

from .types import Parameter, TypeParameter

INHERIT_DOC = "{@inheritDoc}"


def normalize_text(documentation: str) -> str:
    """Dedent, strip and drop trailing whitespace of every line."""
    text = textwrap.dedent(documentation).strip("\n")
    return "\n".join(line.rstrip() for line in text.split("\n")).strip()


def _tag_text(documentation: str) -> str:
    # Tag descriptions are written on a single line
    return " ".join(documentation.split())


def to_javadoc(
    documentation: str,
    indent: str = "",
    *,
    type_parameters: Iterable[TypeParameter] = (),
    parameters: Iterable[Parameter] = (),
    return_doc: str = "",
    throws: Sequence[str] = (),
    see: Sequence[str] = (),
    since: str = "",
    authors: Sequence[str] = (),
) -> str:
    """
    Build a Javadoc comment.

    A single line of text without tags renders as ``/** text */``, anything
    else as a block. Tags are grouped and groups are separated by an empty
    comment line. Parameters without documentation are left out.

    Returns:
        The comment (without trailing newline), or an empty string if there
        is nothing to document.
    """
    text = normalize_text(documentation)

    groups: List[List[str]] = []

    params = [
        f"@param <{tp.name}> {_tag_text(tp.documentation)}"
        for tp in type_parameters
        if tp.documentation
    ]
    params.extend(
        f"@param {p.name} {_tag_text(p.documentation)}"
        for p in parameters
        if p.documentation
    )
    if params:
        groups.append(params)
    if return_doc:
        groups.append([f"@return {_tag_text(return_doc)}"])
    if throws:
        groups.append([f"@throws {_tag_text(t)}" for t in throws])
    if see:
        groups.append([f"@see {s}" for s in see])
    if since:
        groups.append([f"@since {since}"])
    if authors:
        groups.append([f"@author {a}" for a in authors])

    if not text and not groups:
        return ""

    text_lines = text.split("\n") if text else []
    if len(text_lines) == 1 and not groups:
        return f"{indent}/** {text} */"

    body = list(text_lines)
    for group in groups:
        if body:
            body.append("")
        body.extend(group)

    lines = [f"{indent}/**"]
    lines.extend(f"{indent} * {line}" if line else f"{indent} *" for line in body)
    lines.append(f"{indent} */")
    return "\n".join(lines)
