"""
Java code generator implementation.

Renders a populated :class:`~beangen.codegen.java.model.JavaType` into the
source text of one compilation unit. Members are walked in canonical order;
every change of category opens a new section, titled categories get a
three line banner.
"""

import textwrap
from dataclasses import replace
from typing import List, Optional, Tuple

from ...logging_config import get_logger
from ..core.config import GeneratorConfig, load_config
from ..core.generator import CodeGenerator
from ..core.templates import COMPILATION_UNIT, TemplateEngine
from .imports import format_imports
from .javadoc import INHERIT_DOC, to_javadoc
from .members import Category, Constructor, Field, Method
from .model import JavaClass, JavaType

logger = get_logger(__name__)


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes and interfaces."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        template_engine: Optional[TemplateEngine] = None,
    ):
        super().__init__(config, template_engine)
        self.indent_unit = self.config.indent

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def generate(self, target: JavaType) -> str:
        """Render a top-level type as a complete source file."""
        if target.enclosing is not None:
            raise ValueError(
                f"{target.qualified_name} is a nested type; render its outermost type instead"
            )

        logger.debug("Rendering %s", target.qualified_name)

        context = {
            "header": self.config.copyright_header,
            "package_name": target.package,
            "imports": self.import_lines(target),
            "body": "\n".join(self.type_lines(target)),
        }
        return self.render_template(COMPILATION_UNIT, context)

    def collect_warnings(self, target: JavaType) -> List[str]:
        return list(target.warnings)

    # Imports

    def import_lines(self, target: JavaType) -> List[str]:
        entries = target.imports.resolve(
            self.config.wildcard_import_threshold, self.config.implicit_packages
        )
        return format_imports(entries, self.config.import_group_prefixes)

    # Types

    def declaration(self, target: JavaType) -> str:
        """Declaration header of a type, without the opening brace."""
        name = target.name
        if target.type_parameters:
            name += f"<{', '.join(str(tp) for tp in target.type_parameters)}>"

        keyword = "class" if isinstance(target, JavaClass) else "interface"
        header = " ".join(part for part in (target.modifier_text, keyword, name) if part)

        if isinstance(target, JavaClass):
            if target.superclass is not None:
                header += f" extends {target.superclass}"
            if target.interfaces:
                header += f" implements {', '.join(str(i) for i in target.interfaces)}"
        elif target.interfaces:
            header += f" extends {', '.join(str(i) for i in target.interfaces)}"

        return header

    def type_lines(self, target: JavaType, indent: str = "") -> List[str]:
        lines = []

        doc = to_javadoc(
            target.documentation,
            indent,
            type_parameters=target.type_parameters,
            see=target.see,
            since=target.since,
            authors=target.authors,
        )
        if doc:
            lines.extend(doc.split("\n"))
        lines.extend(f"{indent}{annotation}" for annotation in target.annotations)

        members = target.members
        if not members:
            lines.append(f"{indent}{self.declaration(target)} {{}}")
            return lines

        lines.append(f"{indent}{self.declaration(target)} {{")
        lines.append("")

        sub_indent = indent + self.indent_unit
        previous_category = ""
        last_line_blank = True

        for member in members:
            if member.category != previous_category:
                category = Category.parse(member.category)

                if category.title:
                    if not last_line_blank:
                        lines.append("")
                    lines.extend(self.banner(category.title, sub_indent))
                    lines.append("")
                elif not last_line_blank:
                    lines.append("")

                previous_category = member.category

            member_lines, last_line_blank = self.member_lines(member, sub_indent)
            lines.extend(member_lines)

        lines.append(f"{indent}}}")
        return lines

    def banner(self, title: str, indent: str) -> List[str]:
        """Three comment lines of exactly ``banner_width`` characters."""
        width = self.config.banner_width
        room = max(0, width - len(indent) - 6)
        title = title[:room]

        divider = f"{indent}// " + "#" * max(0, width - len(indent) - 3)
        titled = f"{indent}// # {title} " + "#" * max(0, width - len(indent) - len(title) - 6)
        return [divider, titled, divider]

    # Members

    def member_lines(self, member, indent: str) -> Tuple[List[str], bool]:
        """
        Render one member.

        Returns:
            The lines and whether the last of them is blank
        """
        if isinstance(member, JavaType):
            return self.type_lines(member, indent) + [""], True
        if isinstance(member, Field):
            return self.field_lines(member, indent), False
        return self.executable_lines(member, indent), True

    def field_lines(self, member: Field, indent: str) -> List[str]:
        lines = []

        doc = to_javadoc(
            member.documentation,
            indent,
            see=member.options.see,
            since=member.options.since,
        )
        if doc:
            lines.extend(doc.split("\n"))
        lines.extend(f"{indent}{a}" for a in member.options.annotations)

        declaration = " ".join(
            part for part in (member.modifier_text, str(member.type), member.name) if part
        )
        if member.value:
            declaration += f" = {member.value}"
        lines.append(f"{indent}{declaration};")

        return lines

    def executable_lines(self, member, indent: str) -> List[str]:
        options = member.options
        lines = []

        documentation = member.documentation
        if not documentation and any(a.type.name == "Override" for a in options.annotations):
            documentation = INHERIT_DOC

        doc = to_javadoc(
            documentation,
            indent,
            type_parameters=options.type_parameters,
            parameters=member.parameters,
            return_doc=member.return_doc if isinstance(member, Method) else "",
            throws=options.throws,
            see=options.see,
            since=options.since,
        )
        if doc:
            lines.extend(doc.split("\n"))
        lines.extend(f"{indent}{a}" for a in options.annotations)

        parts = [member.modifier_text]
        if options.type_parameters:
            parts.append(f"<{', '.join(str(tp) for tp in options.type_parameters)}>")
        if not isinstance(member, Constructor):
            parts.append(str(member.return_type))
        parts.append(member.name)

        declaration = " ".join(part for part in parts if part)
        declaration += f"({', '.join(str(p) for p in member.parameters)})"

        if member.body is None:
            lines.append(f"{indent}{declaration};")
        else:
            body_lines = self.body_lines(member.body, indent + self.indent_unit)
            if body_lines:
                lines.append(f"{indent}{declaration} {{")
                lines.extend(body_lines)
                lines.append(f"{indent}}}")
            else:
                lines.append(f"{indent}{declaration} {{}}")

        lines.append("")
        return lines

    def body_lines(self, body: str, indent: str) -> List[str]:
        """Trim surrounding blank lines, dedent and re-indent a body."""
        raw = body.split("\n")
        while raw and not raw[0].strip():
            raw.pop(0)
        while raw and not raw[-1].strip():
            raw.pop()
        if not raw:
            return []

        text = textwrap.dedent("\n".join(raw))
        return [indent + line.rstrip() if line.strip() else "" for line in text.split("\n")]


def create_java_generator(
    config: Optional[GeneratorConfig] = None, **overrides
) -> JavaGenerator:
    """
    Create a Java generator.

    Args:
        config: Base configuration; defaults are loaded when omitted
        **overrides: Individual configuration values to override

    Returns:
        Configured JavaGenerator instance
    """
    if overrides:
        config = replace(config, **overrides) if config else load_config(overrides)
    return JavaGenerator(config)
