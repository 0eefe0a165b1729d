"""Diagnostics properties for inspecting style objects.

A diagnosticable object describes itself as an ordered list of labelled
properties. Tooling (the CLI renderers, tests, log output) walks that list
instead of poking at model internals, so nested values such as a text style
inside a view header style are printed the same way at every level.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class DiagnosticsProperty:
    """A single labelled value exposed for debugging."""

    name: str
    value: Any
    default_value: Any = None

    @property
    def is_default(self) -> bool:
        return self.value == self.default_value

    def describe(self) -> str:
        """Short, single-line description of the value."""
        if self.value is None:
            return "null"
        if isinstance(self.value, Diagnosticable):
            return self.value.to_string_short()
        return str(self.value)


@dataclass(frozen=True)
class ColorProperty(DiagnosticsProperty):
    """Property whose value is a Color, described as ``Color(0xaarrggbb)``."""

    def describe(self) -> str:
        if self.value is None:
            return "null"
        return f"Color(0x{self.value.value:08x})"


@dataclass
class DiagnosticPropertiesBuilder:
    """Collects properties in the order they are added."""

    properties: list[DiagnosticsProperty] = field(default_factory=list)

    def add(self, prop: DiagnosticsProperty) -> None:
        self.properties.append(prop)


class Diagnosticable:
    """Mixin for objects that describe themselves as labelled properties.

    Subclasses override :meth:`debug_fill_properties` and call the parent
    implementation first.
    """

    def debug_fill_properties(self, properties: DiagnosticPropertiesBuilder) -> None:
        pass

    def debug_properties(self) -> list[DiagnosticsProperty]:
        builder = DiagnosticPropertiesBuilder()
        self.debug_fill_properties(builder)
        return builder.properties

    def to_diagnostics(self) -> dict[str, Any]:
        """Plain ``{name: value}`` mapping for generic pretty-printers."""
        return {prop.name: prop.value for prop in self.debug_properties()}

    def to_string_short(self) -> str:
        return type(self).__name__

    def to_string_deep(self, show_defaults: bool = True, indent: str = "  ") -> str:
        """Multi-line description including nested diagnosticable values.

        Args:
            show_defaults: If False, omit properties still at their default.
            indent: Indentation added per nesting level.
        """
        lines = [self.to_string_short()]
        self._append_property_lines(lines, show_defaults, indent, depth=1)
        return "\n".join(lines)

    def _append_property_lines(
        self, lines: list[str], show_defaults: bool, indent: str, depth: int
    ) -> None:
        for prop in self.debug_properties():
            if not show_defaults and prop.is_default:
                continue
            lines.append(f"{indent * depth}{prop.name}: {prop.describe()}")
            if isinstance(prop.value, Diagnosticable):
                prop.value._append_property_lines(
                    lines, show_defaults, indent, depth + 1
                )
