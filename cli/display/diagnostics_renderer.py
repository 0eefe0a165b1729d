"""Diagnostics renderer for inspecting style objects."""

from rich.table import Table
from rich.tree import Tree

from calview.diagnostics import Diagnosticable
from calview.models.view_header_style import ViewHeaderStyle
from cli.display.console import console
from cli.display.formatters import format_property, format_value


class DiagnosticsRenderer:
    """Render diagnosticable objects.

    Provides two view modes:
    - Tree view: nested properties as a Rich tree
    - Table view: flat table, nested properties use dotted names
    """

    def render(
        self, target: Diagnosticable, view: str = "tree", show_defaults: bool = True
    ) -> None:
        """Render an object in the requested view mode."""
        if view == "table":
            self.render_table(target, show_defaults)
        else:
            self.render_tree(target, show_defaults)

    def render_tree(self, target: Diagnosticable, show_defaults: bool = True) -> None:
        """Render properties as a tree.

        Args:
            target: Object to describe.
            show_defaults: If False, hide properties still at their default.
        """
        tree = Tree(f"[bold]{target.to_string_short()}[/bold]")
        self._add_branches(tree, target, show_defaults)
        console.print(tree)

    def render_table(self, target: Diagnosticable, show_defaults: bool = True) -> None:
        """Render properties as a flat table.

        Args:
            target: Object to describe.
            show_defaults: If False, hide properties still at their default.
        """
        table = Table(
            title=target.to_string_short(),
            show_header=True,
            header_style="bold",
            box=None,
            padding=(0, 2),
        )
        table.add_column("PROPERTY", style="cyan", no_wrap=True)
        table.add_column("VALUE")

        for name, value in self._flatten(target, show_defaults):
            table.add_row(name, value)

        console.print(table)

    def render_comparison(self, left: ViewHeaderStyle, right: ViewHeaderStyle) -> None:
        """Render equality, hashes and per-field differences of two styles."""
        equal = left == right
        console.print()
        console.print("━" * 50)
        verdict = "[green]equal[/green]" if equal else "[red]different[/red]"
        console.print(f"[bold]  ViewHeaderStyle comparison:[/bold] {verdict}")
        console.print("━" * 50)
        console.print(f"  {'left hash':<12} {hash(left)}")
        console.print(f"  {'right hash':<12} {hash(right)}")

        if equal:
            console.print()
            return

        table = Table(show_header=True, header_style="bold", box=None, padding=(0, 2))
        table.add_column("FIELD", style="cyan", no_wrap=True)
        table.add_column("LEFT")
        table.add_column("RIGHT")

        right_values = right.to_diagnostics()
        for name, left_value in left.to_diagnostics().items():
            right_value = right_values[name]
            if left_value != right_value:
                table.add_row(name, format_value(left_value), format_value(right_value))

        console.print()
        console.print(table)
        console.print()

    def _add_branches(
        self, branch: Tree, target: Diagnosticable, show_defaults: bool
    ) -> None:
        for prop in target.debug_properties():
            if not show_defaults and prop.is_default:
                continue
            child = branch.add(format_property(prop))
            if isinstance(prop.value, Diagnosticable):
                self._add_branches(child, prop.value, show_defaults)

    def _flatten(
        self, target: Diagnosticable, show_defaults: bool, prefix: str = ""
    ) -> list[tuple[str, str]]:
        rows = []
        for prop in target.debug_properties():
            if not show_defaults and prop.is_default:
                continue
            name = f"{prefix}{prop.name}"
            if isinstance(prop.value, Diagnosticable):
                rows.extend(self._flatten(prop.value, show_defaults, f"{name}."))
            else:
                rows.append((name, format_value(prop.value)))
        return rows
