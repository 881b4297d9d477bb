"""
Markdown rendering of the command tree.

The output is meant to be pasted into README.md as the CLI reference, so the
layout follows what GitHub and crates-style package indexes render well.
"""

import re
from dataclasses import dataclass

from azs.core.commands import CommandNode

PROJECT_DESCRIPTION = (
    "Interact with Azure Storage accounts, containers, blobs, queues, "
    "datalakes and tables from the command line"
)


@dataclass(frozen=True)
class ReadmeSettings:
    binary_name: str = "azure-storage-cli"
    alias: str = "azs"
    executable_suffix: str = ".exe"
    title: str = "Azure Storage CLI"
    description: str = PROJECT_DESCRIPTION
    # Markdown hosts stop nesting headings after h6.
    max_heading_depth: int = 6


def display_name(names: list[str], node: CommandNode) -> list[str]:
    """Ancestor tokens, the node name and one <POSITIONAL> per positional."""
    return [
        *names,
        node.name,
        *(f"<{positional.upper()}>" for positional in node.positionals),
    ]


def render(
    node: CommandNode,
    names: list[str] | None = None,
    depth: int = 1,
    max_heading_depth: int = 6,
) -> str:
    """
    Renders a node and its visible descendants as nested Markdown sections.

    Args:
        node: Subtree root to render.
        names: Display tokens of the ancestors.
        depth: Number of nodes on the path, this one included.
        max_heading_depth: Deeper nodes reuse this heading level.
    """
    tokens = display_name(names or [], node)
    heading = "#" * min(depth, max_heading_depth)

    sections = [f"{heading} {' '.join(tokens)}\n\n```\n{node.usage}\n```\n"]
    for child in node.children.values():
        if child.is_hidden:
            continue
        sections.append(render(child, tokens, depth + 1, max_heading_depth))
    return "".join(sections)


def postprocess(document: str, settings: ReadmeSettings) -> str:
    document = document.replace(settings.binary_name, settings.alias)
    document = document.replace(
        f"{settings.alias}{settings.executable_suffix}", settings.alias
    )

    document = re.sub(
        rf"^# {re.escape(settings.alias)}$",
        lambda _: f"# {settings.title}\n\n{settings.description}",
        document,
        count=1,
        flags=re.MULTILINE,
    )

    document = "\n".join(line.rstrip() for line in document.split("\n"))
    return document.replace("\n\n\n", "\n\n")


def render_readme(root: CommandNode, settings: ReadmeSettings | None = None) -> str:
    settings = settings or ReadmeSettings()
    return postprocess(
        render(root, max_heading_depth=settings.max_heading_depth), settings
    )
