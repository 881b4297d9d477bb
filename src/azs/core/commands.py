"""
Command tree model.

The Typer application is the single declaration of the CLI surface. This module
compiles the Click command behind it into an immutable tree of CommandNode
records, so documentation and introspection never need a live parser.
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import typer

from azs.core.errors import CommandNotFoundError

DEFAULT_TERMINAL_WIDTH = 80


@dataclass(frozen=True)
class CommandNode:
    name: str
    usage: str = ""
    positionals: tuple[str, ...] = ()
    children: Mapping[str, "CommandNode"] = field(
        default_factory=lambda: MappingProxyType({})
    )
    is_hidden: bool = False

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(
        self, path: tuple[str, ...] = ()
    ) -> Iterator[tuple[tuple[str, ...], "CommandNode"]]:
        """Pre-order walk over every node, hidden ones included."""
        path = (*path, self.name)
        yield path, self
        for child in self.children.values():
            yield from child.walk(path)

    def leaves(self) -> Iterator[tuple[tuple[str, ...], "CommandNode"]]:
        for path, node in self.walk():
            if node.is_leaf:
                yield path, node

    def find(self, names: Sequence[str]) -> "CommandNode":
        """
        Looks up a descendant by its name path (root name excluded).
        Raises KeyError if any segment is missing.
        """
        node = self
        for name in names:
            node = node.children[name]
        return node

    def resolve(self, tokens: Sequence[str]) -> "CommandPath":
        """
        Resolves command tokens (root name excluded) to a leaf.

        Each node consumes one token per declared positional, then the next
        token must name one of its children. Tokens starting with "-" are
        skipped, so callers must strip option values themselves. Anything left
        after the leaf's own positionals is not interpreted.
        """
        remaining = iter(token for token in tokens if not token.startswith("-"))
        node = self
        names = [self.name]
        arguments: list[tuple[str, str]] = []

        while True:
            for positional in node.positionals:
                value = next(remaining, None)
                if value is None:
                    raise CommandNotFoundError(
                        list(tokens), f"Missing value for {positional.upper()}"
                    )
                arguments.append((positional, value))

            if node.is_leaf:
                return CommandPath(
                    names=tuple(names), arguments=tuple(arguments), node=node
                )

            token = next(remaining, None)
            if token is None:
                raise CommandNotFoundError(
                    list(tokens), f"'{' '.join(names)}' requires a subcommand"
                )
            if token not in node.children:
                raise CommandNotFoundError(list(tokens), f"No such command '{token}'")

            node = node.children[token]
            names.append(token)


@dataclass(frozen=True)
class CommandPath:
    """The selected leaf, the names leading to it and its captured positionals."""

    names: tuple[str, ...]
    arguments: tuple[tuple[str, str], ...] = ()
    node: CommandNode | None = None

    @classmethod
    def from_context(cls, ctx: typer.Context) -> "CommandPath":
        contexts = []
        while ctx is not None:
            contexts.append(ctx)
            ctx = ctx.parent
        contexts.reverse()

        names = tuple(c.info_name or c.command.name or "" for c in contexts)
        arguments = tuple(
            (param.name, str(c.params.get(param.name)))
            for c in contexts
            for param in _arguments(c.command)
        )
        return cls(names=names, arguments=arguments)

    def __str__(self) -> str:
        return " ".join(self.names)


# Typer may ship its own copy of Click, so commands and parameters are
# recognised by behaviour rather than by Click class.
def _is_group(command: Any) -> bool:
    return callable(getattr(command, "list_commands", None))


def _arguments(command: Any) -> list[Any]:
    return [param for param in command.params if param.param_type_name == "argument"]


def compile_command_tree(
    command: Any,
    info_name: str,
    terminal_width: int = DEFAULT_TERMINAL_WIDTH,
) -> CommandNode:
    """
    Builds the CommandNode tree for the Click command behind a Typer app.

    Help text is rendered with a fixed width so the result is identical on
    every machine. Raises CommandNotFoundError if a compiled leaf cannot be
    reached by resolve().
    """
    ctx = command.context_class(
        command,
        info_name=info_name,
        terminal_width=terminal_width,
        max_content_width=terminal_width,
    )
    root = _compile(command, ctx)
    check_reachable(root)
    return root


def _compile(command: Any, ctx: Any) -> CommandNode:
    children: dict[str, CommandNode] = {}

    if _is_group(command):
        for name in command.list_commands(ctx):
            subcommand = command.get_command(ctx, name)
            if subcommand is None:
                continue
            sub_ctx = subcommand.context_class(subcommand, info_name=name, parent=ctx)
            children[name] = _compile(subcommand, sub_ctx)

    return CommandNode(
        name=ctx.info_name,
        usage=command.get_help(ctx),
        positionals=tuple(param.name for param in _arguments(command)),
        children=MappingProxyType(children),
        is_hidden=command.hidden,
    )


def sample_tokens(root: CommandNode, path: Sequence[str]) -> list[str]:
    """
    Tokens that select the node at path (root name included), with a
    placeholder for every positional on the way.
    """
    tokens = [f"<{positional}>" for positional in root.positionals]
    for depth in range(1, len(path)):
        node = root.find(path[1 : depth + 1])
        tokens.append(path[depth])
        tokens.extend(f"<{positional}>" for positional in node.positionals)
    return tokens


def check_reachable(root: CommandNode):
    for path, node in root.leaves():
        tokens = sample_tokens(root, path)
        if root.resolve(tokens).node is not node:
            raise CommandNotFoundError(tokens, "Unreachable command")
