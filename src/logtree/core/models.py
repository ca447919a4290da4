"""Core domain models for writer-tree configuration."""

import weakref
from dataclasses import dataclass, field

from logtree.core.errors import ConfigShapeError

ROOT_NAME = "logs"

# Routing categories, in the order they are reported.
SEVERITIES = ("trace", "debug", "info", "warn", "error", "critical")


@dataclass(eq=False)
class ConfigNode:
    """A parsed configuration element.

    Attributes:
        name: Element name. For non-root nodes this is a writer type name.
        attrs: Element attributes.
        children: Child elements keyed by name, in document order.
    """

    name: str
    attrs: dict[str, str] = field(default_factory=dict)
    children: dict[str, "ConfigNode"] = field(default_factory=dict)
    _parent: "weakref.ReferenceType[ConfigNode] | None" = field(
        default=None, repr=False
    )

    @property
    def parent(self) -> "ConfigNode | None":
        """The enclosing node, or None for a root (or a collected parent)."""
        if self._parent is None:
            return None
        return self._parent()

    def add_child(self, child: "ConfigNode") -> "ConfigNode":
        """Attach a child node.

        Args:
            child: Node to attach. Its name must be unique among siblings.

        Returns:
            The attached child, for chaining.

        Raises:
            ConfigShapeError: If a sibling with the same name exists.
        """
        if child.name in self.children:
            raise ConfigShapeError(
                f"duplicate element <{child.name}> inside <{self.name}>"
            )
        child._parent = weakref.ref(self)
        self.children[child.name] = child
        return child

    def path(self) -> str:
        """Slash separated names from the root down to this node."""
        names = [self.name]
        node = self.parent
        while node is not None:
            names.append(node.name)
            node = node.parent
        return "/".join(reversed(names))


def node(name: str, attrs: dict[str, str] | None = None, *children: ConfigNode) -> ConfigNode:
    """Build a ConfigNode tree in code.

    Args:
        name: Element name.
        attrs: Optional attribute mapping.
        *children: Child nodes, attached in order.

    Returns:
        The new node with its children attached.
    """
    result = ConfigNode(name=name, attrs=dict(attrs or {}))
    for child in children:
        result.add_child(child)
    return result
