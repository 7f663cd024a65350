"""Variable scopes for paris language."""

from paris.lang.error import UndefinedVariable


class Environment:
    """Maps variable names to values. parent is the enclosing scope: it is only consulted by lookup, never written to
    or owned. Programs currently run in a single global scope (an Environment without parent).
    """

    def __init__(self, parent=None):
        self.bindings = {}
        self.parent = parent

    def assign(self, name, value):
        """Binds name to value in this scope, overwriting any previous binding of name in this scope."""
        self.bindings[name] = value

    def lookup(self, name, position=None):
        """Returns the value bound to name in the nearest scope defining it. Raises UndefinedVariable if there is
        none.
        """
        scope = self
        while scope is not None:
            if name in scope.bindings:
                return scope.bindings[name]
            scope = scope.parent
        raise UndefinedVariable(name, position)

    def child(self):
        """Returns a new scope enclosed by this one, e.g. for a block or function body."""
        return Environment(self)

    def __contains__(self, name):
        return name in self.bindings or (self.parent is not None and name in self.parent)

    def __len__(self):
        return len(self.bindings)

    def __repr__(self):
        return f"Environment({self.bindings!r})"
