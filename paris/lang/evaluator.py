"""Tree-walking evaluation of paris programs."""

from paris.lang.values import UNIT


class Evaluator:
    """Executes a Program against an Environment. Every display statement hands exactly one line to emit (a callable
    taking a str) before the next statement runs. The first error raised aborts the rest of the program.

    Runtime errors are reported at the position of the statement being executed.
    """

    def __init__(self, environment, emit):
        self.environment = environment
        self.emit = emit
        self.statement = None  # statement currently executing

    def execute(self, program):
        """Runs the statements of program in source order and returns the list of their result values."""
        return [self.execute_statement(statement) for statement in program]

    def execute_statement(self, statement):
        self.statement = statement
        try:
            return self._visit(statement)
        finally:
            self.statement = None

    def evaluate(self, expression):
        """Returns the value of expression."""
        return self._visit(expression)

    @property
    def position(self):
        """Position runtime errors are reported at: the current statement's, or (outside of any statement, as when
        evaluate is called directly) None.
        """
        return self.statement.position if self.statement is not None else None

    def _visit(self, node):
        method = getattr(self, f"visit_{type(node).__name__}", None)
        if method is None:
            raise NotImplementedError(f"cannot evaluate {type(node).__name__}")
        return method(node)

    def visit_AssignmentStatement(self, node):
        value = self.evaluate(node.value)
        self.environment.assign(node.name.name, value)
        return UNIT

    def visit_DisplayStatement(self, node):
        value = self.evaluate(node.value)
        self.emit(value.render())
        return UNIT

    def visit_Identifier(self, node):
        return self.environment.lookup(node.name, self.position or node.position)

    def visit_Literal(self, node):
        return node.value
