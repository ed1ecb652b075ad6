'''Integer arithmetic expression evaluator

Expressions are evaluated by building and walking an expression tree,
see parsetree.equations
'''

from .equations import (
    EquationError,
    MismatchedParentheses,
    InsufficientOperands,
    MalformedExpression,
    UnboundIdentifier,
    DivisionByZero,
    InvalidNumberLiteral,
    NumberTooLarge,
    evaluate,
    postfix_text,
)
