'''
Evaluation of integer arithmetic expressions through an expression tree

The expression is tokenized, reordered into postfix with the shunting-yard
algorithm, built into a binary tree and the tree is evaluated in post-order
'''

import enum
import logging
from collections import deque, namedtuple

logger = logging.getLogger(__name__)

# operand count of every operator node
ARITY = 2


class Kind (enum.Enum):
    '''
    The types of token that can appear in an expression
    '''
    number = 1
    operator = 2
    identifier = 3
    left_paren = 4
    right_paren = 5


class Operator (enum.Enum):
    '''
    The supported binary operators
    '''
    add = '+'
    sub = '-'
    mul = '*'
    div = '/'

    def apply(self, a, b):
        '''
        Applies the operator to its left and right operand
        '''
        if self is Operator.add:
            return a + b
        elif self is Operator.sub:
            return a - b
        elif self is Operator.mul:
            return a * b
        else:
            if b == 0:
                raise DivisionByZero('Division by zero')
            try:
                return a / b
            except OverflowError:
                raise NumberTooLarge('Division result is too large for a float')


# operator: (precedence, left associative)
# - and / group right to left
operations = {
    Operator.add.value: (0, True),
    Operator.sub.value: (0, False),
    Operator.mul.value: (1, True),
    Operator.div.value: (1, False),
}

parens = {
    '(': Kind.left_paren,
    ')': Kind.right_paren,
}


class EquationError (Exception):
    pass


class MismatchedParentheses (EquationError):
    pass


class InsufficientOperands (EquationError):
    pass


class MalformedExpression (EquationError):
    pass


class UnboundIdentifier (EquationError):
    pass


class DivisionByZero (EquationError):
    pass


class InvalidNumberLiteral (EquationError):
    pass


class NumberTooLarge (EquationError):
    pass


class Token (namedtuple('Token', ['text', 'kind', 'precedence', 'left_associative'])):
    '''
    A single piece of an expression

    precedence and left_associative only mean something for operators
    '''
    __slots__ = ()

    def __new__(cls, text, kind, precedence=0, left_associative=False):
        return super().__new__(cls, text, kind, precedence, left_associative)

    @classmethod
    def operator(cls, text):
        '''
        Creates an operator token from the operator table
        '''
        precedence, left_associative = operations[text]
        return cls(text, Kind.operator, precedence, left_associative)

    @classmethod
    def operand(cls, text):
        '''
        Creates a number token if text is all digits, otherwise an identifier
        '''
        kind = Kind.number if text.isdigit() else Kind.identifier
        return cls(text, kind)

    def __str__(self):
        return self.text


class Node:
    '''
    A token and the subtrees of its operands
    '''
    __slots__ = ('token', 'children')

    def __init__(self, token, children=()):
        self.token = token
        self.children = tuple(children)

    def __repr__(self):
        if not self.children:
            return 'Node({!r})'.format(self.token.text)
        return 'Node({!r}, {})'.format(self.token.text, ', '.join(map(repr, self.children)))


def tokenize(expression):
    '''
    Splits an expression into a queue of tokens

    Anything that isn't an operator or a parenthesis accumulates into
    a number or identifier
    '''
    tokens = deque()
    pending = []

    def flush():
        if pending:
            tokens.append(Token.operand(''.join(pending)))
            pending.clear()

    for char in expression:
        if char in operations:
            flush()
            tokens.append(Token.operator(char))
        elif char in parens:
            flush()
            tokens.append(Token(char, parens[char]))
        else:
            pending.append(char)
    flush()

    return tokens


def infix2postfix(tokens):
    '''
    Reorders a queue of infix tokens into postfix with the shunting-yard algorithm

    The input queue is consumed
    '''
    stack = []
    output = deque()

    while tokens:
        token = tokens.popleft()
        if token.kind in (Kind.number, Kind.identifier):
            output.append(token)
        elif token.kind == Kind.operator:
            while stack and stack[-1].kind in (Kind.operator, Kind.right_paren) and (
                    stack[-1].precedence > token.precedence or
                    (stack[-1].precedence == token.precedence and token.left_associative)):
                output.append(stack.pop())
            stack.append(token)
        elif token.kind == Kind.left_paren:
            stack.append(token)
        elif token.kind == Kind.right_paren:
            while stack and stack[-1].kind != Kind.left_paren:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParentheses('Missing open parenthesis')
            stack.pop()

    while stack:
        token = stack.pop()
        if token.kind == Kind.left_paren:
            raise MismatchedParentheses('Missing closing parenthesis')
        output.append(token)

    return output


def build_tree(postfix):
    '''
    Builds an expression tree from a queue of postfix tokens

    The input queue is consumed, returns the root node
    '''
    pending = []

    while postfix:
        token = postfix.popleft()
        if token.kind == Kind.operator:
            if len(pending) < ARITY:
                raise InsufficientOperands('Not enough operands for {}'.format(token))
            children = pending[-ARITY:]
            del pending[-ARITY:]
            pending.append(Node(token, children))
        else:
            pending.append(Node(token))

    if len(pending) != 1:
        raise MalformedExpression('Expected a single expression, found {}'.format(len(pending)))

    return pending[0]


def evaluate_tree(root):
    '''
    Evaluates an expression tree in post-order

    Uses an explicit stack so long operator chains don't hit the recursion limit,
    children are evaluated left to right
    '''
    values = []
    stack = [(root, False)]

    while stack:
        node, visited = stack.pop()
        token = node.token
        if token.kind == Kind.number:
            try:
                values.append(int(token.text))
            except ValueError:
                raise InvalidNumberLiteral('Invalid number: {}'.format(token))
        elif token.kind == Kind.identifier:
            raise UnboundIdentifier('Could not find: {}'.format(token))
        elif token.kind == Kind.operator:
            if visited:
                b, a = values.pop(), values.pop()
                values.append(Operator(token.text).apply(a, b))
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in reversed(node.children))
        else:
            raise MalformedExpression('Unexpected token: {}'.format(token))

    return values.pop()


def postfix_text(expression):
    '''
    Gets the postfix form of an expression as space separated tokens
    '''
    return ' '.join(map(str, infix2postfix(tokenize(expression))))


def evaluate(expression):
    '''
    Evaluates an infix expression

    Raises a subclass of EquationError if the expression is invalid
    '''
    postfix = infix2postfix(tokenize(expression))
    logger.debug('%s -> %s', expression, ' '.join(map(str, postfix)))
    value = evaluate_tree(build_tree(postfix))
    try:
        return float(value)
    except OverflowError:
        raise NumberTooLarge('Result is too large for a float')


if __name__ == '__main__':
    expression = input('Eq: ')
    print(postfix_text(expression))
    print(evaluate(expression))
