# nelmead

Minimise a function of several variables with the Nelder-Mead simplex
method. The function is given as a plain text expression, for example
`(x1 - 3)^2 + (x2 + 1)^2`, so it can come straight from a command line.

## Installation

```
pip install .
```

The package has no dependencies outside the standard library. To run the
test suite:

```
pip install ".[test]"
pytest
```

## Expressions

An expression is built from:

- variables `x1`, `x2`, ... `xn`, numbered from 1 without gaps; the highest
  number is the dimension of the problem;
- numbers such as `2`, `0.5` or `1e3`. The characters `+` and `-` always
  split tokens, so an exponent with a sign (`1e-3`) is not a number;
- the binary operators `+`, `-`, `*`, `/` and `^` (power), and a leading
  unary minus as in `-x1` or `-(x1 + 1)`;
- the functions `sin`, `cos`, `tan`, `ctg`, `ln`, `log2`, `log` (base 10),
  `sqrt` and `abs`, written before their argument in parentheses, e.g.
  `sqrt(x1)`;
- parentheses, which must balance.

Note that `tan` evaluates the arc tangent of its argument and `ctg` the
reciprocal of that arc tangent.

`nelmead.algebra.ExpressionError` (a `ValueError`) is raised for an empty
expression, unbalanced parentheses, a missing operand, an invalid number or
variable, a variable index beyond the point's coordinates, division by zero,
`ctg(0)` and logarithms of negative numbers. The logarithm of zero is
`-inf` and the square root of a negative number is `nan`.

## Evaluating an expression

```python
from nelmead.function import Function
from nelmead.point import Point

f = Function("x1^2 + 2 * x2")
print(f(Point([3.0, 1.0])))            # 11.0
print(f.calculate(Point([0.0, 0.0])))  # 0.0
print(f.postfix)                       # ('x1', '2', '^', '2', 'x2', '*', '+')
```

The lower-level steps are available too: `nelmead.tokenizer.tokenize`
splits an expression into tokens, `nelmead.postfix.to_postfix` reorders
them into postfix notation and `nelmead.postfix.evaluate_postfix` evaluates
a postfix token list at a point.

## Minimising

```python
import random

from nelmead.point import Point
from nelmead.solver import NelderMeadSolver

solver = NelderMeadSolver(eps=1e-5, epoch=200, rng=random.Random(1))
expression = "(x1 - 3)^2 + (x2 + 1)^2"
best = solver.optimize(expression, Point([0.0, 0.0]))
print(best)  # close to 0

for entry in solver.get_logs(expression):
    print(entry.func_val, entry.measure, entry.points)
```

- `eps` (default `1e-4`) is the simplex size at which iterating stops; the
  size is the mean distance from the best vertex to the others.
- `epoch` (default 100) is the iteration budget. The search runs in
  `max(1, epoch // 25)` rounds of at most 25 iterations, and after each
  round the simplex is rebuilt around the best point found. Once the size
  has fallen to `eps`, later rounds do no further iterations.
- The starting simplex takes a unit step of random sign along each axis;
  pass a `random.Random` as `rng` for repeatable runs, otherwise a fresh
  one is used for every call.

`optimize` returns the best function value of the final simplex. It raises
`ValueError` when the expression has no variables or the start point has
fewer coordinates than the expression needs, and `ExpressionError` for a
malformed expression.

`count_dim` reports how many variables an expression uses and raises
`ExpressionError` for an `x` not followed by digits or for gaps in the
numbering. `get_logs` returns, for the most recent run on that expression,
one `LogEntry` per iteration holding the best point (`points`), the simplex
size (`measure`) and the best function value (`func_val`); it raises
`KeyError` for an expression that has not been optimised.

`nelmead.point` also offers `distance`, `measure`, `long_measure` (volume
of a simplex via a determinant), `determinant`, `factorial` and
`check_dimensions`.

## Command line

```
nelmead EPOCHS EPS EXPRESSION LOG_FILE "START_POINT"
```

For example:

```
nelmead 200 0.00001 "(x1 - 3)^2 + (x2 + 1)^2" run.log "0 0"
```

The command first echoes each argument it was given. The start point is a
space-separated list of coordinates. Numeric arguments are read from their
leading digits, and anything unreadable counts as 0. Each line written to
the log file holds the best function value, the simplex size and the best
point of one iteration, in the form

```
VALUE SIZE {(X1, X2, ...)}
```

with every number written to six decimal places.

Exit status is 0 on success, 2 when fewer than five arguments are given and
1 when the expression cannot be optimised; in that case the log file is
created but left empty.