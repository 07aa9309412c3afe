# exprtree

Build expression trees from prefix (Polish) notation, print them back,
evaluate them with values for their variables, and collect every problem
found in the input instead of stopping at the first one.

## Expressions

An expression is a sequence of space-separated tokens in prefix order:

- operators `+`, `-`, `*`, `/` take two operands,
- `sin` and `cos` take one operand,
- a run of digits is an integer value,
- any other word is a variable.

Characters other than ASCII letters, digits, the four operators and
whitespace are dropped, and runs of whitespace count as one separator.

For example `+ a * 2 b` means `a + 2 * b`.

## Library use

```python
from exprtree.tree import Tree

tree = Tree()
tree.enter("+ a * 2 b")
print(tree.prefix())          # "+ a * 2 b "
print(tree.variables())       # ["a", "b"]
print(tree.calculate([1, 3])) # 7; values follow the order of variables()
print(tree.count_greater(1))  # 1; integer values greater than 1
```

`Tree.enter` inserts every token it can, silently skipping those that do
not fit, and fills one missing operand with `1`. It returns `True` when
the tree was already complete without that filler.

`Tree.insert` places a single token (an `int` or a string) at the next free
position and raises `exprtree.tree.InsertError` (a `ValueError`) when it
cannot.

Arithmetic is on integers: `/` divides and truncates towards zero, and the
results of `sin` and `cos` are truncated to integers. `calculate` raises
`ValueError` for an empty or incomplete tree or when a variable has no
value, and dividing by zero raises `ZeroDivisionError`.

`Tree.checked_enter` parses the same way but returns a `Result` that holds
every error found: characters that are not allowed, tokens that do not fit
into the tree, and expressions with too few operands.

```python
from exprtree.tree import Tree

result = Tree().checked_enter("+ a")
if not result.is_success():
    for error in result.errors():
        print(error)  # Equation incorrect | not enough values or variables!
```

Trees can be joined with `+`: a copy of the right tree is grafted onto the
first leaf of a copy of the left one. `Tree.copy` and `Node.copy` make deep
copies.

## Results

`exprtree.result.Result.ok(value)` and `Result.fail(errors)` build results;
`fail` takes one `Error` or several and refuses an empty collection.
`is_success()`, `value()` (`None` for a failed result) and `errors()` read
them back. An `Error` holds a `message`, `"DEFAULT ERROR"` unless given.

`exprtree.serializer.Serializer(path)` writes results to a text file: the
first `save` on an instance replaces the file and later ones append. A
successful result whose value is a `Tree` writes the tree's prefix form,
and every error is written on its own line.

## Command line

```
exprtree [EXPRESSION] [-o OUTPUT]
```

runs a short demonstration: it performs a few divisions (one of them by
zero), builds a tree from `EXPRESSION` (default `"+ a a+ a 1"`), and saves
the tree result and the two division results to `OUTPUT` (default
`zapis.txt` in the current directory).

## What it does not do

The command does not evaluate expressions or print anything; it only
writes the file described above. Evaluation, variable listing and counting
are available from the library alone.

## Tests

```
pip install -e .[test]
pytest
```