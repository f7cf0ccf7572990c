# tinynet

A small, dependency-free toolkit for experimenting with feedforward neural
networks. It provides a dense `Matrix` type, common activation functions,
regression and classification losses, and a `Network` whose forward pass
writes a trace of every step.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Matrices

`tinynet.matrix.Matrix` is a matrix of floats stored row by row.

```python
from tinynet.matrix import Matrix

a = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]])
b = Matrix(2, 1)            # 2x1, all zeros
b[0, 0] = 1.0
b[1, 0] = 1.0

print(a.shape)              # (2, 2)
print((a @ b).to_rows())    # [[3.0], [7.0]]
print((a + a).to_rows())    # [[2.0, 4.0], [6.0, 8.0]]
print(a.transpose())
# [ 1.000000 3.000000 ]
# [ 2.000000 4.000000 ]
```

- `Matrix(rows, cols)` creates a zero matrix. If either dimension is zero or
  negative the matrix is empty, with shape `(0, 0)`.
- `Matrix.from_rows(rows)` builds a matrix from equally long rows; rows of
  different lengths raise `ValueError`.
- `rows`, `cols` and `shape` give the dimensions.
- Elements are read and written with `m[row, col]`; negative indices count
  from the end, indices out of range raise `IndexError`, and a key that is not
  a `(row, col)` pair raises `TypeError`.
- `+` adds two matrices of the same shape and `@` multiplies them; mismatched
  shapes raise `ValueError`. Both return new matrices.
- `transpose()` returns a new matrix with rows and columns swapped.
- `apply(func)` replaces every element with `func(element)`, in place.
- `to_rows()` returns the elements as a list of lists.
- `str(m)` renders one bracketed row per line, and `display(file)` writes that
  rendering to `file` (standard output by default).
- Matrices compare equal when their shapes and elements are equal.

## Activations

`tinynet.activation` provides `sigmoid_func`, `tanh_func` and `relu_func`
together with their derivatives `sigmoid_derivative`, `tanh_derivative` and
`relu_derivative`.

An `ActivationFunc` pairs a function (`func`) with its derivative
(`derivative`) and, when called, applies the function. Three are ready made:
`activation.sigmoid`, `activation.tanh` and `activation.relu`.

`tanh_func` returns exactly `1.0` above 10 and `-1.0` below -10. The
derivative of ReLU at 0 is taken to be 0.

## Losses

`tinynet.loss` provides `mean_squared_error`, `mean_absolute_error` and
`binary_cross_entropy`. Each takes a matrix of targets and a matrix of
predictions and compares their first columns row by row. Binary cross-entropy
clips predictions to `[1e-15, 1 - 1e-15]` so that it never takes the
logarithm of zero.

An empty target matrix, or predictions with a different number of rows from
the targets, raise `ValueError`.

## Networks

```python
from tinynet import activation
from tinynet.matrix import Matrix
from tinynet.network import Network

net = Network(
    input_nodes=3,
    layer_sizes=[4, 1],
    activations=[activation.relu, activation.sigmoid],
)
print(len(net))             # 2

x = Matrix.from_rows([[0.5], [-1.0], [2.0]])
y = net.forward_pass(x)
print(y.to_rows())          # [[0.5]]
```

`Network(input_nodes, layer_sizes, activations)` creates one `Layer` per
entry of `layer_sizes`, each with its own activation; the two sequences must
be of the same length, or `ValueError` is raised. The layers are kept in
`net.layers`.

A `Layer` holds `weights`, `biases` and `activation`, and computes
`activation(weights @ x + biases)`. `Layer.zeros(input_size, output_size,
activation)` creates a layer whose weights (`output_size` x `input_size`) and
biases (`output_size` x 1) are all zero; `num_nodes` is its number of outputs.
Every layer of a new `Network` starts this way, and weights and biases can be
set by indexing the matrices, e.g. `net.layers[0].weights[0, 1] = 0.3`.

`forward_pass(inputs, file)` feeds a column matrix through every layer and
returns the output of the last one. As it goes it writes the input, each
layer's weights and biases, its output before and after activation, and the
final result to `file` (standard output by default). A network with no layers
raises `ValueError`.

## What tinynet does not do

tinynet only runs networks forward. It has no training: there is no
backpropagation, no optimiser and no random initialisation, so weights and
biases stay as they are set. It offers no command-line program and does not
save or load networks.