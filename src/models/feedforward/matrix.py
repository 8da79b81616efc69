"""Dense 2D matrix used for weight, bias and delta storage."""

from __future__ import annotations
from typing import Optional, Sequence, Union
import numpy as np


class Matrix:
    """rows x cols grid of float64 values backed by a numpy array.

    Every arithmetic operation that combines two matrices checks shapes first
    and raises ValueError on a mismatch. Operations named after a verb
    (`set`, `add_to_cell`, `randomize`, `clear`) mutate in place; `multiply`
    and `add` return a new matrix.
    """

    def __init__(self, rows: int, cols: int):
        """
        Args:
            rows: Number of rows (>= 1)
            cols: Number of columns (>= 1)
        """
        if rows < 1 or cols < 1:
            raise ValueError(f"Matrix needs at least one row and one column, got ({rows}, {cols})")
        self._data = np.zeros((rows, cols), dtype=np.float64)

    @classmethod
    def from_grid(cls, grid: Union[Sequence[Sequence[float]], np.ndarray]) -> "Matrix":
        """Build a matrix holding a copy of `grid` (a 2D sequence or array)."""
        arr = np.array(grid, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"Matrix grid must be 2D, got {arr.ndim}D with shape {arr.shape}")
        m = cls(arr.shape[0], arr.shape[1])
        m._data[...] = arr
        return m

    # ----- shape -----
    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self):
        return self._data.shape

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the underlying array."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    def to_numpy(self) -> np.ndarray:
        return self._data.copy()

    # ----- cell access -----
    def get(self, r: int, c: int) -> float:
        return float(self._data[r, c])

    def set(self, r: int, c: int, v: float) -> None:
        self._data[r, c] = v

    def add_to_cell(self, r: int, c: int, v: float) -> None:
        """matrix[r, c] += v"""
        self._data[r, c] += v

    def column(self, c: int) -> "Matrix":
        """Copy column `c` into a new (rows x 1) matrix."""
        if not 0 <= c < self.cols:
            raise IndexError(f"Column {c} doesn't exist (matrix has {self.cols} columns)")
        return Matrix.from_grid(self._data[:, c:c + 1])

    def flatten(self) -> np.ndarray:
        """Row-major copy of every cell."""
        return self._data.ravel().copy()

    # ----- arithmetic -----
    def dot(self, other: "Matrix") -> float:
        """Dot product of both matrices treated as flat vectors of equal size."""
        if self.size != other.size:
            raise ValueError(
                f"Dot product needs matrices of equal size. Matrix a has {self.size} "
                f"elements {self.shape} and matrix b has {other.size} elements {other.shape}."
            )
        return float(np.dot(self._data.ravel(), other._data.ravel()))

    def multiply(self, a: float) -> "Matrix":
        """New matrix with every element multiplied by `a`."""
        return Matrix.from_grid(self._data * a)

    def add(self, other: "Matrix") -> "Matrix":
        """New matrix holding the elementwise sum."""
        if self.rows != other.rows:
            raise ValueError(
                f"To add the matrices they must have the same number of rows and columns. "
                f"Matrix a has {self.rows} rows and matrix b has {other.rows} rows."
            )
        if self.cols != other.cols:
            raise ValueError(
                f"To add the matrices they must have the same number of rows and columns. "
                f"Matrix a has {self.cols} cols and matrix b has {other.cols} cols."
            )
        return Matrix.from_grid(self._data + other._data)

    def accumulate(self, values: np.ndarray) -> None:
        """In-place elementwise += of an array shaped like this matrix."""
        values = np.asarray(values, dtype=np.float64)
        if values.shape != self.shape:
            raise ValueError(f"Cannot accumulate shape {values.shape} into matrix of shape {self.shape}")
        self._data += values

    # ----- in-place fills -----
    def randomize(self, lower: float, upper: float, rng: Optional[np.random.Generator] = None) -> None:
        """Fill with independent uniform values in [lower, upper]."""
        if lower > upper:
            raise ValueError(f"lower bound {lower} is greater than upper bound {upper}")
        rng = rng if rng is not None else np.random.default_rng()
        # uniform() draws from [lower, upper); clip keeps float rounding inside the bounds
        values = rng.uniform(lower, upper, size=self._data.shape)
        self._data[...] = np.clip(values, lower, upper)

    def clear(self) -> None:
        """Set all elements to zero."""
        self._data.fill(0.0)

    # ----- misc -----
    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return np.array_equal(self._data, other._data)

    __hash__ = None

    def __repr__(self):
        return f"Matrix(rows={self.rows}, cols={self.cols})"
