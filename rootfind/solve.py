"""
Newton-Raphson Solver Class & Functions
"""

import cmath
from typing import Callable, List, MutableSequence, Optional

from . import the_tolerance, the_max_iters


class Solver:
    """ Newton-Raphson Root Solver

    Finds a zero of `f`, given its derivative `dfdx`, via the update
        x(k+1) = x(k) + dx
        dx = -f(x(k)) / dfdx(x(k))
    Estimates are appended to `history`, which belongs to the caller.
    Its last element is the current estimate. """

    def __init__(self, f: Callable, dfdx: Callable, history: MutableSequence, *,
                 tol: float = the_tolerance, max_iters: int = the_max_iters,
                 verbose: bool = False):
        if not len(history):
            raise ValueError('Solver requires an initial estimate')
        if tol < 0:
            raise ValueError(f'Invalid tolerance {tol}')
        if max_iters < 0:
            raise ValueError(f'Invalid iteration cap {max_iters}')
        self.f = f
        self.dfdx = dfdx
        self.history = history
        self.tol = tol
        self.max_iters = max_iters
        self.verbose = verbose
        self.iters = 0
        self.dx = None

    @property
    def x(self):
        """ The current estimate """
        return self.history[-1]

    def step(self):
        """ Compute (but do not apply) the next Newton step. """
        x = self.x
        try:
            df = self.dfdx(x)
            ZeroDerivative.assert_not_eq(df, 0, f'Zero derivative at {x}')
            dx = -self.f(x) / df
            NonFiniteStep.assert_true(cmath.isfinite(dx), f'Step {dx} from {x}')
        except OverflowError as e:
            # Python floats and ints raise where numpy scalars go to inf
            raise NonFiniteStep(f'Step from {x}: {e}') from e
        return dx

    def iterate(self) -> None:
        """ Update method for Newton iterations """
        if self.verbose:
            print(f'Iter #{self.iters} - Guessing {self.x}')
        dx = self.step()
        self.history.append(self.x + dx)
        self.dx = dx
        self.iters += 1

    def converged(self) -> bool:
        """ Convergence test, on the size of the most recent step. """
        if self.dx is None:
            return False
        return abs(self.dx) <= self.tol

    def done(self) -> bool:
        return self.converged() or self.iters >= self.max_iters

    def solve(self):
        """ Iterate until converged, or out of iterations.
        Running out of iterations is not an error; check `converged()`. """
        while not self.done():
            self.iterate()

        if self.verbose:
            status = 'Converged' if self.converged() else 'Stopped'
            print(f'{status} at {self.x} after {self.iters} iterations')
        return self.x


def root_find(x0, f: Callable, dfdx: Callable,
              tol: float = the_tolerance, max_iters: int = the_max_iters,
              verbose: bool = False):
    """ Find a zero of `f`, starting from estimate `x0`. Returns the final estimate. """
    solver = Solver(f, dfdx, [x0], tol=tol, max_iters=max_iters, verbose=verbose)
    return solver.solve()


def root_find_with_history(xs: List, f: Callable, dfdx: Callable,
                           tol: float = the_tolerance, max_iters: int = the_max_iters,
                           verbose: bool = False) -> List:
    """ Find a zero of `f`, starting from the last element of `xs`.
    Every new estimate is appended to `xs` in place, and `xs` itself is returned. """
    solver = Solver(f, dfdx, xs, tol=tol, max_iters=max_iters, verbose=verbose)
    solver.solve()
    return xs


class RootFindError(Exception):
    @classmethod
    def assert_true(cls, cond, msg: Optional[str] = None):
        if not cond:
            raise cls(msg)

    @classmethod
    def assert_not_eq(cls, x, y, msg: Optional[str] = None):
        if x == y:
            raise cls(msg)


class ZeroDerivative(RootFindError): pass


class NonFiniteStep(RootFindError): pass
