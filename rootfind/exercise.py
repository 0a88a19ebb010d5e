"""
The Newton-Raphson Exercise: find the cube roots of eight.
"""

import numpy as np

from .solve import Solver
from . import plot


def f(x):
    """ Function we'll find the zeros of. """
    return x ** 3 - 8


def dfdx(x):
    """ Derivative of f """
    return 3 * x ** 2


# All three zeros of `f`
CUBE_ROOTS_OF_EIGHT = [2.0, complex(-1, np.sqrt(3)), complex(-1, -np.sqrt(3))]


def nearest_root(x) -> complex:
    """ The cube root of eight closest to `x` """
    return min(CUBE_ROOTS_OF_EIGHT, key=lambda r: abs(x - r))


def solve(x0, **kw) -> Solver:
    """ Run the exercise from initial guess `x0`, and return the finished Solver. """
    solver = Solver(f, dfdx, [x0], **kw)
    solver.solve()
    return solver


def main(show: bool = True):
    """ Solve from a real and a complex starting point, and plot each. """
    import matplotlib.pyplot as plt

    real = solve(1.2)
    print(f'Real start: {"converged" if real.converged() else "stopped"} in {real.iters} iterations')
    print(plot.history_frame(f, real.history))

    cplx = solve(1 + 1j)
    print(f'Complex start: {"converged" if cplx.converged() else "stopped"} in {cplx.iters} iterations')
    print(f'Nearest cube root: {nearest_root(cplx.x)}')
    print(plot.history_frame(f, cplx.history))

    _, (ax0, ax1) = plt.subplots(1, 2, figsize=(12, 5))
    plot.plot_history(f, real.history, ax=ax0)
    plot.plot_plane(f, cplx.history, ax=ax1)
    if show:
        plt.show()

    return real.history, cplx.history
