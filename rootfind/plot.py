"""
Plotting of Newton-Raphson Histories

Real-valued problems get a curve of `f`, with the visited estimates scattered on top.
Complex-valued problems get a contour map of |f| over the complex plane, with the path of estimates overlaid.
Neither calls `plt.show()`; that is left to the caller.
"""

from typing import Callable, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt


def curve(f: Callable, xmin: float, xmax: float, num: int = 200) -> Tuple[np.ndarray, np.ndarray]:
    """ Sample `f` at `num` points on the real interval [xmin, xmax]. """
    xs = np.linspace(xmin, xmax, num)
    ys = np.vectorize(f)(xs)
    return xs, ys


def plane(f: Callable, re: Tuple[float, float] = (-3.0, 3.0), im: Tuple[float, float] = (-3.0, 3.0),
          num: int = 200) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """ Sample |f| on a `num` by `num` grid of the complex plane.
    Returns meshgrids of the real and imaginary parts, and of |f(re + i*im)|. """
    X, Y = np.meshgrid(np.linspace(*re, num), np.linspace(*im, num))
    Z = np.abs(np.vectorize(f, otypes=[complex])(X + 1j * Y))
    return X, Y, Z


def history_frame(f: Callable, history: Sequence) -> pd.DataFrame:
    """ Tabulate a history, one row per estimate.
    Column `dx` is the step which arrived at each row, and NaN for the initial estimate. """
    xs = list(history)
    dxs = [np.nan] + [b - a for a, b in zip(xs, xs[1:])]
    df = pd.DataFrame(dict(x=xs, f=[f(x) for x in xs], dx=dxs))
    df.index.name = 'iter'
    return df


def span(history: Sequence, margin: float = 0.5) -> Tuple[float, float]:
    """ Plotting range around the real parts of `history`, padded by `margin` of its width. """
    re = np.real(np.asarray(history))
    lo, hi = float(re.min()), float(re.max())
    width = max(hi - lo, 1.0)
    return lo - margin * width, hi + margin * width


def plot_history(f: Callable, history: Sequence, *, xmin: Optional[float] = None,
                 xmax: Optional[float] = None, num: int = 200, ax=None):
    """ Plot real-valued `f`, and scatter the estimates in `history` along it. """
    if ax is None:
        _, ax = plt.subplots()
    lo, hi = span(history)
    xmin = lo if xmin is None else xmin
    xmax = hi if xmax is None else xmax

    xs, ys = curve(f, xmin, xmax, num)
    ax.plot(xs, ys)
    ax.axhline(0.0, color='k', linewidth=0.5)

    hx = np.real(np.asarray(history))
    hy = np.real(np.vectorize(f)(hx))
    ax.scatter(hx, hy, c=np.arange(len(hx)), cmap='viridis', zorder=3)
    ax.set_xlabel('x')
    ax.set_ylabel('f(x)')
    return ax


def plot_plane(f: Callable, history: Sequence, *, re: Optional[Tuple[float, float]] = None,
               im: Optional[Tuple[float, float]] = None, num: int = 200, ax=None):
    """ Contour-map log10|f| over the complex plane, and overlay the path of `history`. """
    if ax is None:
        _, ax = plt.subplots()
    h = np.asarray(history, dtype=complex)
    re = re or span(h.real)
    im = im or span(h.imag)

    X, Y, Z = plane(f, re, im, num)
    # Roots are exact zeros of |f|; keep log10 finite there
    cs = ax.contourf(X, Y, np.log10(Z + np.finfo(float).tiny), levels=20, cmap='viridis')
    ax.figure.colorbar(cs, ax=ax, label='log10|f|')

    ax.plot(h.real, h.imag, 'o-', color='w', markeredgecolor='k')
    ax.set_xlabel('Re(z)')
    ax.set_ylabel('Im(z)')
    return ax
