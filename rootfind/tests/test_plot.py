import numpy as np
import matplotlib

matplotlib.use('Agg')
import matplotlib.pyplot as plt

from .. import root_find_with_history
from ..plot import curve, plane, history_frame, span, plot_history, plot_plane


def f(x):
    return x ** 3 - 8


def dfdx(x):
    return 3 * x ** 2


def test_curve():
    xs, ys = curve(f, -1.0, 3.0, num=5)
    assert np.allclose(xs, [-1.0, 0.0, 1.0, 2.0, 3.0])
    assert np.allclose(ys, [-9.0, -8.0, -7.0, 0.0, 19.0])


def test_plane():
    X, Y, Z = plane(f, re=(-2.0, 2.0), im=(-2.0, 2.0), num=5)
    assert X.shape == Y.shape == Z.shape == (5, 5)
    # Grid points are -2, -1, 0, 1, 2 on each axis. (2, 0) is a root.
    assert Z[2, 4] < 1e-12
    assert np.isclose(Z[2, 2], 8.0)
    assert np.all(Z >= 0)


def test_history_frame():
    xs = root_find_with_history([5.0], f, dfdx)
    df = history_frame(f, xs)
    assert list(df.columns) == ['x', 'f', 'dx']
    assert len(df) == len(xs)
    assert df['x'].iloc[0] == 5.0
    assert df['f'].iloc[0] == 117.0
    assert np.isnan(df['dx'].iloc[0])
    assert np.isclose(df['dx'].iloc[1], xs[1] - xs[0])
    assert abs(df['f'].iloc[-1]) < 1e-6


def test_history_frame_complex():
    xs = root_find_with_history([1 + 1j], f, dfdx)
    df = history_frame(f, xs)
    assert len(df) == len(xs)
    assert df['x'].iloc[-1] == xs[-1]


def test_span():
    assert span([1.0, 3.0]) == (0.0, 4.0)
    # Narrow histories get padded to at least unit width
    assert span([2.0, 2.0]) == (1.5, 2.5)
    assert span([1 + 5j, 3 - 5j]) == (0.0, 4.0)


def test_plot_history():
    xs = root_find_with_history([1.2], f, dfdx)
    ax = plot_history(f, xs)
    assert len(ax.collections) == 1
    offsets = ax.collections[0].get_offsets()
    assert len(offsets) == len(xs)
    assert np.allclose(offsets[:, 0], xs)
    assert ax.get_xlabel() == 'x'
    plt.close('all')


def test_plot_history_range():
    xs = root_find_with_history([1.2], f, dfdx)
    _, ax = plt.subplots()
    rv = plot_history(f, xs, xmin=-4.0, xmax=4.0, num=9, ax=ax)
    assert rv is ax
    line = ax.lines[0]
    assert np.allclose(line.get_xdata(), np.linspace(-4.0, 4.0, 9))
    plt.close('all')


def test_plot_plane():
    xs = root_find_with_history([1 + 1j], f, dfdx)
    ax = plot_plane(f, xs, num=20)
    path = ax.lines[-1]
    assert np.allclose(path.get_xdata(), np.real(xs))
    assert np.allclose(path.get_ydata(), np.imag(xs))
    assert ax.get_xlabel() == 'Re(z)'
    plt.close('all')
