"""
Polynomial Root-Finding Test-Cases, stored as YAML

Each case is a polynomial (by its coefficients, in ascending powers), an initial estimate,
solver settings, and the roots it is expected to converge to.
Complex numbers are stored as [re, im] pairs; real numbers as plain scalars.
An empty `roots` list marks a case expected *not* to converge.
"""

import cmath
from pathlib import Path
from typing import List, Optional

import ruamel.yaml
from numpy.polynomial import Polynomial

from . import the_tolerance, the_max_iters
from .solve import Solver, RootFindError

yaml = ruamel.yaml.YAML()

# Closeness for matching a solution against an expected root
TOL_MATCH = dict(rel_tol=1e-6, abs_tol=1e-9)


def eq_or_close(x, y) -> bool:
    """ Set our params for `cmath.isclose` """
    return cmath.isclose(x, y, **TOL_MATCH)


def to_real(v) -> float:
    """ Convert a YAML scalar to a float. Booleans are not numbers here. """
    if isinstance(v, bool):
        raise ValueError(f"Expected a number, got {v}")
    return float(v)


def to_count(v) -> int:
    """ Convert a YAML scalar to a non-negative integer, without truncating. """
    x = to_real(v)
    if not x.is_integer() or x < 0:
        raise ValueError(f"Expected a non-negative integer, got {v}")
    return int(x)


def to_number(v):
    """ Convert a YAML scalar or [re, im] pair to a number. """
    if isinstance(v, (list, tuple)):
        if len(v) != 2:
            raise ValueError(f'Complex values must be [re, im] pairs, got {v}')
        return complex(to_real(v[0]), to_real(v[1]))
    return to_real(v)


def from_number(x):
    """ Convert a number to a YAML scalar, or an [re, im] pair if it has an imaginary part. """
    x = complex(x)
    if x.imag == 0:
        return float(x.real)
    return [float(x.real), float(x.imag)]


@yaml.register_class
class PolyCase(object):
    def __init__(self):
        self.desc: str = ""
        self.coeffs: List[float] = []
        self.x0 = 0.0
        self.tol: float = the_tolerance
        self.max_iters: int = the_max_iters
        self.roots: List = []

    def poly(self):
        """ The case's polynomial, and its derivative """
        p = Polynomial(self.coeffs)
        return p, p.deriv()

    def to_dict(self):
        return dict(
            desc=self.desc,
            coeffs=[float(c) for c in self.coeffs],
            x0=from_number(self.x0),
            tol=float(self.tol),
            max_iters=int(self.max_iters),
            roots=[from_number(r) for r in self.roots],
        )

    @classmethod
    def to_yaml(cls, representer, node):
        return representer.represent_dict(node.to_dict())

    @classmethod
    def from_dict(cls, d: dict):
        self = cls()
        self.desc = str(d['desc'])
        self.coeffs = [to_real(c) for c in d['coeffs']]
        if not self.coeffs:
            raise ValueError(f'Case {self.desc} has no coefficients')
        self.x0 = to_number(d['x0'])
        self.tol = to_real(d.get('tol', the_tolerance))
        if not self.tol >= 0:
            raise ValueError(f'Case {self.desc} has invalid tolerance {self.tol}')
        self.max_iters = to_count(d.get('max_iters', the_max_iters))
        self.roots = [to_number(r) for r in d.get('roots') or []]
        return self

    def dump(self, file):
        dump_cases([self], file)

    @classmethod
    def load(cls, file) -> List["PolyCase"]:
        p = Path(file)
        y = yaml.load(p)
        return [cls.from_dict(dict(d)) for d in y or []]


def dump_cases(cases: List[PolyCase], file):
    yaml.dump(list(cases), Path(file))


def new_result(desc: str) -> dict:
    """ A result for case `desc`, before it has run """
    return dict(
        desc=desc,
        root=None,
        iters=0,
        converged=False,
        matched=None,
        error=None,
        ok=False,
    )


def run_case(case: PolyCase, verbose: bool = False) -> dict:
    """ Solve a single case, and check it against its expected roots.
    Invalid settings and solver failures are recorded in the result's `error`. """
    res = new_result(case.desc)
    p, dp = case.poly()
    solver = None
    try:
        solver = Solver(p, dp, [case.x0], tol=case.tol, max_iters=case.max_iters, verbose=verbose)
        solver.solve()
    except (RootFindError, ValueError) as e:
        res['error'] = f'{type(e).__name__}: {e}'
        if solver is not None:
            res['iters'] = solver.iters
        return res

    res['root'] = solver.x
    res['iters'] = solver.iters
    res['converged'] = solver.converged()
    if res['converged']:
        res['matched'] = next((r for r in case.roots if eq_or_close(solver.x, r)), None)

    if case.roots:
        res['ok'] = res['matched'] is not None
    else:
        res['ok'] = not res['converged']
    return res


def run_cases(path="data/", pattern: str = "*.yaml", verbose: bool = False) -> List[dict]:
    """ Run all YAML cases in directory `path` """
    results = []
    for p in sorted(Path(path).glob(pattern)):
        print(f"Running Test-Cases {p.name}")
        for i, d in enumerate(yaml.load(p) or []):
            # A malformed case is reported, and the rest still run
            try:
                case = PolyCase.from_dict(dict(d))
            except (KeyError, ValueError, TypeError) as e:
                res = new_result(str(d.get('desc', f'{p.name}[{i}]')))
                res['error'] = f'{type(e).__name__}: {e}'
            else:
                res = run_case(case, verbose=verbose)
            res['file'] = p.name
            results.append(res)
    return results


def summary(results: List[dict], cols: Optional[List[str]] = None) -> str:
    """ Format a results table, one row per case """
    cols = cols or ['iters', 'converged', 'ok']
    s = 'Case'.ljust(40) + ''.join(k.ljust(11) for k in cols) + '\n'
    for r in results:
        s += r['desc'][:39].ljust(40) + ''.join(str(r[k]).ljust(11) for k in cols) + '\n'
    return s
