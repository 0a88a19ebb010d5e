"""
Newton-Raphson Root Finding
"""

# Default convergence tolerance, on the magnitude of each Newton step
the_tolerance = 1e-6
# Default iteration cap
the_max_iters = 40

from .solve import Solver, root_find, root_find_with_history
from .solve import RootFindError, ZeroDerivative, NonFiniteStep
