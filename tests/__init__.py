"""Test package initialization.

NaN grids make numpy emit RuntimeWarnings on comparison; keep them quiet.
"""

import warnings as _warnings

_warnings.filterwarnings("ignore", category=RuntimeWarning)
