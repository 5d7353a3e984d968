"""
formula_catalog: enumerate boolean formulas, group them by truth table and
keep the formulas with the fewest binary operators for every table.

    >>> from formula_catalog import EnumerationConfig, run_enumeration
    >>> result = run_enumeration(EnumerationConfig(n=1, max_size=1), verbose=False)
    >>> result.complete, result.tables_found
    (True, 4)
"""

from .forms import *
from .generators import SizeClassPool, FormulaGenerator, count_size_class
from .minimality import Verdict, MinimalityPolicy
from .catalog import (
    Catalog,
    CatalogEntry,
    CatalogError,
    CatalogFrozenError,
    DuplicateFormulaError,
    TruthTableRecord,
)
from .config import EnumerationConfig
from .pipeline import (
    RunStatus,
    StopReason,
    TractabilityReport,
    EnumerationResult,
    assess_tractability,
    run_enumeration,
)

__version__ = "0.1.0"
