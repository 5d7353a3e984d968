"""
Unified import layer for the formula model.

This makes formula_catalog.forms a single access point for:
    - Formula trees and the connective alphabet   (formula)
    - Truth tables and evaluation                 (truth_table)
    - Text rendering and parsing                  (pretty, textparse)
"""

from . import formula
from . import truth_table
from . import pretty
from . import textparse

# Re-export everything explicitly
from .formula import *
from .truth_table import *
from .pretty import *
from .textparse import *
