from .formulas import SizeClassPool, FormulaGenerator, count_size_class

__all__ = ["SizeClassPool", "FormulaGenerator", "count_size_class"]
