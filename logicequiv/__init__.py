"""Truth-table comparison of propositional logic expressions."""

__version__ = "0.1.0"
__all__ = ["cli", "expression"]