"""Language rule engine.

Resolves which localized phrase variant applies to a runtime value by
evaluating per-language rules attached to translatable tokens.
"""

__version__ = "0.4.0"
