"""Constitutional rule evaluation engine.

Evaluates a structured fact scenario against a catalog of rules, each tied
to a clause of the U.S. Constitution, under a selectable interpretation
profile, and aggregates the clause results into one verdict with a trace.
"""

__version__ = "0.1.0"
