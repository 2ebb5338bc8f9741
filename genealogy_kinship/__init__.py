"""
Genealogy Kinship - Work out how two people in a family tree are related.

This package builds an in-memory family graph from typed relationship records
and resolves the relationship between any two people in plain language
("first cousin once removed", "step-grandmother", "unrelated").
"""

__version__ = "0.1.0"
__author__ = "Genealogy AI Contributors"
