"""
SWNT - procedural generators for Stars Without Number.

Worlds, religions, cultures, NPCs and problems are rolled from weighted
tables, uniform lists and composite tables provided by swnt.tables.
"""

__version__ = "0.1.0"
