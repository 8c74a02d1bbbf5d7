"""
Oracle Module
=============

Contract with the external rectangle packing algorithm.
"""

from .adapter import OracleOutcome, PackingOracle, PackingOracleAdapter

__all__ = [
    'OracleOutcome',
    'PackingOracle',
    'PackingOracleAdapter',
]
