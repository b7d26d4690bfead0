"""
Roshambo - Rock/Paper/Scissors Session Engine

Turn-based two-player games keyed by an ordered (host, opponent) pair.
The engine provides:
- A persistent, ordered session store with prefix scans per host
- At most one game per (host, opponent) pair
- Move submission and outcome resolution
- Read-only queries over all games or a single host's games
"""

__version__ = "0.1.0"

CONTRACT_NAME = "roshambo"
