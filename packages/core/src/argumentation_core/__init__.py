"""
Argumentation core.

Debate graph model (topics, claims, premises, rebuttals) and the service that
queries and extends it.
"""

__version__ = "0.1.0"
