"""
Bulletin Board - Post management over REST and GraphQL

A small bulletin-board backend: one in-memory post repository shared by a
FastAPI REST adapter and a Strawberry GraphQL adapter.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
