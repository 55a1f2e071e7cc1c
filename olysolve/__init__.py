"""Solvers for a collection of algorithmic olympiad problems, one module per problem."""

__version__ = "0.1.0"