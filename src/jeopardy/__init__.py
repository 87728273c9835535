"""Jeopardy: a trivia board game backed by the jService API."""

__version__ = "0.1.0"
