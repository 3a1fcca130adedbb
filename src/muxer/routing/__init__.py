"""Routing — ordered route table with first-match-wins lookup.

Routes are registered during setup and frozen before the first request.
Patterns are plain segments; no regular expressions are involved.
"""
