"""
Core formatting, parsing and numeric primitives.

This module contains the pure, host-independent building blocks: numeric
kinds, configuration, the formatter and the parser.
"""
