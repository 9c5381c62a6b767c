"""
Test suite for monkey.

This package contains unit tests for the tokenizer, parser, syntax tree
nodes, settings, and the Frontend facade.
"""
