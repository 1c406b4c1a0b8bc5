"""
Core PEMDAS modules: numbers, the AST, errors, settings, and the
expression language.
"""
