"""
Core value types, numeric primitives and contracts.

Everything here is independent of any particular language: renderers in
numwords.lang are built on top of these building blocks.
"""
