"""Core components for formcheck.

This package contains the building blocks of the validation engine: the
result records, the base class for all validators, the configuration
manager, the aggregator and the form pipeline.
"""
