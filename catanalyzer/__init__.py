"""Catan settlement-spot analyzer."""

__version__ = "0.1.0"
