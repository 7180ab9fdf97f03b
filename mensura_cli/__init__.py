"""
mensura CLI - Command-line interface for shape areas.

Usage:
    mensura circle 2.5
    mensura triangle 3 4 5
    mensura --config config/mensura.yaml triangle 2 3 4
    mensura kinds
"""

__version__ = "1.0.0"
