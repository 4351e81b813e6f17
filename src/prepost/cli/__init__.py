"""
CLI Command Modules

Each module contains a logical group of related commands.
"""

from prepost.cli import routes, compare

__all__ = ['routes', 'compare']
