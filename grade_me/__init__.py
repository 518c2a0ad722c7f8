"""
Grade Me: a to-do list of submissions waiting for an instructor's grade.
"""

__version__ = '1.0.0'
