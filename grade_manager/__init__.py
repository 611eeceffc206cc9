"""
Grade Manager: Interactive roster grade queries

A small console tool that loads a roster of students with ten assignment
grades each and answers averages, extremes and range queries over it.
"""

__version__ = "0.1.0"
