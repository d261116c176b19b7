"""
Mars Rovers - Mission Parsing and Execution Engine

Simulates grid-bound rovers executing L/R/M movement plans on a bounded
rectangular plateau. Reads a textual mission description, executes every
rover plan against a boundary policy and reports final positions.
"""

__version__ = "0.1.0"
__author__ = "Mars Rovers Team"
