"""
Rover state machine and mission runner.
"""
