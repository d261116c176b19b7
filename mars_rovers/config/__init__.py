"""
Configuration management for the mission engine.
"""
