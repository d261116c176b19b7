"""
Result delivery: writes final rover positions to an output sink.
"""
