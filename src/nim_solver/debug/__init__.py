"""
Debug tools - score tables and search profiling.
"""
