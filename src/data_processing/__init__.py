"""
Text ingestion for building word graphs.
"""
