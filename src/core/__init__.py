"""
Word graph engine: construction and the bridge word, shortest path, PageRank and random walk queries.
"""
