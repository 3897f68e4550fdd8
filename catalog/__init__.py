"""
Movie catalog: immutable in-memory store plus id lookup and filter search.
"""
