"""
Core Package

Data models, dataset schema and serialization shared by the extractor
and any consumer of the question dataset.
"""
