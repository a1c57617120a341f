"""Functional primitives for foldline.

This module provides the collection transforms (map, filter, reduce, flat map
and compact map) that the rest of the project is built on. Utilities are
stateless and side-effect-free so they can be composed into pipelines.
"""
