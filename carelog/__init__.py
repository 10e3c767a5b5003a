"""Core tracking logic for the caregiving log.

This package contains the event stores, the feeding timer and the daily
aggregation, isolated from any presentation layer for easy testing.
"""
