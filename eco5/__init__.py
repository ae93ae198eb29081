"""
Backend package for the Eco5 environmental impact tracker.

This package provides a FastAPI application over a SQLAlchemy-backed
relational store: accounts, dashboards, the impact calculator, the
community forum, events, the resource library and alerts.
"""
