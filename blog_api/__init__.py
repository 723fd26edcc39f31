"""Blog API: users, posts and categories over a relational store."""

__version__ = "1.0.0"
