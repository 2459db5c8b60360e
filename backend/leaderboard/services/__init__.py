"""Leaderboard domain services: credentials, users and scores.

This package contains the decision logic that HTTP routes and CLI commands
call into. Services receive the database session they work with instead of
reaching for it themselves, keeping transport concerns out of them.
"""
