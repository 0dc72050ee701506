"""
Team roster API.

A FastAPI service exposing CRUD operations over teams and their embedded
players, stored as documents in MongoDB.
"""
