# src/rapidtube/infrastructure/__init__.py
