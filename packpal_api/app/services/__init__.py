"""
Service layer.

Each service encapsulates business logic for a domain and reports
failures as ``Result`` values rather than exceptions.
"""
