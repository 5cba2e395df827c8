"""
Application layer.

Use cases orchestrating the domain model through repository and service
protocols. Concrete implementations live in the infrastructure layer.
"""
