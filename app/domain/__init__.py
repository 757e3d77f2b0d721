"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities (Book, Reservation, User)
- Repository interfaces
- The error taxonomy raised by the services
"""
