"""Domain Layer: value objects, records, exceptions and ports.

Has no dependencies on infrastructure code.
"""
