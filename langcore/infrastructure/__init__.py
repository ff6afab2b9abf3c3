"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the application to the outside world (locale files on disk,
console output, configuration sources) by implementing the interfaces
defined in the domain layer.
"""
