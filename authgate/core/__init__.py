"""Core: configuration, result types, error codes and error classes."""
