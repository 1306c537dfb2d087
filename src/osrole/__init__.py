"""Declarative management of OpenSearch security roles."""

__version__ = "0.1.0"
