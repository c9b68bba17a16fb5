"""
Service modules for the application.

This package contains service modules that implement the core functionality
of the application.
"""
from cflow2puml.services.conversion_service import ConversionService
