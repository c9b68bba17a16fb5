"""
Configuration package for application settings
"""

import logging

from cflow2puml.config.settings import LOG_LEVEL

# Set up logging; stdout is reserved for the diagram
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.WARNING),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
