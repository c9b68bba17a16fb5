"""
Utility functions for parsing cflow output and rendering PlantUML.

This module re-exports the parser and renderer entry points to provide
a unified interface for the conversion pipeline.
"""
from cflow2puml.utils.cflow_parser import parse_cflow_line, parse_cflow_output
from cflow2puml.utils.puml_renderer import make_diagram

# Short names for the two pipeline stages
parse_all = parse_cflow_output
render = make_diagram

__all__ = ['parse_cflow_line', 'parse_cflow_output', 'make_diagram', 'parse_all', 'render']
