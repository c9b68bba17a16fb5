"""
Convert GNU cflow call trees into PlantUML class diagrams.
"""

__version__ = "0.2.0-SNAPSHOT"
