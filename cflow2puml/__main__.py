"""
Main module for the cflow to PlantUML converter.
"""
import sys

from cflow2puml.controllers.conversion_controller import ConversionController


def main():
    """Main entry point."""
    sys.exit(ConversionController().run())


if __name__ == "__main__":
    main()
