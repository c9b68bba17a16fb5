"""
Controller for the command line conversion
"""
import sys
import logging
import argparse
from typing import List, Optional

from cflow2puml import __version__
from cflow2puml.config.settings import ConversionOptions, DEFAULT_TITLE, INDENT_UNIT
from cflow2puml.services.conversion_service import ConversionService
from cflow2puml.utils.file_utils import silence_stdout

logger = logging.getLogger(__name__)


class ConversionController:
    """Controller for cflow to PlantUML conversion"""

    def run(self, args: Optional[List[str]] = None) -> int:
        """
        Run the conversion with command line arguments

        Args:
            args: Command line arguments, sys.argv[1:] when None

        Returns:
            Process exit status
        """
        parser = self._create_argument_parser()
        try:
            parsed_args = parser.parse_args(args if args is not None else sys.argv[1:])
        except SystemExit as e:
            # --help, --version and usage errors
            return e.code if isinstance(e.code, int) else 1

        if parsed_args.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        options = self._create_options(parsed_args)
        if options.indent_unit < 1:
            parser.print_usage(sys.stderr)
            print(f"Error: --indent-unit must be positive, got {options.indent_unit}", file=sys.stderr)
            return 2

        logger.debug(f"Conversion options: {options}")
        try:
            ConversionService(options).convert()
        except BrokenPipeError as e:
            # Reader went away; keep interpreter shutdown from flushing into the pipe
            silence_stdout()
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except (OSError, LookupError, UnicodeError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        return 0

    def _create_options(self, parsed_args: argparse.Namespace) -> ConversionOptions:
        """Build the conversion options from parsed arguments"""
        return ConversionOptions.from_env(
            input_paths=list(parsed_args.files),
            output_path=parsed_args.output,
            title=parsed_args.title,
            indent_unit=parsed_args.indent_unit
        )

    def _create_argument_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser for the controller"""
        parser = argparse.ArgumentParser(
            prog="cflow2puml",
            description="Convert cflow output to a PlantUML class diagram"
        )
        parser.add_argument("files", nargs="*", metavar="FILE",
                            help="cflow output files, read in order (default: stdin)")
        parser.add_argument("--title", "-t",
                            help=f"Title of the diagram (default: '{DEFAULT_TITLE}')")
        parser.add_argument("--output", "-o",
                            help="Output file for the diagram (default: stdout)")
        parser.add_argument("--indent-unit", type=int,
                            help=f"Spaces per call tree level (default: {INDENT_UNIT})")
        parser.add_argument("--verbose", "-v", action="store_true",
                            help="Show debug logging on stderr")
        parser.add_argument("--version", action="version", version=__version__)
        return parser
