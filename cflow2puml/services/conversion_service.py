"""
Conversion service turning cflow output into a PlantUML diagram
"""
import logging
from typing import List, Optional

from cflow2puml.config.settings import ConversionOptions
from cflow2puml.models.function_model import CallGraph
from cflow2puml.utils.file_utils import iter_input_lines, write_output
from cflow2puml.utils.parse_utils import parse_all, render

logger = logging.getLogger(__name__)


class ConversionService:
    """Service for converting cflow call trees to PlantUML"""

    def __init__(self, options: Optional[ConversionOptions] = None):
        """
        Initialize the conversion service.

        Args:
            options: Conversion options; defaults are taken from the environment
        """
        self.options = options if options is not None else ConversionOptions.from_env()

    def load(self) -> CallGraph:
        """
        Read and parse all configured inputs as a single call tree.

        Returns:
            CallGraph built from the inputs
        """
        sources = ", ".join(self.options.input_paths) or "stdin"
        logger.info(f"Reading cflow output from {sources}")
        lines = iter_input_lines(self.options.input_paths, self.options.encoding)
        return parse_all(lines, self.options.indent_unit)

    def render(self, call_graph: CallGraph) -> List[str]:
        """
        Render a call graph as PlantUML text fragments.

        Args:
            call_graph: Call graph to render; its emitted flags are updated

        Returns:
            Fragments of the diagram text
        """
        return render(call_graph.relations, call_graph.functions, self.options.title)

    def convert(self) -> CallGraph:
        """
        Run the whole conversion: read inputs, render, and write the diagram.

        Returns:
            The CallGraph that was rendered

        Raises:
            OSError: If an input cannot be read or the output cannot be written
        """
        call_graph = self.load()
        logger.info(f"Found {len(call_graph.functions)} functions and "
                    f"{len(call_graph.relations)} relations")
        fragments = self.render(call_graph)
        write_output(fragments, self.options.output_path, self.options.encoding)
        return call_graph
