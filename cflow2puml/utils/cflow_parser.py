"""
Parser for cflow output format
"""
import re
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Union

from cflow2puml.config.settings import INDENT_UNIT
from cflow2puml.models.function_model import Function, CallGraph, ROOT

logger = logging.getLogger(__name__)

# One cflow call tree entry, e.g.
#     helper() <void helper (int x, char *s) at util.c:5>:
CFLOW_LINE_PATTERN = re.compile(
    r'^(?P<indent> *)(?P<name>\w+)\(\) '
    r'<(?P<return_type>.*) (?P<name2>\w+) \((?P<arguments>.*)\) '
    r'at (?P<file_path>.*):(?P<line_number>\d+)>(?P<trailing>.*)$'
)


@dataclass
class CflowLine:
    """Fields extracted from a single cflow output line."""
    depth: int
    name: str
    return_type: str
    arguments: List[str] = field(default_factory=list)
    file_path: str = ""
    line_number: int = 0
    trailing: str = ""

    def to_function(self) -> Function:
        return Function(
            name=self.name,
            depth=self.depth,
            return_type=self.return_type,
            arguments=list(self.arguments),
            file_path=self.file_path,
            line_number=self.line_number,
            trailing=self.trailing
        )


def split_arguments(arguments: str) -> List[str]:
    """
    Split a cflow argument list into argument declarations

    Args:
        arguments: Text between the parentheses, e.g. "int argc, char **argv"

    Returns:
        List of argument declarations; empty for "" and for "void"
    """
    if not arguments or arguments.strip() == "void":
        return []
    return arguments.split(", ")


def parse_cflow_line(line: str, indent_unit: int = INDENT_UNIT) -> Optional[CflowLine]:
    """
    Parse one line of cflow output

    Args:
        line: A line of cflow output, with or without its line terminator
        indent_unit: Number of spaces per call tree level

    Returns:
        CflowLine with the extracted fields, or None if the line is not a
        call tree entry
    """
    if indent_unit < 1:
        raise ValueError(f"indent_unit must be positive, got {indent_unit}")

    match = CFLOW_LINE_PATTERN.match(line.rstrip("\r\n"))
    if not match:
        return None

    return CflowLine(
        depth=len(match.group("indent")) // indent_unit,
        name=match.group("name"),
        return_type=match.group("return_type"),
        arguments=split_arguments(match.group("arguments")),
        file_path=match.group("file_path"),
        line_number=int(match.group("line_number")),
        trailing=match.group("trailing")
    )


def parse_cflow_output(cflow_output: Union[str, Iterable[str]],
                       indent_unit: int = INDENT_UNIT) -> CallGraph:
    """
    Parse cflow output into a call graph

    The caller of each entry is recovered from indentation alone: the
    stack holds the current call path, one name per depth.

    Args:
        cflow_output: String output from cflow, or an iterable of its lines
        indent_unit: Number of spaces per call tree level

    Returns:
        CallGraph object representing the function calls
    """
    call_graph = CallGraph()

    if not cflow_output:
        return call_graph

    lines = cflow_output.splitlines() if isinstance(cflow_output, str) else cflow_output

    stack: List[str] = []
    matched = skipped = 0

    for line in lines:
        entry = parse_cflow_line(line, indent_unit)
        if entry is None:
            skipped += 1
            continue
        matched += 1

        call_graph.add_function(entry.to_function())

        depth = entry.depth
        del stack[depth:]
        if len(stack) < depth:
            logger.debug(f"Depth jumps to {depth} at '{entry.name}', treating it as a root call")
            stack.extend([ROOT] * (depth - len(stack)))
        stack.append(entry.name)

        parent = stack[depth - 1] if depth > 0 else ROOT
        call_graph.add_relation(parent, entry.name)

    logger.debug(f"Parsed {matched} cflow entries, skipped {skipped} lines; "
                 f"{len(call_graph.functions)} functions, {len(call_graph.relations)} relations")
    return call_graph
