"""
Function model for representing cflow call tree data.

This module defines the data models for the functions found in a cflow
call tree and the caller/callee relations between them.
"""
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Set

# Parent of a relation whose child has no caller in the trace
ROOT = ""


@dataclass
class Function:
    """
    Represents one function entry of a cflow call tree.

    Attributes:
        name: The function name, unique key in the call graph.
        depth: Call tree nesting level of the occurrence.
        return_type: The return type phrase, e.g. "static int".
        arguments: Argument declarations in their original order.
        file_path: Source file as reported by cflow.
        line_number: Source line as reported by cflow.
        trailing: Text following the closing angle bracket.
        emitted: Whether the declaration block has been rendered.
    """
    name: str
    depth: int = 0
    return_type: str = ""
    arguments: List[str] = field(default_factory=list)
    file_path: str = ""
    line_number: int = 0
    trailing: str = ""
    emitted: bool = False

    @property
    def location(self) -> str:
        """Return the ``file:line`` location of the function."""
        return f"{self.file_path}:{self.line_number}"


@dataclass(frozen=True)
class Relation:
    """A caller -> callee edge. An empty parent marks a root call."""
    parent: str
    child: str

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT


@dataclass
class CallGraph:
    """
    Represents a call graph of functions.

    Attributes:
        functions: Dictionary mapping function names to Function objects.
        relations: Distinct relations in first-seen order.
    """
    functions: Dict[str, Function] = field(default_factory=dict)
    relations: List[Relation] = field(default_factory=list)
    _seen: Set[Relation] = field(default_factory=set, repr=False, compare=False)

    def add_function(self, function: Function) -> None:
        """
        Add a function to the call graph, replacing any entry of the same name.

        The emitted state of a replaced entry is kept, so a function that has
        already been rendered is never rendered twice.

        Args:
            function: The Function object to add.
        """
        previous = self.functions.get(function.name)
        if previous is not None:
            function.emitted = previous.emitted
        self.functions[function.name] = function

    def add_relation(self, parent: str, child: str) -> bool:
        """
        Record a caller -> callee relation unless it is already known.

        Args:
            parent: The calling function name, or ROOT.
            child: The called function name.

        Returns:
            True if the relation was appended, False if it was a duplicate.
        """
        relation = Relation(parent, child)
        if relation in self._seen:
            return False
        self._seen.add(relation)
        self.relations.append(relation)
        return True

    def get_function(self, function_name: str) -> Optional[Function]:
        """
        Get a function from the call graph.

        Args:
            function_name: The name of the function to retrieve.

        Returns:
            The Function object if found, None otherwise.
        """
        return self.functions.get(function_name)

    def reset_emitted(self) -> None:
        """Mark every function as not yet rendered."""
        for function in self.functions.values():
            function.emitted = False
