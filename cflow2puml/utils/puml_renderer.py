"""
PlantUML class diagram generation for cflow call graphs.

Each function becomes a class whose stereotype is its source location and
whose attributes are its arguments; each call becomes a ``-->`` arrow.
All functions return lists of text fragments to be joined by the caller.
"""
import logging
from typing import Dict, List, Sequence

from cflow2puml.models.function_model import Function, Relation

logger = logging.getLogger(__name__)

START_MARKER = "@startuml"
END_MARKER = "@enduml"


def make_func(name: str, functions: Dict[str, Function]) -> List[str]:
    """
    Generate the class declaration for a function and mark it as emitted.

    Args:
        name: Function name
        functions: Function table of the call graph

    Returns:
        Fragments of the declaration block, followed by a blank line
    """
    function = functions[name]
    function.emitted = True

    out = ["class ", name, " <<", function.file_path, ":", str(function.line_number), ">> {", "\n"]
    for argument in function.arguments:
        out.extend(["  ", argument, "\n"])
    out.append("  ---\n}\n\n")
    return out


def make_classes(relations: Sequence[Relation], functions: Dict[str, Function]) -> List[str]:
    """
    Generate class declarations for every function taking part in a relation.

    Functions are declared once, in the order they are first referenced;
    the parent of a relation comes before its child.

    Args:
        relations: Relations in first-seen order
        functions: Function table of the call graph

    Returns:
        Fragments of all declaration blocks
    """
    out = []
    for relation in relations:
        names = (relation.child,) if relation.is_root else (relation.parent, relation.child)
        for name in names:
            function = functions.get(name)
            if function is None:
                logger.warning(f"Function '{name}' is referenced but was never declared, skipping it")
                continue
            if not function.emitted:
                out.extend(make_func(name, functions))
    return out


def make_relations(relations: Sequence[Relation]) -> List[str]:
    """
    Generate one arrow per relation; root relations have no arrow.

    Args:
        relations: Relations in first-seen order

    Returns:
        Fragments of the arrow lines
    """
    out = []
    for relation in relations:
        if not relation.is_root:
            out.extend([relation.parent, " --> ", relation.child, "\n"])
    return out


def make_diagram(relations: Sequence[Relation], functions: Dict[str, Function],
                 title: str = "") -> List[str]:
    """
    Generate the complete PlantUML diagram.

    The diagram has the form::

        @startuml
        title TITLE

        CLASS DECLARATIONS
        RELATIONS

        @enduml

    Args:
        relations: Relations in first-seen order
        functions: Function table; emitted flags are updated in place
        title: Optional diagram title

    Returns:
        Fragments of the diagram text
    """
    out = [START_MARKER, "\n"]
    if title:
        out.extend(["title ", title, "\n"])
    out.append("\n")
    out.extend(make_classes(relations, functions))
    out.extend(make_relations(relations))
    out.extend(["\n", END_MARKER, "\n"])
    return out
