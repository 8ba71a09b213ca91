# utils/tree_visualizer.py
# This file is part of Equiv - Bounded Propositional Law Derivation
#
# Graphviz rendering of expression trees and derivations

import os
from typing import TYPE_CHECKING, Optional

import graphviz

from formula import ast_nodes as ast
from formula.printer import to_text
from utils.logger import get_logger

if TYPE_CHECKING:
    from derivation.explain import Derivation

VISUALIZATION_OUTPUT_FOLDER = "derivation_visualizations"

_NODE_LABELS = {
    ast.Or: "|",
    ast.And: "&",
    ast.Not: "-",
    ast.TrueConst: "T",
    ast.FalseConst: "F",
}


def _node_label(expr: ast.Expr) -> str:
    if isinstance(expr, ast.Var):
        return expr.name
    return _NODE_LABELS[type(expr)]


def expression_to_dot(expr: ast.Expr, title: Optional[str] = None) -> graphviz.Digraph:
    """
    Builds a Graphviz graph of an expression tree.

    Every node is labelled with its connective (or constant, or variable) and
    its Gorn address, written with the same digits as Path: 1 for the left
    child, 2 for the right one, 0 for the node itself.

    Args:
        expr: Expression to draw.
        title: Graph comment; defaults to the formula text.
    """
    dot = graphviz.Digraph(comment=title or to_text(expr))
    dot.attr(rankdir="TB", nodesep="0.4", ranksep="0.4")

    def add(node: ast.Expr, address: str) -> str:
        node_id = f"n{address.replace(' ', '')}" if address else "root"
        label = f"{_node_label(node)}\n[{(address + ' 0').strip()}]"
        shape = "circle" if isinstance(node, (ast.Var, ast.TrueConst, ast.FalseConst)) else "box"
        dot.node(node_id, label, shape=shape, fontsize="11")

        if isinstance(node, (ast.Or, ast.And)):
            dot.edge(node_id, add(node.left, f"{address} 1".strip()), label="1")
            dot.edge(node_id, add(node.right, f"{address} 2".strip()), label="2")
        elif isinstance(node, ast.Not):
            dot.edge(node_id, add(node.operand, f"{address} 1".strip()), label="1")
        return node_id

    add(expr, "")
    return dot


def derivation_to_dot(derivation: "Derivation") -> graphviz.Digraph:
    """
    Builds a Graphviz graph of a derivation: one node per formula, one edge
    per rewrite, labelled with the rule and the position it was applied at.
    """
    dot = graphviz.Digraph(comment=f"Derivation of {to_text(derivation.start)}")
    dot.attr(rankdir="TB")

    for i, formula in enumerate(derivation.formulas()):
        is_goal = isinstance(formula, ast.TrueConst)
        dot.node(
            f"f{i}",
            to_text(formula),
            shape="box",
            style="filled",
            fillcolor="palegreen" if is_goal else "lightgrey",
        )

    for i, step in enumerate(derivation.steps):
        dot.edge(f"f{i}", f"f{i + 1}", label=f"{step.rule_name}\n[{step.path}]", fontsize="10")

    return dot


def render_dot(dot: graphviz.Digraph, base_filename: str, fmt: str = "png") -> Optional[str]:
    """
    Renders a graph into the visualization folder.

    Rendering needs the Graphviz `dot` executable; when it is missing, a
    warning is logged and nothing is written.

    Args:
        dot: Graph to render.
        base_filename: The base name for the output file.
        fmt: The output format for the image (e.g., "png", "svg").

    Returns:
        Path of the written file, or None if rendering failed.
    """
    logger = get_logger()

    if not os.path.exists(VISUALIZATION_OUTPUT_FOLDER):
        try:
            os.makedirs(VISUALIZATION_OUTPUT_FOLDER)
            logger.info(f"Created directory for visualizations: {VISUALIZATION_OUTPUT_FOLDER}")
            output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)
        except OSError as e:
            logger.error(f"Could not create directory {VISUALIZATION_OUTPUT_FOLDER}: {e}. "
                         f"Saving to current directory instead.")
            output_path = base_filename
    else:
        output_path = os.path.join(VISUALIZATION_OUTPUT_FOLDER, base_filename)

    try:
        written = dot.render(output_path, format=fmt, view=False, cleanup=True)
        logger.info(f"Visualization saved to {written}")
        return written
    except graphviz.ExecutableNotFound:
        logger.warning("Graphviz 'dot' executable not found. Skipping visualization. "
                       "To enable, install Graphviz: https://graphviz.org/download/")
    except (graphviz.CalledProcessError, OSError) as e:
        logger.warning(f"Failed to render visualization to {output_path}.{fmt}: {e}")
    return None
