"""
Tree visualization utilities
"""
from typing import List, Union

from id3tree.decision_tree import DecisionTree, Leaf, Node, check_node

BRANCH_PADDING = "| "


def render_diagram(node: Node, padding: str = "") -> str:
    """
    Pre-order text diagram of a tree.

    Leaves print as " 1" or " 0" right after the branch that reaches them.
    Each decision node prints its "= 0" branch, then its "= 1" branch, one
    padding level deeper than its parent.
    """
    node = check_node(node)

    if isinstance(node, Leaf):
        return (" 1" if node.value else " 0") + "\n"

    result = "\n" if padding else ""
    result += f"{padding}{node.attribute_name} = 0 :"
    result += render_diagram(node.left, padding + BRANCH_PADDING)
    result += f"{padding}{node.attribute_name} = 1 :"
    result += render_diagram(node.right, padding + BRANCH_PADDING)
    return result


class TreeVisualizer:
    """Visualize decision trees"""

    def __init__(self, tree: Union[DecisionTree, Node]):
        self.root = tree.root if isinstance(tree, DecisionTree) else check_node(tree)

    def to_text(self) -> str:
        """Generate text representation"""
        return render_diagram(self.root)

    def to_dot(self) -> str:
        """Generate DOT format"""
        lines = ["digraph decision_tree {"]
        self._dot_node(self.root, 1, lines)
        lines.append("}")
        return "\n".join(lines)

    def _dot_node(self, node: Node, node_id: int, lines: List[str]):
        node = check_node(node)

        if isinstance(node, Leaf):
            lines.append(f'  Q{node_id} [shape="box", label="{int(node.value)}"];')
            return

        lines.append(f'  Q{node_id} [label="{node.attribute_name}?"];')

        left_child = node_id * 2
        right_child = node_id * 2 + 1
        lines.append(f'  Q{node_id} -> Q{left_child} [label="no"];')
        lines.append(f'  Q{node_id} -> Q{right_child} [label="yes"];')

        self._dot_node(node.left, left_child, lines)
        self._dot_node(node.right, right_child, lines)
