from stylebox.style.loader import load_tree, load_tree_file
from stylebox.style.node import Display, StyledElement, StyledNode

__all__ = ["Display", "StyledNode", "StyledElement", "load_tree", "load_tree_file"]
