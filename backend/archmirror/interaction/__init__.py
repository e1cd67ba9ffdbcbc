from archmirror.interaction.drag import DragSession, pick_node, move_node

__all__ = [
    "DragSession",
    "pick_node",
    "move_node",
]
