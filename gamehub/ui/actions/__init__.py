# gamehub/ui/actions/__init__.py

"""UI action classes for Game Hub.

Action classes hold no state beyond a back-reference to MainWindow; they
translate widget signals into view-controller events.
"""

from gamehub.ui.actions.view_actions import ViewActions

__all__ = [
    "ViewActions",
]
