"""Interactive prompt elements.

Usage:
    from nano_select.elements import MenuSelect
    from nano_select.engine import SelectionEngine
    from nano_select.models import static_spec

    engine = SelectionEngine()
    index = await engine.run(MenuSelect(static_spec("Pick one:", ["a", "b"])))
"""

from .base import ActiveElement
from .menu_select import MenuSelect
from .search_select import NavSignal, SearchSelect

__all__ = [
    "ActiveElement",
    "MenuSelect",
    "SearchSelect",
    "NavSignal",
]
