"""
pyqt-stateview: schema-driven inspector and request editor for PyQt6.

Renders any value built from a small set of shapes (primitive, enumeration,
optional, array, record, reference, plugin) as a read-only tree, and builds
well-typed request payloads through composable editors.

Architecture:
- Shapes: pure descriptors, symbol tables, array operations, type resolution
- Core: background tasks and logging setup
- Protocols: widget ABCs, session context, registries, configuration
- Services: enum dispatch, signal blocking, notifications
- Forms/Widgets: the ShapeDispatcher and one handler per shape kind

Example:
    from pyqt_stateview.shapes import shape_from_type
    from pyqt_stateview.forms import ShapeDispatcher

    dispatcher = ShapeDispatcher(session=context)
    view = dispatcher.create_display(shape_from_type(PlayerState), state)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
