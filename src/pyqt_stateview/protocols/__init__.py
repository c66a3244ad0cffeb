"""
Widget protocol definitions, adapters and external interfaces.

ABC-based widget contracts, the session context handed down the render tree,
and registries through which applications plug in user lookups and plugin
elements.
"""

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
    Disposable,
)
from .widget_adapters import (
    PyQtWidgetMeta,
    ShapeDisplayWidget,
    ShapeEditorWidget,
)
from .form_config import StateViewConfig, set_config, get_config
from .session import (
    Response,
    ResponseType,
    UserDescriptor,
    MethodSpec,
    SessionContext,
)
from .plugin_element import (
    PluginElement,
    PluginHandle,
    register_plugin_element,
    unregister_plugin_element,
    get_plugin_element_factory,
)
from .user_lookup import (
    UserLookupProtocol,
    register_user_lookup,
    unregister_user_lookup,
    get_user_lookup,
)

__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "Disposable",
    "PyQtWidgetMeta",
    "ShapeDisplayWidget",
    "ShapeEditorWidget",
    "StateViewConfig",
    "set_config",
    "get_config",
    "Response",
    "ResponseType",
    "UserDescriptor",
    "MethodSpec",
    "SessionContext",
    "PluginElement",
    "PluginHandle",
    "register_plugin_element",
    "unregister_plugin_element",
    "get_plugin_element_factory",
    "UserLookupProtocol",
    "register_user_lookup",
    "unregister_user_lookup",
    "get_user_lookup",
]
