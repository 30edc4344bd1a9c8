from .base import EMPTY, FunctionDecorator
from .extension import extension_func, ExtensionFunc
