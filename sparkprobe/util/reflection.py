# (c) Copyright IBM Corp. 2025

"""
Reflective access to objects owned by a host framework loaded in this
interpreter.  Nothing here imports the host framework: a module that has not
been loaded by the host cannot hold a live object worth reading.
"""

import sys
from typing import Any


def load_class(class_name: str) -> Any:
    """
    Resolves a fully qualified "package.module.Class" name against the
    modules already loaded in this interpreter.

    @param class_name: fully qualified class name
    @return: the class object
    @raise LookupError: when the module is not loaded or has no such class
    """
    module_name, _, attr_name = class_name.rpartition(".")
    if not module_name or not attr_name:
        raise LookupError(f"Not a fully qualified class name: {class_name}")

    module = sys.modules.get(module_name)
    if module is None:
        raise LookupError(f"Module not loaded: {module_name}")

    try:
        return getattr(module, attr_name)
    except AttributeError:
        raise LookupError(f"Class {attr_name} not found in {module_name}") from None


def invoke_static_accessor_chain(class_name: str, method_chain: str) -> Any:
    """
    Walks a dotted accessor chain starting at a class.

    Segments ending in "()" are invoked without arguments, the others are
    attribute reads:  "getActiveSession().conf"

    @param class_name: fully qualified class name the chain starts from
    @param method_chain: dotted chain of accessors
    @return: the object at the end of the chain, possibly None
    """
    current = load_class(class_name)

    for segment in method_chain.split("."):
        if current is None:
            return None

        if segment.endswith("()"):
            current = invoke_method(current, segment[:-2])
        else:
            current = getattr(current, segment)

    return current


def invoke_method(obj: Any, method_name: str, *args: Any) -> Any:
    """
    Invokes <method_name> on <obj> with the given positional arguments.

    @raise TypeError: when the attribute exists but is not callable
    """
    method = getattr(obj, method_name)
    if not callable(method):
        raise TypeError(f"{type(obj).__name__}.{method_name} is not callable")
    return method(*args)
