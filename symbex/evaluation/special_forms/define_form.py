from symbex.types.atom import Atom
from symbex.types.nil import NIL, Value
from symbex.types.slist import SList
from symbex.types.user_fn import UserFunction


def define_form(node, env, names, values) -> Value:
    """
    (define name (params...) body)
    Registers a permanent user operator; the body stays unevaluated until
    the operator is applied. Always returns nil.
    """
    if len(node) != 4:
        return NIL

    _, name, params, body = node
    if not isinstance(name, Atom) or not isinstance(params, SList):
        return NIL
    env.define(name.text, UserFunction(name.text, params, body))
    return NIL
