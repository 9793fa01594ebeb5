from symbex.types.atom import Atom
from symbex.types.nil import NIL, Value
from symbex.types.slist import SList
from symbex.types.user_fn import UserFunction


def lambda_form(node, env, names, values) -> Value:
    # (lambda (params...) body) registers an anonymous operator under a
    # generated name and returns that name. The registration is single use:
    # the first application removes it, and a later application of the same
    # name finds nothing bound and comes back as plain data.
    if len(node) != 3:
        return NIL

    _, params, body = node
    if not isinstance(params, SList):
        return NIL

    name = env.gen_name()
    env.define(name, UserFunction(name, params, body, one_shot=True))
    return Atom(name)
