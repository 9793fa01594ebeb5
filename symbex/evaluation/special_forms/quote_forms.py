from symbex.types.nil import NIL, Value


def quote_form(node, env, names, values) -> Value:
    """(quote X) -> X, unevaluated."""
    if len(node) != 2:
        return NIL
    return node[1]
