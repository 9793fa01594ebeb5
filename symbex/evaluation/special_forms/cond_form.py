"""Special form: cond, the multi-branch conditional."""

from symbex.evaluation.evaluator import evaluate
from symbex.types.nil import NIL, Value, truthy
from symbex.types.slist import SList


def cond_form(node, env, names, values) -> Value:
    """Evaluate a (cond (test consequent) ...).

    Clauses are tried in order. Each test is evaluated only when every earlier
    test came back nil; the first test that is not nil has its consequent
    evaluated and returned, and no later clause is touched. Reaching a clause
    that is not a two-element list ends the form with nil, as does running out
    of clauses.
    """
    if len(node) < 2:
        return NIL
    for clause in node[1:]:
        if not isinstance(clause, SList) or len(clause) != 2:
            return NIL
        test, consequent = clause
        if truthy(evaluate(test, env, names, values)):
            return evaluate(consequent, env, names, values)

    # No clause matched
    return NIL
