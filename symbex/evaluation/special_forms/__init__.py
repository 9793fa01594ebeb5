"""Registry of special forms for the Symbex evaluator.

Maps operator names to handlers that receive their arguments unevaluated.
The builtin table marks these as special, and the evaluator skips argument
evaluation for any list headed by one of these names.
"""

from symbex.evaluation.special_forms.quote_forms import quote_form
from symbex.evaluation.special_forms.cond_form import cond_form
from symbex.evaluation.special_forms.define_form import define_form
from symbex.evaluation.special_forms.lambda_form import lambda_form

SPECIAL_FORMS = {
    "quote": quote_form,
    "cond": cond_form,
    "define": define_form,
    "lambda": lambda_form,
}
