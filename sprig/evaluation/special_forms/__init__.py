"""Registry of special forms for the Sprig evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so
these symbols always name the special form in head position.
"""

from sprig.types.symbol import Symbol, QUOTE, QUASIQUOTE, UNQUOTE, UNQUOTE_SPLICE
from sprig.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, unquote_form, unquote_splice_form
from sprig.evaluation.special_forms.lambda_form import lambda_form
from sprig.evaluation.special_forms.define_form import define_form
from sprig.evaluation.special_forms.let_form import let_form
from sprig.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    QUASIQUOTE: quasiquote_form,
    UNQUOTE: unquote_form,
    UNQUOTE_SPLICE: unquote_splice_form,
    Symbol("lambda"): lambda_form,
    Symbol("define"): define_form,
    Symbol("let"): let_form,
    Symbol("if"): if_form,
}
