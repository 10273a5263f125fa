"""Registry of special forms for the Quill evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table to dispatch special forms before ordinary
function application. Each handler takes (tail, env, evaluate_fn) and returns
either a finished value or a TailCall for the evaluator loop to continue with.
"""

from quill.types.symbol import Symbol
from quill.evaluation.special_forms.define_form import define_form
from quill.evaluation.special_forms.defmacro_form import defmacro_form
from quill.evaluation.special_forms.let_form import let_form
from quill.evaluation.special_forms.progn_form import progn_form
from quill.evaluation.special_forms.if_form import if_form
from quill.evaluation.special_forms.lambda_form import lambda_form
from quill.evaluation.special_forms.quote_forms import quote_form, quasiquote_form, quasiquoteexpand_form
from quill.evaluation.special_forms.macroexpand_forms import macroexpand_form
from quill.evaluation.special_forms.try_catch_form import try_form

SPECIAL_FORMS = {
    Symbol("def!"): define_form,
    Symbol("defmacro!"): defmacro_form,
    Symbol("let*"): let_form,
    Symbol("do"): progn_form,
    Symbol("if"): if_form,
    Symbol("fn*"): lambda_form,
    Symbol("quote"): quote_form,
    Symbol("quasiquote"): quasiquote_form,
    Symbol("quasiquoteexpand"): quasiquoteexpand_form,
    Symbol("macroexpand"): macroexpand_form,
    Symbol("try*"): try_form,
}
