"""Registry of special forms for the simple-lisp evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary function application, so these
names can never be shadowed by defun.
"""

from simple_lisp.types.symbol import Symbol
from simple_lisp.evaluation.special_forms.quote_form import quote_form
from simple_lisp.evaluation.special_forms.if_form import if_form
from simple_lisp.evaluation.special_forms.defun_form import defun_form

SPECIAL_FORMS = {
    Symbol("quote"): quote_form,
    Symbol("if"): if_form,
    Symbol("defun"): defun_form,
}
