"""Registry of special forms for the schemelet evaluator.

The set of special forms is closed: `SpecialForm` enumerates the keywords and
SPECIAL_FORMS maps each keyword's interned Symbol to its handler. The
evaluator consults this table before ordinary procedure application, so the
keywords are recognized regardless of any binding of the same name.
"""

from enum import Enum
from typing import Callable, Optional

from schemelet import LispValue, SExpression
from schemelet.types.symbol import Symbol
from schemelet.evaluation.special_forms.begin_form import begin_form
from schemelet.evaluation.special_forms.define_form import define_form
from schemelet.evaluation.special_forms.lambda_form import lambda_form
from schemelet.evaluation.special_forms.let_form import let_form
from schemelet.evaluation.special_forms.quote_form import quote_form
from schemelet.evaluation.special_forms.set_form import set_form

SpecialFormHandler = Callable[..., LispValue]


class SpecialForm(Enum):
    DEFINE = "define"
    LET = "let"
    SET = "set!"
    LAMBDA = "lambda"
    QUOTE = "quote"
    BEGIN = "begin"

    @property
    def symbol(self) -> Symbol:
        return Symbol(self.value)


_HANDLERS: dict[SpecialForm, SpecialFormHandler] = {
    SpecialForm.DEFINE: define_form,
    SpecialForm.LET: let_form,
    SpecialForm.SET: set_form,
    SpecialForm.LAMBDA: lambda_form,
    SpecialForm.QUOTE: quote_form,
    SpecialForm.BEGIN: begin_form,
}

missing = set(SpecialForm) - set(_HANDLERS)
if missing:
    raise RuntimeError(f"special forms without a handler: {sorted(f.value for f in missing)}")
del missing

SPECIAL_FORMS: dict[Symbol, SpecialFormHandler] = {
    form.symbol: handler for form, handler in _HANDLERS.items()
}


def special_form_handler(head: SExpression) -> Optional[SpecialFormHandler]:
    """Return the handler for `head`, or None if it is not a special form."""
    if not isinstance(head, Symbol):
        return None
    return SPECIAL_FORMS.get(head)
