from schemelet import SExpression
from schemelet.errors import MalformedSyntaxError
from schemelet.types.symbol import Symbol


def expect_length(keyword: str, tail: list[SExpression], count: int, shape: str) -> None:
    """Raise MalformedSyntaxError unless `tail` has exactly `count` elements."""
    if len(tail) != count:
        problem = "too few" if len(tail) < count else "too many"
        raise MalformedSyntaxError(
            f"{problem} items in {keyword}, expected {shape}",
            [Symbol(keyword), *tail],
        )


def expect_symbol(keyword: str, item: SExpression, what: str) -> Symbol:
    if not isinstance(item, Symbol):
        raise MalformedSyntaxError(f"{what} in {keyword} must be a symbol, got {item!r}", item)
    return item
