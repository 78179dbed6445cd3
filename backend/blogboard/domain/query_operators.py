from enum import Enum


class FilterOperator(str, Enum):
    eq = "eq"
    neq = "neq"
    gt = "gt"
    gte = "gte"
    lt = "lt"
    lte = "lte"
    like = "like"
    ilike = "ilike"
    in_ = "in"
    nin = "nin"
    null = "null"
    notnull = "notnull"


VALUELESS_OPERATORS = frozenset({FilterOperator.null, FilterOperator.notnull})


class SortOrder(str, Enum):
    asc = "asc"
    desc = "desc"
