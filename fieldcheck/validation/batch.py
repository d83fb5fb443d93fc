"""
Batch Field Validator — one validator, shared options, many fields.
"""
from typing import Callable, Iterable

from fieldcheck.models.changeset import HostRecord
from fieldcheck.models.options import OptionsLike, coerce_options

FieldValidator = Callable[[HostRecord, str, OptionsLike], HostRecord]


def validate_many(
    record: HostRecord,
    field_names: Iterable[str],
    validator_fn: FieldValidator,
    options: OptionsLike = None,
) -> HostRecord:
    """
    Fold *validator_fn* over *field_names* in list order, threading the
    updated record through each call. Errors therefore appear in field order.
    """
    opts = coerce_options(options)
    for field_name in field_names:
        record = validator_fn(record, field_name, opts)
    return record
