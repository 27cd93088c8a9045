"""Construction helpers: @action, @producer, @receiver, @transformer, @bi_transformer."""

from klaw_failable.decorators.failable import (
    action,
    bi_transformer,
    producer,
    receiver,
    transformer,
)

__all__ = [
    'action',
    'bi_transformer',
    'producer',
    'receiver',
    'transformer',
]
