"""Failable callable shapes: Action, Producer, Receiver, Transformer, BiTransformer."""

from klaw_failable.shapes._base import Failable
from klaw_failable.shapes.action import Action
from klaw_failable.shapes.bi_transformer import BiTransformer
from klaw_failable.shapes.producer import Producer
from klaw_failable.shapes.receiver import Receiver
from klaw_failable.shapes.transformer import Transformer

__all__ = [
    'Action',
    'BiTransformer',
    'Failable',
    'Producer',
    'Receiver',
    'Transformer',
]
