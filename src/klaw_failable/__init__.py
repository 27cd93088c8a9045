"""klaw-failable: callables that declare how they may fail.

Wraps plain callables of five shapes (Action, Producer, Receiver, Transformer,
BiTransformer) together with the exception type they may raise, and adapts
them for code that expects an ordinary callable:

- ``strict()`` raises a single FailureWrapper around the original failure,
- ``suppressing()`` ignores failures and returns None instead.

Flat imports (preferred):
    from klaw_failable import action, producer, receiver, transformer, bi_transformer
    from klaw_failable import FailureWrapper, Ok, Err, Result

Submodule imports (for organization):
    from klaw_failable.shapes import Action, BiTransformer
    from klaw_failable.errors import FailureWrapper
"""

from klaw_failable._config import FailableConfig, get_config, init
from klaw_failable._logging import configure_logging, get_logger

# Construction helpers
from klaw_failable.decorators import (
    action,
    bi_transformer,
    producer,
    receiver,
    transformer,
)
from klaw_failable.errors import FailureWrapper
from klaw_failable.result import Err, Ok, Result

# Shapes
from klaw_failable.shapes import (
    Action,
    BiTransformer,
    Failable,
    Producer,
    Receiver,
    Transformer,
)

__all__ = [
    'Action',
    'BiTransformer',
    'Err',
    'Failable',
    # Config
    'FailableConfig',
    'FailureWrapper',
    'Ok',
    'Producer',
    'Receiver',
    'Result',
    'Transformer',
    'action',
    'bi_transformer',
    'configure_logging',
    'get_config',
    'get_logger',
    'init',
    'producer',
    'receiver',
    'transformer',
]
