"""
Domain Specific Language for single-letter integer variable expressions.

An expression is validated, tokenized, parsed into an evaluation tree and
evaluated against a session's variable store.
"""

from .tokenizer import Tokenizer
from .validator import Validator
from .parser import Parser
from .evaluator import Evaluator
from .store import VariableStore

__all__ = ['Tokenizer', 'Validator', 'Parser', 'Evaluator', 'VariableStore']
