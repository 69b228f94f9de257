"""Statement builders."""

from .base_statement import DatabaseStatement
from .insert_statement import DatabaseInsert

__all__ = [
    'DatabaseStatement',
    'DatabaseInsert'
]
