"""Inspector — граница с редактором свойств хоста."""

from .field import BigNumberField, CommitResult, FieldView

__all__ = [
    "BigNumberField",
    "CommitResult",
    "FieldView",
]
