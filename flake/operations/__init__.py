from flake.operations.base_operation import BaseOperation
from flake.operations.cut.cut_operation import CutOperation, PressOutcome, PressResult
__all__ = [
    "BaseOperation",
    "CutOperation",
    "PressOutcome",
    "PressResult",
]
