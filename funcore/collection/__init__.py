from .sequence import sequence_either, sequence_option, sequence_task_either
from .traverse import traverse_either, traverse_option, traverse_task_either
from .validate import Validator, apply_sequentially, validate_all, validator

__all__ = (
    # Option
    "sequence_option",
    "traverse_option",
    # Either
    "sequence_either",
    "traverse_either",
    # TaskEither
    "sequence_task_either",
    "traverse_task_either",
    # Validation
    "Validator",
    "apply_sequentially",
    "validate_all",
    "validator",
)
