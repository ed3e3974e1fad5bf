from .validation_errors import DuplicateModelError as DuplicateModelError
