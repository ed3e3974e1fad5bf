from typing import List


class DuplicateModelError(ValueError):
    def __init__(self, model_name: str, model_names: List[str]):
        self.model_name = model_name
        self.model_names = model_names

        super().__init__(
            f"Model {model_name} is documented more than once - documented models: {', '.join(model_names)}"
        )
