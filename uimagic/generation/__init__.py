from .code import CodeGenerator
from .constraints import apply_constraints
from .selector import VariantSelector
from .templates import TemplateProvider

__all__ = ["CodeGenerator", "TemplateProvider", "VariantSelector", "apply_constraints"]
