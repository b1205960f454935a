from .requirement import Requirement
from .dynamic import DynamicSatisfiability
from .general import GeneralSatisfiability, Expectative
