from lithp.evaluation.evaluator import lval_eval
from lithp.evaluation.operators import Operator, builtin_op

__all__ = ["lval_eval", "Operator", "builtin_op"]
