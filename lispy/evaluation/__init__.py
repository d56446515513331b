from lispy.evaluation.evaluator import evaluate, evaluate_toplevel
from lispy.evaluation.apply import apply

__all__ = ["evaluate", "evaluate_toplevel", "apply"]
