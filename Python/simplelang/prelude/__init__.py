from . import arithmetic

eval_arithmetic = arithmetic.eval_arithmetic
