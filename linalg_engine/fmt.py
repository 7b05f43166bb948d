from typing import List, Any
import sympy


def pcformat(fstr, *vals):
    """
    Format a percent sign string with the given values.
    Example:
    >>> pcformat(r"%s + %s = %s", 1, 2, 3)
    "1 + 2 = 3"
    """
    formatted_vals = tuple(cformat(val) for val in vals)
    return fstr % formatted_vals


def cformat(val, arg_of=None):
    if hasattr(val, "cformat") and callable(val.cformat):
        return val.cformat(arg_of)
    if isinstance(val, str):
        return val
    if isinstance(val, float) and val.is_integer():
        return str(int(val))
    try:
        res = sympy.latex(val)
    except (TypeError, ValueError, sympy.SympifyError):
        return str(val)
    if arg_of == "*" and res.startswith("-"):
        return f"({res})"
    return res


def make_latex_matrix(items: List[List[Any]]) -> str:
    start = r"\begin{pmatrix}"
    end = r"\end{pmatrix}"
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    return start + (r"\\[0.1em]" + "\n").join(rows) + end


def make_latex_augmented_matrix(items: List[List[Any]], bar_col: int = None) -> str:
    """Render rows with a vertical bar drawn before column ``bar_col``."""
    if not items or len(items[0]) <= 1:
        return make_latex_matrix(items)
    if bar_col is None:
        bar_col = len(items[0]) - 1
    rows = [r" & ".join([cformat(item) for item in row]) for row in items]
    n_cols = len(items[0])
    col_format = "".join([("|c" if j == bar_col else "c") for j in range(n_cols)])
    start = r"\left(\begin{array}{" + col_format + "}\n"
    end = "\n" + r"\end{array}\right)"
    return start + (r" \\[0.1em]" + "\n").join(rows) + end
