from .comparison import ComparisonState, ToggleResult, ComparisonColumn, ComparisonRow, ComparisonView

__all__ = ["ComparisonState", "ToggleResult", "ComparisonColumn", "ComparisonRow", "ComparisonView"]
