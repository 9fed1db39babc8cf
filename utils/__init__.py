"""工具模块"""
from .metrics import (
    calculate_strength_ratio, calculate_count_summary,
    count_failed_evaluations, count_non_finite_results, summarize_results
)

__all__ = [
    'calculate_strength_ratio', 'calculate_count_summary',
    'count_failed_evaluations', 'count_non_finite_results', 'summarize_results'
]
