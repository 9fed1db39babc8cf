"""utils/metrics.py"""
import numpy as np

from config.config import DATA_CONFIG


def calculate_strength_ratio(flags):
    """强密码占比；空输入返回0"""
    arr = np.asarray(getattr(flags, 'values', flags), dtype=bool).ravel()
    if arr.size == 0:
        return 0.0
    return float(arr.mean())


def calculate_count_summary(counts):
    """计数列的汇总统计（总数、均值、最大值）"""
    arr = np.asarray(getattr(counts, 'values', counts), dtype=float).ravel()
    if arr.size == 0:
        return {'total': 0, 'mean': 0.0, 'max': 0}
    return {
        'total': int(arr.sum()),
        'mean': float(arr.mean()),
        'max': int(arr.max()),
    }


def count_failed_evaluations(valid_flags):
    """结构不合法（无法求值）的表达式数量"""
    arr = np.asarray(getattr(valid_flags, 'values', valid_flags), dtype=bool).ravel()
    return int((~arr).sum())


def count_non_finite_results(results):
    """
    结果为 inf / nan 的表达式数量。
    包括除以0和求值失败的行。
    """
    arr = np.asarray(getattr(results, 'values', results), dtype=float).ravel()
    return int((~np.isfinite(arr)).sum())


def summarize_results(transformed):
    """汇总 apply_processors_and_return_transformed 的结果列"""
    output_columns = DATA_CONFIG['output_columns']
    summary = {'rows': len(transformed)}

    if output_columns['digits'] in transformed.columns:
        summary['digits'] = calculate_count_summary(transformed[output_columns['digits']])
    if output_columns['words'] in transformed.columns:
        summary['words'] = calculate_count_summary(transformed[output_columns['words']])
    if output_columns['strong'] in transformed.columns:
        summary['strong_ratio'] = calculate_strength_ratio(transformed[output_columns['strong']])
    if output_columns['valid'] in transformed.columns:
        summary['failed_expressions'] = count_failed_evaluations(transformed[output_columns['valid']])
    if output_columns['expression'] in transformed.columns:
        summary['non_finite_results'] = count_non_finite_results(transformed[output_columns['expression']])

    return summary
