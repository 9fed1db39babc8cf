"""数据加载和批量处理模块"""
import pandas as pd
import numpy as np
import logging

from config.config import DATA_CONFIG
from core import (
    ExpressionError, ExpressionEvaluator, ExpressionValidator,
    PasswordStrengthChecker, TextCounter
)

logger = logging.getLogger(__name__)


def load_text_dataset(file_path, columns=None):
    """
    加载CSV文本数据集，所有列按字符串读取。

    Parameters:
    - file_path: CSV文件路径
    - columns: 必须存在的列名列表，None表示不检查

    Returns:
    - dataset: DataFrame
    """
    logger.info(f"Loading dataset from {file_path}")
    dataset = pd.read_csv(file_path, dtype=str)

    for column in columns or []:
        if column not in dataset.columns:
            raise ValueError(f"Column '{column}' not found in dataset.")

    logger.info(f"Dataset shape: {dataset.shape}")
    return dataset


def check_missing_values(dataset, dataset_name):
    """
    检查数据集中的缺失值

    Parameters:
    - dataset: 要检查缺失值的DataFrame
    - dataset_name: 数据集名称（用于日志）

    Returns:
    - missing_columns: 每列缺失数量（只含有缺失的列）
    """
    missing_values = dataset.isnull().sum()
    missing_columns = missing_values[missing_values > 0]

    if not missing_columns.empty:
        logger.warning(f'Missing values in {dataset_name} dataset:')
        for column, count in missing_columns.items():
            logger.warning(f"  - {column}: {count}")
    else:
        logger.info(f'No missing values in {dataset_name} dataset.')
    return missing_columns


def handle_missing_values(dataset, columns):
    """文本列的缺失值填为空字符串"""
    dataset = dataset.copy()
    for column in columns:
        dataset[column] = dataset[column].fillna('')
    return dataset


def _safe_evaluate(expression):
    """求值失败时记录错误并返回NaN"""
    try:
        return ExpressionEvaluator.evaluate(expression)
    except ExpressionError as e:
        logger.error(f"Error evaluating expression '{expression[:50]}': {e}")
        return np.nan


def apply_processors_and_return_transformed(dataset, text_column=None, password_column=None,
                                            expression_column=None):
    """
    对数据集的指定列应用文本处理，返回附加结果列的新数据集

    Parameters:
    - dataset: 原始DataFrame
    - text_column: 统计数字/单词的列
    - password_column: 检查密码强度的列
    - expression_column: 表达式求值的列

    Returns:
    - transformed: 包含原始列和结果列的数据集
    """
    used_columns = [c for c in (text_column, password_column, expression_column) if c]
    for column in used_columns:
        if column not in dataset.columns:
            raise ValueError(f"Column '{column}' not found in dataset.")

    output_columns = DATA_CONFIG['output_columns']
    transformed = handle_missing_values(dataset, used_columns)

    if text_column:
        texts = transformed[text_column]
        transformed[output_columns['digits']] = texts.map(TextCounter.count_digits).astype(int)
        transformed[output_columns['words']] = texts.map(TextCounter.count_words).astype(int)

    if password_column:
        passwords = transformed[password_column]
        transformed[output_columns['strong']] = passwords.map(PasswordStrengthChecker.is_strong).astype(bool)

    if expression_column:
        expressions = transformed[expression_column]
        valid = expressions.map(ExpressionValidator.is_valid_expression).astype(bool)
        failed = int((~valid).sum())
        if failed:
            logger.warning(f"{failed} of {len(valid)} expressions are malformed")
        transformed[output_columns['valid']] = valid
        transformed[output_columns['expression']] = expressions.map(_safe_evaluate).astype(float)

    logger.info(f"Transformed dataset shape: {transformed.shape}")
    return transformed
