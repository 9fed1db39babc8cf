"""配置文件"""
import logging

logger = logging.getLogger(__name__)

# 密码强度参数
PASSWORD_CONFIG = {
    "min_length": 8,  # 至少8个字符
}

# 表达式求值参数
EXPRESSION_CONFIG = {
    "tolerance": 1e-9,  # results_match 的浮点容差
    "max_length": 0,  # 0 表示不限制长度
}

# 数据路径与列名
DATA_CONFIG = {
    "default_data_path": "/path/to/texts.csv",
    "text_column": "text",
    "password_column": "password",
    "expression_column": "expression",
    "output_columns": {
        "digits": "digit_count",
        "words": "word_count",
        "strong": "is_strong",
        "expression": "expression_result",
        "valid": "expression_valid",
    },
}

# 日志配置
LOGGING_CONFIG = {
    "level": "INFO",
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


# 验证配置
def validate_config():
    """验证配置的合理性"""
    assert PASSWORD_CONFIG["min_length"] >= 1, "密码最小长度至少为1"
    assert EXPRESSION_CONFIG["tolerance"] > 0, "容差必须为正数"
    assert EXPRESSION_CONFIG["max_length"] >= 0, "max_length 不能为负数"
    output_columns = list(DATA_CONFIG["output_columns"].values())
    assert len(set(output_columns)) == len(output_columns), "输出列名不能重复"
    assert isinstance(logging.getLevelName(LOGGING_CONFIG["level"]), int), "未知的日志级别"
    logger.info("Configuration validated successfully!")
