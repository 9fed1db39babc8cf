"""数据模块 - 文本数据集加载与批量处理"""
