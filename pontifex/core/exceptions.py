"""
Pontifex密码业务异常定义
牌组和配置错误在构造时立即抛出，密钥流生成过程中不再做任何校验
"""


class PontifexError(Exception):
    """Pontifex密码基础异常类"""
    pass


class InvalidCardError(PontifexError, ValueError):
    """无法识别的卡牌字符串"""
    pass


class InvalidDeckError(PontifexError, ValueError):
    """
    牌组不满足不变量: 张数不是54、存在重复牌、
    缺少或重复王牌、或包含无法识别的卡牌
    """
    pass


class CipherConfigError(PontifexError, ValueError):
    """密码配置错误异常"""
    pass


class DeckFileError(PontifexError):
    """牌组文件无法读取或格式错误"""
    pass
