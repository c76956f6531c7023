"""
Pontifex Tests Module - 测试框架
"""
