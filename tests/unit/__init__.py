"""
Unit Tests - 单元测试

该目录包含卡牌、牌组、密钥流、编解码、牌组文件和命令行的单元测试。
"""
