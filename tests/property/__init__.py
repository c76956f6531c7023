"""
Property Tests - 性质测试

该目录包含基于hypothesis的性质测试，验证加解密往返、长度保持和牌组不变量。

Test Structure:
    test_cipher_properties.py: 密码性质测试
"""
